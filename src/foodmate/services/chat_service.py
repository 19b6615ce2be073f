"""Per-order chat threads between customer, partner and the system bot."""

import logging

from foodmate.models.message_models import ChatMessage
from foodmate.models.order_models import OrderStatus

logger = logging.getLogger(__name__)

SYSTEM_SENDER = "System Bot"

STATUS_MESSAGES: dict[OrderStatus, str] = {
    OrderStatus.PREPARING: "Your order is being prepared by the restaurant!",
    OrderStatus.OUT_FOR_DELIVERY: "Your food is out for delivery and should reach you shortly!",
    OrderStatus.DELIVERED: "Enjoy your meal! Please don't forget to rate.",
}


class ChatService:
    """Keeps chat history per order."""

    def __init__(self) -> None:
        self._threads: dict[str, list[ChatMessage]] = {}

    def send_message(self, order_id: str, sender: str, text: str) -> ChatMessage:
        """Append a message to an order's thread.

        Args:
            order_id: Order the thread belongs to
            sender: Display name of the sender
            text: Message text

        Returns:
            ChatMessage: The stored message
        """
        message = ChatMessage(order_id=order_id, sender=sender, text=text)
        self._threads.setdefault(order_id, []).append(message)
        logger.debug(f"[{order_id}] {sender}: {text}")
        return message

    def auto_message(self, order_id: str, status: OrderStatus) -> ChatMessage | None:
        """Post the system message for a status, if that status has one.

        Returns:
            ChatMessage if a message was posted, None for statuses without one
        """
        text = STATUS_MESSAGES.get(status)
        if text is None:
            return None
        return self.send_message(order_id, SYSTEM_SENDER, text)

    def history(self, order_id: str) -> list[ChatMessage]:
        """Return an order's thread, empty list if there is none."""
        return list(self._threads.get(order_id, []))
