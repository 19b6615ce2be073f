"""Unit tests for notifications and order chat."""

import pytest

from foodmate.models.order_models import OrderStatus
from foodmate.services.chat_service import SYSTEM_SENDER, ChatService
from foodmate.services.notification_service import NotificationService


@pytest.mark.unit
class TestNotificationService:
    """Test suite for NotificationService."""

    def test_send_and_list(self) -> None:
        """Test that notifications are kept per user in send order."""
        service = NotificationService()
        service.send("U1001", "first")
        service.send("U1002", "other")
        service.send("U1001", "second")

        assert [n.message for n in service.list_for_user("U1001")] == ["first", "second"]
        assert len(service.list_all()) == 3
        assert service.list_for_user("U9999") == []


@pytest.mark.unit
class TestChatService:
    """Test suite for ChatService."""

    def test_threads_are_per_order(self) -> None:
        """Test that messages go to their own order's thread."""
        chat = ChatService()
        chat.send_message("O101", "Alice", "Please ring the bell")
        chat.send_message("O102", "Dan", "On my way")

        history = chat.history("O101")

        assert [(m.sender, m.text) for m in history] == [("Alice", "Please ring the bell")]
        assert chat.history("O999") == []

    def test_auto_message_for_status(self) -> None:
        """Test the system bot message for each status."""
        chat = ChatService()

        message = chat.auto_message("O101", OrderStatus.OUT_FOR_DELIVERY)

        assert message is not None
        assert message.sender == SYSTEM_SENDER
        assert "out for delivery" in message.text

    @pytest.mark.parametrize("status", [OrderStatus.PENDING, OrderStatus.CANCELLED])
    def test_no_auto_message_for_other_statuses(self, status: OrderStatus) -> None:
        """Test that statuses without a bot message post nothing."""
        chat = ChatService()

        assert chat.auto_message("O101", status) is None
        assert chat.history("O101") == []

    def test_history_is_a_copy(self) -> None:
        """Test that callers cannot modify the stored thread."""
        chat = ChatService()
        chat.send_message("O101", "Alice", "Hi")

        chat.history("O101").clear()

        assert len(chat.history("O101")) == 1
