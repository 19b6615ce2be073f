"""Checkout service running the simulated payment before placement."""

import logging
from dataclasses import dataclass

from foodmate.models.order_models import Order, OrderStatus
from foodmate.observability.metrics import record_payment_declined
from foodmate.payments.base_payment import PaymentMethod
from foodmate.services.fulfillment_service import FulfillmentService

logger = logging.getLogger(__name__)


@dataclass
class CheckoutResult:
    """Result of a checkout attempt.

    Attributes:
        success: Whether payment went through and the order was placed
        order: The order, placed on success and cancelled on a declined payment
        payment_mode: Display name of the payment method used
        error_message: Error message if checkout failed, None otherwise
    """

    success: bool
    order: Order
    payment_mode: str
    error_message: str | None = None


class CheckoutService:
    """Service charging a pending order and handing it to fulfillment.

    A declined payment cancels the order; it is never placed.
    """

    def __init__(self, fulfillment_service: FulfillmentService) -> None:
        """Initialize the CheckoutService.

        Args:
            fulfillment_service: Service that places paid orders
        """
        self.fulfillment_service = fulfillment_service

    def checkout(self, order: Order, payment: PaymentMethod) -> CheckoutResult:
        """Charge the order's final amount and place it.

        Args:
            order: Pending order to pay for
            payment: Payment method to charge

        Returns:
            CheckoutResult describing the outcome
        """
        if not self.fulfillment_service.can_place(order):
            error_msg = (
                f"Order {order.order_id} is {order.status.value} or already placed, "
                "cannot check out"
            )
            logger.warning(error_msg)
            return CheckoutResult(
                success=False,
                order=order,
                payment_mode=payment.mode,
                error_message=error_msg,
            )

        if not payment.process_payment(order.final_amount):
            error_msg = f"Payment via {payment.mode} declined for order {order.order_id}"
            logger.warning(error_msg)
            record_payment_declined(payment.mode)
            order.transition_to(OrderStatus.CANCELLED)
            return CheckoutResult(
                success=False,
                order=order,
                payment_mode=payment.mode,
                error_message=error_msg,
            )

        logger.info(f"Payment successful via {payment.mode} for order {order.order_id}")
        placed = self.fulfillment_service.place_order(order)
        if placed is None:
            return CheckoutResult(
                success=False,
                order=order,
                payment_mode=payment.mode,
                error_message=f"Order {order.order_id} could not be placed",
            )

        return CheckoutResult(success=True, order=placed, payment_mode=payment.mode)
