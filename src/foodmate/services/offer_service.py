"""Offer service for applying promo codes to orders."""

import logging

from foodmate.models.offer_models import DiscountResult, Offer, OfferIneligibleReason
from foodmate.models.order_models import Order, OrderStatus
from foodmate.observability.metrics import record_offer_application
from foodmate.repositories.marketplace_repositories import (
    OfferRepository,
    OrderRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class OfferService:
    """Service for looking up offers and applying them to orders."""

    def __init__(
        self,
        offer_repository: OfferRepository,
        user_repository: UserRepository,
        order_repository: OrderRepository,
    ) -> None:
        """Initialize the OfferService.

        Args:
            offer_repository: Repository holding the available offers
            user_repository: Repository used to resolve the ordering customer
            order_repository: Repository of placed orders, which no longer take offers
        """
        self.offer_repository = offer_repository
        self.user_repository = user_repository
        self.order_repository = order_repository

    def apply_offer(self, order: Order, offer_code: str) -> DiscountResult:
        """Apply a promo code to a pending order.

        The order's discount is replaced by the result, including a zero
        discount when the offer is rejected.

        Args:
            order: Order to discount
            offer_code: Promo code entered by the customer

        Returns:
            DiscountResult with the applied amount, or a zero amount and a reason
        """
        offer = self.offer_repository.get_offer(offer_code)
        if offer is None:
            logger.info(f"Unknown offer code {offer_code} for order {order.order_id}")
            record_offer_application(offer_code, OfferIneligibleReason.UNKNOWN_CODE.value)
            return DiscountResult.rejected(OfferIneligibleReason.UNKNOWN_CODE)

        if order.status != OrderStatus.PENDING:
            logger.warning(f"Order {order.order_id} is {order.status.value}, offer not applied")
            record_offer_application(offer.code, OfferIneligibleReason.ORDER_NOT_PENDING.value)
            return DiscountResult.rejected(OfferIneligibleReason.ORDER_NOT_PENDING)

        if self.order_repository.get_order(order.order_id) is not None:
            logger.warning(f"Order {order.order_id} already placed, offer not applied")
            record_offer_application(offer.code, OfferIneligibleReason.ALREADY_PLACED.value)
            return DiscountResult.rejected(OfferIneligibleReason.ALREADY_PLACED)

        customer = self.user_repository.get_customer(order.customer_id)
        result = offer.apply_discount(order.subtotal, customer)
        order.apply_discount(result, offer.code)

        if result.applied:
            logger.info(f"Offer {offer.code} applied to {order.order_id}: -${result.amount}")
            record_offer_application(offer.code, "applied")
        else:
            logger.info(f"Offer {offer.code} rejected for {order.order_id}: {result.reason}")
            record_offer_application(offer.code, result.reason.value if result.reason else "")

        return result

    def list_offers(self) -> list[Offer]:
        """List available offers."""
        return self.offer_repository.list_offers()
