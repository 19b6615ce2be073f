"""Fulfillment service coordinating order placement and status updates."""

import logging
import threading
from decimal import Decimal

from foodmate.models.cart_models import Cart
from foodmate.models.catalog_models import Restaurant
from foodmate.models.money import to_money
from foodmate.models.order_models import Order, OrderStatus
from foodmate.models.user_models import Customer, DeliveryPartner
from foodmate.observability import traced
from foodmate.observability.metrics import record_order_placed, record_status_transition
from foodmate.repositories.id_generator import IdGenerator
from foodmate.repositories.marketplace_repositories import OrderRepository, UserRepository
from foodmate.services.chat_service import ChatService
from foodmate.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

LOYALTY_ACCRUAL_RATE = Decimal("0.05")


class FulfillmentService:
    """Service owning the order lifecycle.

    This service creates orders from carts, places them, assigns delivery
    partners, drives status transitions and archives finished orders.
    Partner assignment, status transitions and rating updates share one
    re-entrant lock so each read-modify-write happens as a unit.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        chat_service: ChatService,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize the FulfillmentService.

        Args:
            order_repository: Repository for active and completed orders
            user_repository: Repository for customers and delivery partners
            notification_service: Service used to notify customers
            chat_service: Service posting automatic chat messages
            id_generator: Source of new order ids
        """
        self.order_repository = order_repository
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.chat_service = chat_service
        self.id_generator = id_generator
        self.lock = threading.RLock()

    def create_order(self, customer: Customer, restaurant: Restaurant, cart: Cart) -> Order | None:
        """Create a pending order from a cart.

        The cart lines are copied and the subtotal is computed once here.
        The order is not placed until place_order is called.

        Args:
            customer: Customer placing the order
            restaurant: Restaurant the cart was built from
            cart: Cart to snapshot

        Returns:
            The new pending order, or None if the cart is empty
        """
        if cart.is_empty():
            logger.info(f"Empty cart for customer {customer.user_id}, no order created")
            return None

        order = Order(
            order_id=self.id_generator.next_order_id(),
            customer_id=customer.user_id,
            restaurant_id=restaurant.restaurant_id,
            delivery_address=customer.delivery_address,
            lines=cart.snapshot(),
            subtotal=cart.subtotal(),
        )
        logger.info(f"Order {order.order_id} created with subtotal ${order.subtotal}")
        return order

    def can_place(self, order: Order) -> bool:
        """Check whether an order is pending and not yet placed."""
        return (
            order.status == OrderStatus.PENDING
            and self.order_repository.get_order(order.order_id) is None
        )

    @traced("place_order")
    def place_order(self, order: Order) -> Order | None:
        """Place a pending order and assign the first available partner.

        An order placed while every partner is busy stays unassigned and can
        still move through its statuses.

        Args:
            order: Pending order to place

        Returns:
            The placed order, or None if it is not pending or already placed
        """
        with self.lock:
            if order.status != OrderStatus.PENDING:
                logger.warning(f"Order {order.order_id} is {order.status.value}, cannot place")
                return None

            if not self.order_repository.save_active(order):
                return None

            self.notification_service.send(
                order.customer_id,
                f"Order {order.order_id} received! Status: {order.status.label}",
            )

            partner = self._assign_first_available_partner(order)
            if partner is not None:
                self.notification_service.send(
                    order.customer_id, f"Partner {partner.name} assigned!"
                )
            else:
                logger.warning(f"No delivery partner available for order {order.order_id}")

            record_order_placed(order.restaurant_id, assigned=partner is not None)
            return order

    @traced("advance_status")
    def advance_status(
        self, order_id: str, new_status: OrderStatus, expected_version: int | None = None
    ) -> bool:
        """Move an active order to a new status.

        Only forward moves along pending, preparing, out_for_delivery,
        delivered are accepted, plus pending to cancelled.

        Args:
            order_id: Active order to update
            new_status: Target status
            expected_version: Order version the caller last saw; a stale
                version rejects the update

        Returns:
            bool: True if the status changed, False if the order is not active,
            the version is stale or the transition is not allowed
        """
        with self.lock:
            order = self.order_repository.get_active(order_id)
            if order is None:
                logger.warning(f"Status update for unknown order {order_id}")
                return False

            if expected_version is not None and order.version != expected_version:
                logger.warning(
                    f"Stale status update for {order_id}: "
                    f"version {expected_version}, current {order.version}"
                )
                return False

            if not order.transition_to(new_status):
                logger.warning(
                    f"Rejected transition for {order_id}: "
                    f"{order.status.value} -> {new_status.value}"
                )
                return False

            record_status_transition(new_status.value)
            self.notification_service.send(
                order.customer_id,
                f"Order {order_id} status updated to: {new_status.label}",
            )
            self.chat_service.auto_message(order_id, new_status)

            if new_status == OrderStatus.DELIVERED:
                self._complete_for_customer(order)
            elif new_status == OrderStatus.CANCELLED:
                self._release_partner(order)
                self.order_repository.complete(order_id)

            return True

    def finalize_order(self, order_id: str) -> bool:
        """Move an order from the active set to the completed set.

        Returns:
            bool: True if moved, False if the order was not active
        """
        with self.lock:
            moved = self.order_repository.complete(order_id)
            if moved:
                logger.info(f"Order {order_id} finalized")
            return moved

    def add_tip(self, order: Order, amount: Decimal | int | str) -> bool:
        """Set the delivery tip on an order.

        Args:
            order: Order to tip
            amount: Non-negative tip amount

        Returns:
            bool: False if the order is cancelled or already finalized
        """
        with self.lock:
            if self.order_repository.is_completed(order.order_id):
                logger.warning(f"Order {order.order_id} is finalized, tip not added")
                return False

            added = order.set_tip(to_money(amount))
            if added:
                logger.info(f"Tip of ${order.tip} added to order {order.order_id}")
            return added

    def find_order(self, order_id: str) -> Order | None:
        """Look up an active or completed order, None if absent."""
        return self.order_repository.get_order(order_id)

    def list_active_orders(self) -> list[Order]:
        return self.order_repository.list_active()

    def list_completed_orders(self) -> list[Order]:
        return self.order_repository.list_completed()

    def _assign_first_available_partner(self, order: Order) -> DeliveryPartner | None:
        for partner in self.user_repository.list_partners():
            if partner.start_delivery(order.order_id):
                order.assign_partner(partner.user_id)
                logger.info(f"Partner {partner.user_id} assigned to order {order.order_id}")
                return partner
        return None

    def _complete_for_customer(self, order: Order) -> None:
        if order.loyalty_awarded:
            return

        customer = self.user_repository.get_customer(order.customer_id)
        if customer is None:
            logger.warning(f"Customer {order.customer_id} for order {order.order_id} not found")
            return

        customer.order_history.append(order.order_id)
        points = to_money(order.final_amount * LOYALTY_ACCRUAL_RATE)
        customer.add_loyalty_points(points)
        order.loyalty_awarded = True
        logger.info(f"Customer {customer.user_id} earned {points} loyalty points")

    def _release_partner(self, order: Order) -> None:
        if order.partner_id is None:
            return

        partner = self.user_repository.get_partner(order.partner_id)
        if partner is not None and partner.current_order_id == order.order_id:
            partner.release()
