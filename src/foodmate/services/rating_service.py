"""Rating service folding post-delivery ratings into running averages."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from foodmate.models.order_models import OrderStatus
from foodmate.models.rating_models import validate_stars
from foodmate.observability import traced
from foodmate.observability.metrics import record_rating
from foodmate.repositories.marketplace_repositories import (
    OrderRepository,
    RestaurantRepository,
    UserRepository,
)
from foodmate.services.fulfillment_service import FulfillmentService

logger = logging.getLogger(__name__)


@dataclass
class RatingOutcome:
    """Ratings after a submission has been applied.

    Attributes:
        order_id: The rated order
        restaurant_rating: New restaurant average, None if the restaurant is gone
        dish_ratings: New average per dish id still on the menu
        partner_rating: New partner average, None if no partner was assigned
        partner_earnings: Partner earnings after the tip, None if no partner
        feedback: Free-text feedback as submitted
    """

    order_id: str
    restaurant_rating: float | None = None
    dish_ratings: dict[str, float] = field(default_factory=dict)
    partner_rating: float | None = None
    partner_earnings: Decimal | None = None
    feedback: str = ""


class RatingService:
    """Service applying food and delivery ratings for delivered orders.

    The same food score is applied to the restaurant and to every distinct
    dish in the order; the delivery score goes to the assigned partner.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        restaurant_repository: RestaurantRepository,
        user_repository: UserRepository,
        fulfillment_service: FulfillmentService,
    ) -> None:
        """Initialize the RatingService.

        Args:
            order_repository: Repository for active orders
            restaurant_repository: Repository for restaurants and menus
            user_repository: Repository for delivery partners
            fulfillment_service: Service used to finalize rated orders
        """
        self.order_repository = order_repository
        self.restaurant_repository = restaurant_repository
        self.user_repository = user_repository
        self.fulfillment_service = fulfillment_service
        self._feedback: dict[str, str] = {}

    @traced("rate_order")
    def apply(
        self,
        order_id: str,
        food_stars: int,
        delivery_stars: int,
        feedback: str = "",
    ) -> RatingOutcome | None:
        """Apply a rating to a delivered order and finalize it.

        Args:
            order_id: Active, delivered order to rate
            food_stars: 1-5 score for the restaurant and its dishes
            delivery_stars: 1-5 score for the delivery partner
            feedback: Optional free-text feedback

        Returns:
            RatingOutcome with the updated averages, or None if the order is
            not active or not yet delivered

        Raises:
            ValueError: If either score is outside 1-5
        """
        validate_stars(food_stars)
        validate_stars(delivery_stars)

        with self.fulfillment_service.lock:
            order = self.order_repository.get_active(order_id)
            if order is None:
                logger.warning(f"Rating for unknown order {order_id}")
                return None

            if order.status != OrderStatus.DELIVERED:
                logger.warning(f"Order {order_id} is {order.status.value}, cannot be rated yet")
                return None

            outcome = RatingOutcome(order_id=order_id, feedback=feedback)

            restaurant = self.restaurant_repository.get_restaurant(order.restaurant_id)
            if restaurant is not None:
                outcome.restaurant_rating = restaurant.rating.add(food_stars)
                for dish_id in order.dish_ids:
                    dish = restaurant.menu.get_dish(dish_id)
                    if dish is not None:
                        outcome.dish_ratings[dish_id] = dish.rating.add(food_stars)

            if order.partner_id is not None:
                partner = self.user_repository.get_partner(order.partner_id)
                if partner is not None:
                    partner.complete_delivery(order.tip, delivery_stars)
                    outcome.partner_rating = partner.rating.average
                    outcome.partner_earnings = partner.earnings

            record_rating("food", food_stars)
            record_rating("delivery", delivery_stars)

            if feedback:
                self._feedback[order_id] = feedback
                logger.info(f"Feedback recorded for order {order_id}")

            self.fulfillment_service.finalize_order(order_id)

        logger.info(
            f"Order {order_id} rated: food {food_stars}, delivery {delivery_stars}"
        )
        return outcome

    def get_feedback(self, order_id: str) -> str | None:
        """Return the feedback left for an order, None if there is none."""
        return self._feedback.get(order_id)
