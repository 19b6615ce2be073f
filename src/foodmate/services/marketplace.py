"""Marketplace service object composing the order core.

The marketplace is constructed once per process and passed to whatever
drives it. It owns every repository and exposes the operations the
interaction layer calls: catalog queries, cart building, checkout,
discounting, tipping, placement, status updates, rating and lookups.
"""

import logging
from decimal import Decimal

from foodmate.models.cart_models import Cart, CartLine
from foodmate.models.catalog_models import (
    CourseType,
    CuisineType,
    DietaryType,
    Dish,
    Restaurant,
)
from foodmate.models.offer_models import DiscountResult, Offer
from foodmate.models.order_models import Order, OrderStatus
from foodmate.models.user_models import Customer, User
from foodmate.payments.base_payment import PaymentMethod
from foodmate.repositories.id_generator import IdGenerator
from foodmate.repositories.marketplace_repositories import (
    OfferRepository,
    OrderRepository,
    RestaurantRepository,
    UserRepository,
)
from foodmate.services.catalog_service import CatalogService
from foodmate.services.chat_service import ChatService
from foodmate.services.checkout_service import CheckoutResult, CheckoutService
from foodmate.services.fulfillment_service import FulfillmentService
from foodmate.services.notification_service import NotificationService
from foodmate.services.offer_service import OfferService
from foodmate.services.rating_service import RatingOutcome, RatingService
from foodmate.services.user_service import UserService

logger = logging.getLogger(__name__)


class Marketplace:
    """Facade over the catalog, offer, fulfillment and rating services."""

    def __init__(
        self,
        offers: list[Offer] | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        """Initialize the marketplace and its services.

        Args:
            offers: Promotional offers available for the process lifetime
            id_generator: Id source, a fresh generator when omitted
        """
        self.id_generator = id_generator or IdGenerator()

        self.user_repository = UserRepository()
        self.restaurant_repository = RestaurantRepository()
        self.offer_repository = OfferRepository(offers)
        self.order_repository = OrderRepository()

        self.notification_service = NotificationService()
        self.chat_service = ChatService()
        self.user_service = UserService(self.user_repository, self.id_generator)
        self.catalog_service = CatalogService(
            self.restaurant_repository, self.user_repository, self.id_generator
        )
        self.offer_service = OfferService(
            self.offer_repository, self.user_repository, self.order_repository
        )
        self.fulfillment_service = FulfillmentService(
            order_repository=self.order_repository,
            user_repository=self.user_repository,
            notification_service=self.notification_service,
            chat_service=self.chat_service,
            id_generator=self.id_generator,
        )
        self.checkout_service = CheckoutService(self.fulfillment_service)
        self.rating_service = RatingService(
            order_repository=self.order_repository,
            restaurant_repository=self.restaurant_repository,
            user_repository=self.user_repository,
            fulfillment_service=self.fulfillment_service,
        )

    # Catalog

    def filter_dishes(
        self,
        restaurant_id: str,
        cuisine: CuisineType = CuisineType.ANY,
        course: CourseType = CourseType.ANY,
        dietary_type: DietaryType = DietaryType.BOTH,
    ) -> list[Dish]:
        return self.catalog_service.filter_dishes(restaurant_id, cuisine, course, dietary_type)

    # Cart

    def add_to_cart(self, cart: Cart, dish: Dish, quantity: int = 1) -> CartLine:
        return cart.add_item(dish, quantity)

    def cart_subtotal(self, cart: Cart) -> Decimal:
        return cart.subtotal()

    # Checkout and lifecycle

    def create_order(self, customer: Customer, restaurant: Restaurant, cart: Cart) -> Order | None:
        return self.fulfillment_service.create_order(customer, restaurant, cart)

    def apply_offer(self, order: Order, offer_code: str) -> DiscountResult:
        return self.offer_service.apply_offer(order, offer_code)

    def add_tip(self, order: Order, amount: Decimal | int | str) -> bool:
        return self.fulfillment_service.add_tip(order, amount)

    def checkout(self, order: Order, payment: PaymentMethod) -> CheckoutResult:
        return self.checkout_service.checkout(order, payment)

    def place_order(self, order: Order) -> Order | None:
        return self.fulfillment_service.place_order(order)

    def advance_status(
        self, order_id: str, status: OrderStatus, expected_version: int | None = None
    ) -> bool:
        return self.fulfillment_service.advance_status(order_id, status, expected_version)

    def rate(
        self,
        order_id: str,
        food_stars: int,
        delivery_stars: int,
        feedback: str = "",
    ) -> RatingOutcome | None:
        return self.rating_service.apply(order_id, food_stars, delivery_stars, feedback)

    # Lookups

    def find_user(self, user_id: str) -> User | None:
        return self.user_service.find_user(user_id)

    def find_restaurant(self, restaurant_id: str) -> Restaurant | None:
        return self.catalog_service.find_restaurant(restaurant_id)

    def find_order(self, order_id: str) -> Order | None:
        return self.fulfillment_service.find_order(order_id)
