"""In-memory repositories for marketplace entities.

These repositories own every user, restaurant, offer and order for the
lifetime of one marketplace. Lookups return None and writes return False
for expected failures rather than raising exceptions.
"""

import logging

from foodmate.models.catalog_models import Restaurant
from foodmate.models.offer_models import Offer
from foodmate.models.order_models import Order
from foodmate.models.user_models import (
    Customer,
    DeliveryPartner,
    RestaurantOwner,
    User,
)

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for users of every kind.

    Users are kept in registration order, which the partner assignment scan
    relies on.
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._users: dict[str, User] = {}

    def save_user(self, user: User) -> bool:
        """Save a new user.

        Args:
            user: User to save

        Returns:
            bool: True if saved, False if the id is already taken
        """
        if user.user_id in self._users:
            logger.warning(f"User {user.user_id} already exists")
            return False

        self._users[user.user_id] = user
        return True

    def get_user(self, user_id: str) -> User | None:
        """Retrieve a user by id, None if absent."""
        return self._users.get(user_id)

    def get_customer(self, user_id: str) -> Customer | None:
        """Retrieve a customer by id, None if absent or not a customer."""
        user = self._users.get(user_id)
        return user if isinstance(user, Customer) else None

    def get_owner(self, user_id: str) -> RestaurantOwner | None:
        """Retrieve a restaurant owner by id, None if absent or not an owner."""
        user = self._users.get(user_id)
        return user if isinstance(user, RestaurantOwner) else None

    def get_partner(self, user_id: str) -> DeliveryPartner | None:
        """Retrieve a delivery partner by id, None if absent or not a partner."""
        user = self._users.get(user_id)
        return user if isinstance(user, DeliveryPartner) else None

    def list_users(self) -> list[User]:
        """List all users in registration order."""
        return list(self._users.values())

    def list_partners(self) -> list[DeliveryPartner]:
        """List delivery partners in registration order."""
        return [u for u in self._users.values() if isinstance(u, DeliveryPartner)]


class RestaurantRepository:
    """Repository for restaurants and their embedded menus."""

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._restaurants: dict[str, Restaurant] = {}

    def save_restaurant(self, restaurant: Restaurant) -> bool:
        """Save a new restaurant.

        Returns:
            bool: True if saved, False if the id is already taken
        """
        if restaurant.restaurant_id in self._restaurants:
            logger.warning(f"Restaurant {restaurant.restaurant_id} already exists")
            return False

        self._restaurants[restaurant.restaurant_id] = restaurant
        return True

    def get_restaurant(self, restaurant_id: str) -> Restaurant | None:
        """Retrieve a restaurant by id, None if absent."""
        return self._restaurants.get(restaurant_id)

    def list_restaurants(self) -> list[Restaurant]:
        """List restaurants in registration order."""
        return list(self._restaurants.values())


class OfferRepository:
    """Repository for promotional offers keyed by code."""

    def __init__(self, offers: list[Offer] | None = None) -> None:
        """Initialize repository.

        Args:
            offers: Offers available from the start
        """
        self._offers: dict[str, Offer] = {}
        for offer in offers or []:
            self.save_offer(offer)

    def save_offer(self, offer: Offer) -> bool:
        """Save an offer.

        Returns:
            bool: True if saved, False if the code is already taken
        """
        if offer.code in self._offers:
            logger.warning(f"Offer {offer.code} already exists")
            return False

        self._offers[offer.code] = offer
        return True

    def get_offer(self, code: str) -> Offer | None:
        """Retrieve an offer by code, None if absent."""
        return self._offers.get(code)

    def list_offers(self) -> list[Offer]:
        """List offers in the order they were added."""
        return list(self._offers.values())


class OrderRepository:
    """Repository for active and completed orders.

    An order lives in exactly one of the two collections once placed.
    """

    def __init__(self) -> None:
        """Initialize empty active and completed collections."""
        self._active: dict[str, Order] = {}
        self._completed: dict[str, Order] = {}

    def save_active(self, order: Order) -> bool:
        """Add an order to the active set.

        Returns:
            bool: False if the order is already known
        """
        if order.order_id in self._active or order.order_id in self._completed:
            logger.warning(f"Order {order.order_id} already exists")
            return False

        self._active[order.order_id] = order
        return True

    def get_active(self, order_id: str) -> Order | None:
        """Retrieve an active order, None if absent."""
        return self._active.get(order_id)

    def get_order(self, order_id: str) -> Order | None:
        """Retrieve an order from either collection, None if absent."""
        if order_id in self._active:
            return self._active[order_id]
        return self._completed.get(order_id)

    def complete(self, order_id: str) -> bool:
        """Move an order from the active set to the completed set.

        Returns:
            bool: True if moved, False if the order was not active
        """
        order = self._active.pop(order_id, None)
        if order is None:
            return False

        self._completed[order_id] = order
        return True

    def is_completed(self, order_id: str) -> bool:
        """Whether the order has been moved to the completed set."""
        return order_id in self._completed

    def list_active(self) -> list[Order]:
        """List active orders in placement order."""
        return list(self._active.values())

    def list_completed(self) -> list[Order]:
        """List completed orders in completion order."""
        return list(self._completed.values())
