"""Catalog service for restaurants, menus and dish filtering."""

import logging
from decimal import Decimal

from foodmate.models.catalog_models import (
    CourseType,
    CuisineType,
    DietaryType,
    Dish,
    Restaurant,
)
from foodmate.models.money import to_money
from foodmate.repositories.id_generator import IdGenerator
from foodmate.repositories.marketplace_repositories import (
    RestaurantRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for restaurant registration and menu management."""

    def __init__(
        self,
        restaurant_repository: RestaurantRepository,
        user_repository: UserRepository,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize the CatalogService.

        Args:
            restaurant_repository: Repository holding restaurants
            user_repository: Repository used to resolve restaurant owners
            id_generator: Source of restaurant and dish ids
        """
        self.restaurant_repository = restaurant_repository
        self.user_repository = user_repository
        self.id_generator = id_generator

    def register_restaurant(
        self,
        name: str,
        cuisine: CuisineType,
        contact_email: str,
        owner_id: str | None = None,
    ) -> Restaurant | None:
        """Create a restaurant and optionally attach it to an owner.

        Args:
            name: Restaurant name
            cuisine: Primary cuisine
            contact_email: Contact email address
            owner_id: Owner to record the restaurant against

        Returns:
            The new restaurant, or None if owner_id does not name an owner
        """
        owner = None
        if owner_id is not None:
            owner = self.user_repository.get_owner(owner_id)
            if owner is None:
                logger.warning(f"Cannot register restaurant {name}: no owner {owner_id}")
                return None

        restaurant = Restaurant(
            restaurant_id=self.id_generator.next_restaurant_id(),
            name=name,
            cuisine=cuisine,
            contact_email=contact_email,
        )
        self.restaurant_repository.save_restaurant(restaurant)

        if owner is not None:
            owner.restaurant_ids.append(restaurant.restaurant_id)

        logger.info(f"Restaurant {restaurant.restaurant_id} '{name}' registered")
        return restaurant

    def add_dish(
        self,
        restaurant_id: str,
        name: str,
        price: Decimal | str | int,
        dietary_type: DietaryType,
        cuisine: CuisineType,
        course: CourseType,
    ) -> Dish | None:
        """Create a dish on a restaurant's menu.

        Returns:
            The new dish, or None if the restaurant is unknown or already has
            a dish with this name
        """
        restaurant = self.restaurant_repository.get_restaurant(restaurant_id)
        if restaurant is None:
            logger.warning(f"Cannot add dish {name}: no restaurant {restaurant_id}")
            return None

        dish = Dish(
            dish_id=self.id_generator.next_dish_id(),
            name=name,
            price=to_money(price),
            dietary_type=dietary_type,
            cuisine=cuisine,
            course=course,
        )
        if not restaurant.menu.add_dish(dish):
            logger.warning(f"Dish '{name}' already on the menu of {restaurant_id}")
            return None

        logger.info(f"Dish '{name}' added to the menu of {restaurant_id}")
        return dish

    def remove_dish(self, restaurant_id: str, name: str) -> bool:
        """Remove a dish by name from a restaurant's menu.

        Returns:
            bool: True if removed, False if the restaurant or dish is unknown
        """
        restaurant = self.restaurant_repository.get_restaurant(restaurant_id)
        if restaurant is None:
            return False
        return restaurant.menu.remove_dish(name)

    def filter_dishes(
        self,
        restaurant_id: str,
        cuisine: CuisineType = CuisineType.ANY,
        course: CourseType = CourseType.ANY,
        dietary_type: DietaryType = DietaryType.BOTH,
    ) -> list[Dish]:
        """Filter a restaurant's menu.

        Returns:
            Matching dishes, empty list if none match or the restaurant is unknown
        """
        restaurant = self.restaurant_repository.get_restaurant(restaurant_id)
        if restaurant is None:
            return []
        return restaurant.menu.filter_dishes(cuisine, course, dietary_type)

    def find_restaurant(self, restaurant_id: str) -> Restaurant | None:
        """Look up a restaurant by id, None if absent."""
        return self.restaurant_repository.get_restaurant(restaurant_id)

    def list_restaurants(self) -> list[Restaurant]:
        """List all restaurants in registration order."""
        return self.restaurant_repository.list_restaurants()
