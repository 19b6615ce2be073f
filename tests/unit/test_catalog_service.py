"""Unit tests for CatalogService."""

from decimal import Decimal

import pytest

from foodmate.models.catalog_models import CourseType, CuisineType, DietaryType, Restaurant
from foodmate.models.user_models import RestaurantOwner
from foodmate.services.catalog_service import CatalogService
from foodmate.services.marketplace import Marketplace


@pytest.mark.unit
class TestCatalogService:
    """Test suite for CatalogService."""

    @pytest.fixture
    def catalog(self, marketplace: Marketplace) -> CatalogService:
        """Return the marketplace's catalog service."""
        return marketplace.catalog_service

    def test_register_restaurant_links_owner(
        self, catalog: CatalogService, owner: RestaurantOwner
    ) -> None:
        """Test that a registered restaurant is recorded against its owner."""
        restaurant = catalog.register_restaurant(
            "Pizza Hub", CuisineType.ITALIAN, "pizza@mail.com", owner_id=owner.user_id
        )

        assert restaurant is not None
        assert restaurant.restaurant_id == "R501"
        assert owner.restaurant_ids == ["R501"]
        assert restaurant.rating.average == 4.5
        assert catalog.find_restaurant("R501") is restaurant

    def test_register_restaurant_without_owner(self, catalog: CatalogService) -> None:
        """Test that the owner is optional."""
        restaurant = catalog.register_restaurant("Pizza Hub", CuisineType.ITALIAN, "p@mail.com")

        assert restaurant is not None
        assert catalog.list_restaurants() == [restaurant]

    def test_register_restaurant_unknown_owner(self, catalog: CatalogService) -> None:
        """Test that an unknown owner id rejects the registration."""
        assert catalog.register_restaurant("X", CuisineType.OTHER, "x@mail.com", "U9999") is None
        assert catalog.list_restaurants() == []

    def test_add_dish(self, catalog: CatalogService, restaurant: Restaurant) -> None:
        """Test adding a dish to a menu."""
        dish = catalog.add_dish(
            restaurant.restaurant_id,
            "Masala Dosa",
            "8.5",
            DietaryType.VEG,
            CuisineType.INDIAN,
            CourseType.BREAKFAST,
        )

        assert dish is not None
        assert dish.price == Decimal("8.50")
        assert restaurant.menu.get_dish(dish.dish_id) is dish

    def test_add_dish_duplicate_name(self, catalog: CatalogService, restaurant: Restaurant) -> None:
        """Test that a second dish with an existing name is rejected."""
        result = catalog.add_dish(
            restaurant.restaurant_id,
            "Veg Biryani",
            "11.00",
            DietaryType.VEG,
            CuisineType.INDIAN,
            CourseType.DINNER,
        )

        assert result is None
        assert len(restaurant.menu.dishes) == 3

    def test_add_dish_unknown_restaurant(self, catalog: CatalogService) -> None:
        """Test that adding to an unknown restaurant returns None."""
        result = catalog.add_dish(
            "R999", "Tea", "1.00", DietaryType.VEG, CuisineType.OTHER, CourseType.SNACKS
        )

        assert result is None

    def test_remove_dish(self, catalog: CatalogService, restaurant: Restaurant) -> None:
        """Test removing a dish by name."""
        assert catalog.remove_dish(restaurant.restaurant_id, "Chicken Tikka") is True
        assert catalog.remove_dish(restaurant.restaurant_id, "Chicken Tikka") is False
        assert catalog.remove_dish("R999", "Veg Biryani") is False

    def test_filter_dishes(self, catalog: CatalogService, restaurant: Restaurant) -> None:
        """Test filtering a restaurant's menu."""
        veg_dinner = catalog.filter_dishes(
            restaurant.restaurant_id, course=CourseType.DINNER, dietary_type=DietaryType.VEG
        )

        assert [d.name for d in veg_dinner] == ["Paneer Butter Masala"]
        assert len(catalog.filter_dishes(restaurant.restaurant_id)) == 3
        assert catalog.filter_dishes(restaurant.restaurant_id, cuisine=CuisineType.ITALIAN) == []

    def test_filter_dishes_unknown_restaurant(self, catalog: CatalogService) -> None:
        """Test that filtering an unknown restaurant returns an empty list."""
        assert catalog.filter_dishes("R999") == []
