"""Shared pytest fixtures and configuration for all tests."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from foodmate.models.cart_models import Cart
from foodmate.models.catalog_models import CourseType, CuisineType, DietaryType, Dish, Restaurant
from foodmate.models.offer_models import Offer
from foodmate.models.order_models import Order
from foodmate.models.user_models import Customer, DeliveryPartner, RestaurantOwner
from foodmate.services.marketplace import Marketplace


@pytest.fixture
def offers() -> list[Offer]:
    """Fixture providing the two standard promo offers."""
    return [
        Offer(
            code="FIRST30",
            value=Decimal("30"),
            is_percentage=False,
            min_order_value=Decimal("50"),
        ),
        Offer(
            code="LOYALTY50",
            value=Decimal("50"),
            is_percentage=True,
            min_order_value=Decimal("20"),
        ),
    ]


@pytest.fixture
def marketplace(offers: list[Offer]) -> Marketplace:
    """Fixture providing an empty marketplace with the standard offers."""
    return Marketplace(offers=offers)


@pytest.fixture
def customer(marketplace: Marketplace) -> Customer:
    """Fixture providing a registered customer with no loyalty points."""
    return marketplace.user_service.register_customer("Alice", "pass", "101 Maple St")


@pytest.fixture
def owner(marketplace: Marketplace) -> RestaurantOwner:
    """Fixture providing a registered restaurant owner."""
    return marketplace.user_service.register_owner("ChefBob", "pass")


@pytest.fixture
def partner(marketplace: Marketplace) -> DeliveryPartner:
    """Fixture providing a registered, available delivery partner."""
    return marketplace.user_service.register_partner("Dan", "pass", "Bike")


@pytest.fixture
def restaurant(marketplace: Marketplace, owner: RestaurantOwner) -> Restaurant:
    """Fixture providing a restaurant with three dishes on its menu."""
    catalog = marketplace.catalog_service
    restaurant = catalog.register_restaurant(
        "Spice Garden", CuisineType.INDIAN, "spice@mail.com", owner_id=owner.user_id
    )
    assert restaurant is not None
    catalog.add_dish(
        restaurant.restaurant_id,
        "Paneer Butter Masala",
        Decimal("12.50"),
        DietaryType.VEG,
        CuisineType.INDIAN,
        CourseType.DINNER,
    )
    catalog.add_dish(
        restaurant.restaurant_id,
        "Veg Biryani",
        Decimal("10.00"),
        DietaryType.VEG,
        CuisineType.INDIAN,
        CourseType.LUNCH,
    )
    catalog.add_dish(
        restaurant.restaurant_id,
        "Chicken Tikka",
        Decimal("15.00"),
        DietaryType.NON_VEG,
        CuisineType.INDIAN,
        CourseType.DINNER,
    )
    return restaurant


@pytest.fixture
def make_dish() -> Callable[..., Dish]:
    """Fixture providing a factory for standalone dishes."""

    def _make_dish(
        dish_id: str = "D1",
        name: str = "Veg Biryani",
        price: str = "10.00",
        dietary_type: DietaryType = DietaryType.VEG,
        cuisine: CuisineType = CuisineType.INDIAN,
        course: CourseType = CourseType.LUNCH,
    ) -> Dish:
        return Dish(
            dish_id=dish_id,
            name=name,
            price=Decimal(price),
            dietary_type=dietary_type,
            cuisine=cuisine,
            course=course,
        )

    return _make_dish


@pytest.fixture
def pending_order(marketplace: Marketplace, customer: Customer, restaurant: Restaurant) -> Order:
    """Fixture providing an unplaced order with a $100.00 subtotal."""
    cart = Cart()
    for name in ("Chicken Tikka", "Veg Biryani"):
        dish = restaurant.menu.get_dish_by_name(name)
        assert dish is not None
        cart.add_item(dish, 4)
    order = marketplace.create_order(customer, restaurant, cart)
    assert order is not None
    return order
