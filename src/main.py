"""Main application entry point for the FoodMate order core.

This module provides the marketplace factory and configuration for running
the core locally, plus a scripted demo order when executed directly.
"""

import logging
import os
from decimal import Decimal

from foodmate.models.cart_models import Cart
from foodmate.models.catalog_models import CourseType, CuisineType, DietaryType
from foodmate.models.offer_models import Offer
from foodmate.models.order_models import OrderStatus
from foodmate.observability import configure_logging, setup_observability
from foodmate.payments.base_payment import PaymentMethod
from foodmate.payments.cod_payment import CashOnDelivery
from foodmate.payments.upi_payment import UPIPayment
from foodmate.services.marketplace import Marketplace

logger = logging.getLogger(__name__)


def create_offers() -> list[Offer]:
    """Create the promotional offers available for this process.

    Returns:
        List of offers, empty when FOODMATE_ENABLE_OFFERS is not "true"
    """
    if os.getenv("FOODMATE_ENABLE_OFFERS", "true").lower() != "true":
        logger.info("Offers disabled by configuration")
        return []

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


def create_payment_method(mode: str) -> PaymentMethod:
    """Create a payment method by name.

    Args:
        mode: "upi" or "cod"

    Returns:
        Configured payment method

    Raises:
        ValueError: If mode is not a known payment mode
    """
    if mode == "upi":
        success_rate = float(os.getenv("UPI_SUCCESS_RATE", "0.9"))
        return UPIPayment(success_rate=success_rate)
    if mode == "cod":
        return CashOnDelivery()
    raise ValueError(f"Unknown payment mode: {mode}")


def seed_demo_data(marketplace: Marketplace) -> None:
    """Populate a marketplace with demo users, restaurants and dishes.

    Args:
        marketplace: Marketplace to populate
    """
    users = marketplace.user_service
    users.register_customer("Alice", "pass", "101 Maple St")
    owner = users.register_owner("ChefBob", "pass")
    users.register_partner("Dan", "pass", "Bike")

    catalog = marketplace.catalog_service
    spice = catalog.register_restaurant(
        "Spice Garden", CuisineType.INDIAN, "spice@mail.com", owner_id=owner.user_id
    )
    pizza = catalog.register_restaurant(
        "Pizza Hub", CuisineType.ITALIAN, "pizza@mail.com", owner_id=owner.user_id
    )
    if spice is None or pizza is None:
        raise RuntimeError("Failed to register demo restaurants")

    veg, non_veg = DietaryType.VEG, DietaryType.NON_VEG
    dishes = [
        (spice, "Paneer Butter Masala", "12.50", veg, CourseType.DINNER),
        (spice, "Veg Biryani", "10.00", veg, CourseType.LUNCH),
        (spice, "Chicken Tikka", "15.00", non_veg, CourseType.DINNER),
        (pizza, "Margherita Pizza", "18.00", veg, CourseType.DINNER),
        (pizza, "Pepperoni Pizza", "20.00", non_veg, CourseType.DINNER),
    ]
    for restaurant, name, price, dietary, course in dishes:
        catalog.add_dish(
            restaurant.restaurant_id, name, Decimal(price), dietary, restaurant.cuisine, course
        )

    logger.info(
        f"Demo data seeded: {len(users.user_repository.list_users())} users, "
        f"{len(catalog.list_restaurants())} restaurants"
    )


def create_application() -> Marketplace:
    """Create and configure the marketplace with all dependencies.

    This factory function:
    1. Configures logging
    2. Sets up observability
    3. Creates the offers
    4. Creates the marketplace
    5. Seeds demo data when enabled

    Returns:
        Configured Marketplace instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)
    setup_observability()

    logger.info("Initializing FoodMate order core...")

    marketplace = Marketplace(offers=create_offers())

    if os.getenv("FOODMATE_SEED_DEMO_DATA", "true").lower() == "true":
        seed_demo_data(marketplace)

    logger.info("FoodMate order core initialized successfully")
    return marketplace


def run_demo(marketplace: Marketplace, payment: PaymentMethod | None = None) -> bool:
    """Drive one order from cart to rating against seeded demo data.

    Args:
        marketplace: Marketplace populated by seed_demo_data
        payment: Payment method, cash on delivery when omitted

    Returns:
        bool: True if the order was delivered and rated
    """
    customer = marketplace.user_service.login("U1001", "pass")
    restaurants = marketplace.catalog_service.list_restaurants()
    if customer is None or not restaurants:
        logger.error("Demo data missing, run seed_demo_data first")
        return False

    restaurant = restaurants[0]
    cart = Cart()
    for dish in marketplace.filter_dishes(restaurant.restaurant_id, dietary_type=DietaryType.VEG):
        marketplace.add_to_cart(cart, dish, quantity=3)

    order = marketplace.create_order(customer, restaurant, cart)
    if order is None:
        return False

    marketplace.apply_offer(order, "FIRST30")
    result = marketplace.checkout(order, payment or CashOnDelivery())
    if not result.success:
        logger.warning(result.error_message)
        return False

    for status in (OrderStatus.PREPARING, OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED):
        marketplace.advance_status(order.order_id, status)

    marketplace.add_tip(order, Decimal("10"))
    outcome = marketplace.rate(order.order_id, 5, 4, "Great food!")
    marketplace.user_service.logout(customer.user_id)
    return outcome is not None


if __name__ == "__main__":
    """Run a scripted demo order when executed directly."""
    app = create_application()
    payment_mode = os.getenv("DEMO_PAYMENT_MODE", "cod")
    completed = run_demo(app, create_payment_method(payment_mode))
    logger.info(f"Demo order completed: {completed}")
