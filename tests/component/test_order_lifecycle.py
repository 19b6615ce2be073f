"""Component tests driving an order through the whole marketplace."""

import random
from decimal import Decimal

import pytest

from foodmate.models.cart_models import Cart
from foodmate.models.catalog_models import CourseType, CuisineType, DietaryType, Restaurant
from foodmate.models.offer_models import OfferIneligibleReason
from foodmate.models.order_models import OrderStatus
from foodmate.models.user_models import Customer, DeliveryPartner, UserKind
from foodmate.payments.cod_payment import CashOnDelivery
from foodmate.payments.upi_payment import UPIPayment
from foodmate.services.marketplace import Marketplace


@pytest.mark.component
class TestOrderLifecycle:
    """End-to-end order scenarios."""

    def test_order_from_menu_to_rating(
        self,
        marketplace: Marketplace,
        customer: Customer,
        restaurant: Restaurant,
        partner: DeliveryPartner,
    ) -> None:
        """Test filtering, cart, offer, checkout, delivery, tip and rating together."""
        user = marketplace.user_service.login(customer.user_id, "pass", UserKind.CUSTOMER)
        assert user is customer

        cart = Cart()
        for dish in marketplace.filter_dishes(restaurant.restaurant_id, cuisine=CuisineType.INDIAN):
            if dish.dietary_type == DietaryType.NON_VEG or dish.course == CourseType.LUNCH:
                marketplace.add_to_cart(cart, dish, 4)
        assert marketplace.cart_subtotal(cart) == Decimal("100.00")

        order = marketplace.create_order(customer, restaurant, cart)
        assert order is not None
        assert marketplace.apply_offer(order, "FIRST30").applied

        result = marketplace.checkout(order, CashOnDelivery())
        assert result.success
        assert order.partner_id == partner.user_id

        assert marketplace.add_tip(order, Decimal("10"))
        assert order.final_amount == Decimal("80.00")

        for status in (OrderStatus.PREPARING, OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED):
            assert marketplace.advance_status(order.order_id, status)
        assert customer.loyalty_points == Decimal("4.00")

        outcome = marketplace.rate(order.order_id, 5, 4, "Loved it")
        assert outcome is not None
        assert restaurant.rating.average == 4.75
        assert partner.earnings == Decimal("10.00")
        assert partner.rating.average == 4.5
        assert partner.available

        assert marketplace.find_order(order.order_id) is order
        assert marketplace.fulfillment_service.list_active_orders() == []
        assert [s.status for s in order.status_history] == [
            OrderStatus.PENDING,
            OrderStatus.PREPARING,
            OrderStatus.OUT_FOR_DELIVERY,
            OrderStatus.DELIVERED,
        ]

    def test_loyalty_points_unlock_loyalty_offer(
        self,
        marketplace: Marketplace,
        customer: Customer,
        restaurant: Restaurant,
        partner: DeliveryPartner,
    ) -> None:
        """Test that points from delivered orders make LOYALTY50 eligible."""
        biryani = restaurant.menu.get_dish_by_name("Veg Biryani")
        assert biryani is not None

        def order_and_deliver(quantity: int) -> None:
            cart = Cart()
            cart.add_item(biryani, quantity)
            order = marketplace.create_order(customer, restaurant, cart)
            assert order is not None
            marketplace.checkout(order, CashOnDelivery())
            for status in (
                OrderStatus.PREPARING,
                OrderStatus.OUT_FOR_DELIVERY,
                OrderStatus.DELIVERED,
            ):
                marketplace.advance_status(order.order_id, status)
            marketplace.rate(order.order_id, 5, 5)

        cart = Cart()
        cart.add_item(biryani, 3)
        early = marketplace.create_order(customer, restaurant, cart)
        assert early is not None
        assert (
            marketplace.apply_offer(early, "LOYALTY50").reason
            == OfferIneligibleReason.INSUFFICIENT_LOYALTY
        )

        order_and_deliver(20)
        assert customer.loyalty_points == Decimal("10.00")

        late = marketplace.create_order(customer, restaurant, cart)
        assert late is not None
        result = marketplace.apply_offer(late, "LOYALTY50")
        assert result.applied
        assert late.final_amount == Decimal("15.00")
        assert len(customer.order_history) == 1

    def test_declined_upi_payment_cancels_order(
        self,
        marketplace: Marketplace,
        customer: Customer,
        restaurant: Restaurant,
        partner: DeliveryPartner,
    ) -> None:
        """Test that a declined UPI payment leaves the partner free."""
        dish = restaurant.menu.get_dish_by_name("Chicken Tikka")
        assert dish is not None
        cart = Cart()
        cart.add_item(dish)
        order = marketplace.create_order(customer, restaurant, cart)
        assert order is not None

        result = marketplace.checkout(order, UPIPayment(success_rate=0.0, rng=random.Random(1)))

        assert not result.success
        assert order.status == OrderStatus.CANCELLED
        assert partner.available
        assert marketplace.add_tip(order, 5) is False
        assert marketplace.find_order(order.order_id) is None
