"""Unit tests for offers and the discount rules."""

from decimal import Decimal

import pytest

from foodmate.auth.password_hasher import hash_password
from foodmate.models.offer_models import DiscountResult, Offer, OfferIneligibleReason
from foodmate.models.user_models import Customer


def make_customer(points: str) -> Customer:
    return Customer(
        user_id="U1001",
        name="Alice",
        password_hash=hash_password("pass"),
        delivery_address="101 Maple St",
        loyalty_points=Decimal(points),
    )


@pytest.fixture
def first30() -> Offer:
    return Offer(
        code="FIRST30", value=Decimal("30"), is_percentage=False, min_order_value=Decimal("50")
    )


@pytest.fixture
def loyalty50() -> Offer:
    return Offer(
        code="LOYALTY50", value=Decimal("50"), is_percentage=True, min_order_value=Decimal("20")
    )


@pytest.mark.unit
class TestOfferApplyDiscount:
    """Test suite for Offer.apply_discount."""

    def test_flat_offer_above_minimum(self, first30: Offer) -> None:
        """Test FIRST30 on a $60 subtotal gives $30 off."""
        result = first30.apply_discount(Decimal("60.00"))

        assert result.applied
        assert result.amount == Decimal("30.00")
        assert result.reason is None
        assert Decimal("60.00") - result.amount == Decimal("30.00")

    def test_flat_offer_below_minimum(self, first30: Offer) -> None:
        """Test FIRST30 on a $40 subtotal is rejected as below minimum."""
        result = first30.apply_discount(Decimal("40.00"))

        assert result.amount == Decimal("0")
        assert result.reason == OfferIneligibleReason.BELOW_MINIMUM
        assert result.reason == "below_minimum"

    def test_minimum_is_inclusive(self, first30: Offer) -> None:
        """Test that a subtotal equal to the minimum qualifies."""
        assert first30.apply_discount(Decimal("50.00")).amount == Decimal("30.00")

    def test_loyalty_offer_rejected_below_threshold(self, loyalty50: Offer) -> None:
        """Test LOYALTY50 with 5.0 points is rejected."""
        result = loyalty50.apply_discount(Decimal("25.00"), make_customer("5.0"))

        assert result.amount == Decimal("0")
        assert result.reason == OfferIneligibleReason.INSUFFICIENT_LOYALTY

    def test_loyalty_offer_applied_above_threshold(self, loyalty50: Offer) -> None:
        """Test LOYALTY50 with 15.0 points takes half off a $25 subtotal."""
        result = loyalty50.apply_discount(Decimal("25.00"), make_customer("15.0"))

        assert result.applied
        assert result.amount == Decimal("12.5")

    def test_minimum_is_checked_before_loyalty(self, loyalty50: Offer) -> None:
        """Test that the minimum order rule wins over the loyalty rule."""
        result = loyalty50.apply_discount(Decimal("10.00"), make_customer("0"))

        assert result.reason == OfferIneligibleReason.BELOW_MINIMUM

    def test_loyalty_check_skipped_without_customer(self, loyalty50: Offer) -> None:
        """Test that the loyalty rule only applies when a customer is given."""
        result = loyalty50.apply_discount(Decimal("25.00"))

        assert result.amount == Decimal("12.50")

    def test_flat_discount_is_clamped_to_subtotal(self) -> None:
        """Test that a flat discount never exceeds the subtotal."""
        offer = Offer(code="BIG", value=Decimal("100"), is_percentage=False)

        result = offer.apply_discount(Decimal("40.00"))

        assert result.amount == Decimal("40.00")

    def test_percentage_discount_rounds_to_cents(self) -> None:
        """Test that percentage discounts are rounded half-up to cents."""
        offer = Offer(code="TEN", value=Decimal("10"), is_percentage=True)

        result = offer.apply_discount(Decimal("12.45"))

        assert result.amount == Decimal("1.25")

    def test_offer_is_immutable(self, first30: Offer) -> None:
        """Test that offers cannot be modified after creation."""
        with pytest.raises(ValueError):
            first30.value = Decimal("90")  # type: ignore[misc]


@pytest.mark.unit
class TestDiscountResult:
    """Test suite for DiscountResult."""

    def test_rejected_builds_zero_discount(self) -> None:
        """Test the rejected constructor."""
        result = DiscountResult.rejected(OfferIneligibleReason.UNKNOWN_CODE)

        assert result.amount == Decimal("0")
        assert not result.applied
