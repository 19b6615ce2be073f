"""Promotional offer models.

Offers never raise on ineligibility. A rejected offer produces a zero
discount together with a reason code, so callers must check the reason to
tell "no effect" apart from "not eligible".
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from foodmate.models.money import ZERO, to_money

if TYPE_CHECKING:
    from foodmate.models.user_models import Customer

LOYALTY_OFFER_CODE = "LOYALTY50"
LOYALTY_POINTS_THRESHOLD = Decimal("10.0")


class OfferIneligibleReason(str, Enum):
    """Reason codes for a rejected offer."""

    BELOW_MINIMUM = "below_minimum"
    INSUFFICIENT_LOYALTY = "insufficient_loyalty"
    UNKNOWN_CODE = "unknown_code"
    ORDER_NOT_PENDING = "order_not_pending"
    ALREADY_PLACED = "already_placed"


@dataclass(frozen=True)
class DiscountResult:
    """Outcome of applying an offer to a subtotal.

    Attributes:
        amount: Non-negative discount, zero when the offer was rejected
        reason: Why the offer was rejected, None when it applied
    """

    amount: Decimal
    reason: OfferIneligibleReason | None = None

    @property
    def applied(self) -> bool:
        """Whether the offer was accepted."""
        return self.reason is None

    @classmethod
    def rejected(cls, reason: OfferIneligibleReason) -> "DiscountResult":
        """Build a zero-discount result for the given reason."""
        return cls(amount=ZERO, reason=reason)


class Offer(BaseModel):
    """Immutable promotional rule."""

    model_config = ConfigDict(frozen=True, json_encoders={Decimal: str})

    code: str = Field(..., description="Unique promo code", min_length=1)
    value: Decimal = Field(..., description="Percentage or flat amount", gt=0)
    is_percentage: bool = Field(..., description="Percentage-of-subtotal when True, flat otherwise")
    min_order_value: Decimal = Field(
        default=ZERO, description="Minimum subtotal for the offer to apply", ge=0
    )

    def apply_discount(
        self, subtotal: Decimal, customer: "Customer | None" = None
    ) -> DiscountResult:
        """Compute the discount this offer grants on a subtotal.

        Rules are checked in order: minimum order value, then the loyalty
        threshold for the loyalty code. Flat discounts are clamped to the
        subtotal so the discounted amount never goes negative.

        Args:
            subtotal: Order subtotal
            customer: Customer placing the order, used for the loyalty check

        Returns:
            DiscountResult: Discount amount and rejection reason, if any
        """
        if subtotal < self.min_order_value:
            return DiscountResult.rejected(OfferIneligibleReason.BELOW_MINIMUM)

        if (
            self.code == LOYALTY_OFFER_CODE
            and customer is not None
            and customer.loyalty_points < LOYALTY_POINTS_THRESHOLD
        ):
            return DiscountResult.rejected(OfferIneligibleReason.INSUFFICIENT_LOYALTY)

        if self.is_percentage:
            amount = subtotal * self.value / Decimal(100)
        else:
            amount = self.value

        return DiscountResult(amount=to_money(min(amount, subtotal)))
