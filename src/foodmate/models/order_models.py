"""Order models and the order status state machine.

An order snapshots the cart at creation time. The subtotal is computed once
from that snapshot and never recomputed; discount and tip are tracked
separately and the final amount is derived from the three.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from foodmate.models.cart_models import CartLine
from foodmate.models.money import ZERO, to_money
from foodmate.models.offer_models import DiscountResult


class OrderStatus(str, Enum):
    """Enumeration of order status values."""

    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Human-readable status name."""
        return self.value.replace("_", " ").capitalize()

    @property
    def is_terminal(self) -> bool:
        """Whether no further transitions are possible."""
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


# Forward-only happy path plus the single cancellation edge.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.OUT_FOR_DELIVERY}),
    OrderStatus.OUT_FOR_DELIVERY: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class StatusChange(BaseModel):
    """One entry in an order's status history."""

    model_config = ConfigDict(frozen=True)

    status: OrderStatus
    changed_at: datetime


class Order(BaseModel):
    """A single purchase and its lifecycle.

    Cross-entity references (customer, restaurant, partner) are ids resolved
    through the marketplace repositories.
    """

    model_config = ConfigDict(json_encoders={Decimal: str})

    order_id: str = Field(..., description="Unique order identifier")
    customer_id: str = Field(..., description="Customer who placed the order")
    restaurant_id: str = Field(..., description="Restaurant the order is from")
    delivery_address: str = Field(default="", description="Delivery address snapshot")
    lines: tuple[CartLine, ...] = Field(..., description="Frozen copy of the cart", min_length=1)
    subtotal: Decimal = Field(..., description="Subtotal computed at creation", ge=0)
    partner_id: str | None = Field(None, description="Assigned delivery partner")
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Current status")
    discount_applied: Decimal = Field(default=ZERO, description="Discount amount", ge=0)
    offer_code: str | None = Field(None, description="Code of the applied offer")
    tip: Decimal = Field(default=ZERO, description="Delivery tip", ge=0)
    version: int = Field(
        default=0, description="Incremented on every mutation, checked by advance_status", ge=0
    )
    loyalty_awarded: bool = Field(default=False, description="Loyalty points already credited")
    status_history: list[StatusChange] = Field(default_factory=list)

    def model_post_init(self, __context: object) -> None:
        if not self.status_history:
            self.status_history.append(
                StatusChange(status=self.status, changed_at=datetime.now(UTC))
            )

    @property
    def final_amount(self) -> Decimal:
        """Subtotal minus discount plus tip."""
        return to_money(self.subtotal - self.discount_applied + self.tip)

    @property
    def dish_ids(self) -> list[str]:
        """Distinct dish ids in the order, in line order."""
        return list(dict.fromkeys(line.dish_id for line in self.lines))

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        """Check whether moving to new_status is a legal transition."""
        return new_status in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, new_status: OrderStatus) -> bool:
        """Move the order to a new status.

        Args:
            new_status: Target status

        Returns:
            bool: True if the transition happened, False if it is not allowed
        """
        if not self.can_transition_to(new_status):
            return False

        self.status = new_status
        self.status_history.append(StatusChange(status=new_status, changed_at=datetime.now(UTC)))
        self.version += 1
        return True

    def apply_discount(self, result: DiscountResult, offer_code: str) -> bool:
        """Record the outcome of an offer on this order.

        A later offer replaces an earlier one. Rejected offers reset the
        discount to zero, matching the zero amount they carry.

        Returns:
            bool: False if the order is no longer pending
        """
        if self.status != OrderStatus.PENDING:
            return False

        self.discount_applied = result.amount
        self.offer_code = offer_code if result.applied else None
        self.version += 1
        return True

    def set_tip(self, amount: Decimal) -> bool:
        """Set the delivery tip, replacing any earlier tip.

        Raises:
            ValueError: If amount is negative

        Returns:
            bool: False if the order was cancelled
        """
        tip = to_money(amount)
        if tip < ZERO:
            raise ValueError("tip must be non-negative")
        if self.status == OrderStatus.CANCELLED:
            return False

        self.tip = tip
        self.version += 1
        return True

    def assign_partner(self, partner_id: str) -> None:
        """Record the delivery partner for this order."""
        self.partner_id = partner_id
        self.version += 1
