"""User models.

Users form a tagged union over three variants discriminated on ``kind``.
Each variant implements the same small capability set: authenticate,
register_profile and describe_profile.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from foodmate.auth.password_hasher import verify_password
from foodmate.models.money import ZERO, to_money
from foodmate.models.rating_models import RunningRating


class UserKind(str, Enum):
    """Enumeration of user variants."""

    CUSTOMER = "customer"
    RESTAURANT_OWNER = "restaurant_owner"
    DELIVERY_PARTNER = "delivery_partner"


class BaseUser(BaseModel):
    """Identity fields shared by every user variant."""

    model_config = ConfigDict(json_encoders={Decimal: str})

    user_id: str = Field(..., description="Unique user identifier")
    name: str = Field(..., description="Display name", min_length=1)
    password_hash: str = Field(..., description="Hashed password", repr=False)
    logged_in: bool = Field(default=False, description="Whether the user is logged in")

    def authenticate(self, user_id: str, password: str) -> bool:
        """Log the user in if the credentials match.

        Args:
            user_id: Claimed user id
            password: Plain-text password

        Returns:
            bool: True if the user is now logged in
        """
        if user_id != self.user_id or not verify_password(password, self.password_hash):
            return False

        self.logged_in = True
        return True

    def logout(self) -> bool:
        """Log the user out.

        Returns:
            bool: True if the user was logged in
        """
        if not self.logged_in:
            return False

        self.logged_in = False
        return True


class Customer(BaseUser):
    """Customer placing orders."""

    kind: Literal[UserKind.CUSTOMER] = UserKind.CUSTOMER
    delivery_address: str = Field(..., description="Default delivery address")
    loyalty_points: Decimal = Field(default=ZERO, description="Loyalty point balance", ge=0)
    order_history: list[str] = Field(default_factory=list, description="Completed order ids")

    def register_profile(self) -> str:
        return f"Customer {self.name} registered successfully with ID: {self.user_id}"

    def describe_profile(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "user_id": self.user_id,
            "name": self.name,
            "delivery_address": self.delivery_address,
            "loyalty_points": str(self.loyalty_points),
            "past_orders": len(self.order_history),
        }

    def add_loyalty_points(self, points: Decimal) -> Decimal:
        """Credit loyalty points and return the new balance."""
        self.loyalty_points = to_money(self.loyalty_points + points)
        return self.loyalty_points


class RestaurantOwner(BaseUser):
    """Owner of zero or more restaurants, held as restaurant ids."""

    kind: Literal[UserKind.RESTAURANT_OWNER] = UserKind.RESTAURANT_OWNER
    restaurant_ids: list[str] = Field(default_factory=list, description="Owned restaurant ids")

    def register_profile(self) -> str:
        return f"Restaurant Owner {self.name} registered successfully with ID: {self.user_id}"

    def describe_profile(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "user_id": self.user_id,
            "name": self.name,
            "owned_restaurants": list(self.restaurant_ids),
        }


class DeliveryPartner(BaseUser):
    """Delivery partner.

    A partner is either available or carrying exactly one in-flight order,
    never both.
    """

    kind: Literal[UserKind.DELIVERY_PARTNER] = UserKind.DELIVERY_PARTNER
    vehicle_type: str = Field(..., description="Vehicle used for deliveries")
    earnings: Decimal = Field(default=ZERO, description="Cumulative tip earnings", ge=0)
    rating: RunningRating = Field(
        default_factory=lambda: RunningRating(average=5.0, count=1),
        description="Running delivery rating",
    )
    available: bool = Field(default=True, description="Whether the partner can take an order")
    current_order_id: str | None = Field(None, description="Order currently being delivered")

    @model_validator(mode="after")
    def validate_availability(self) -> "DeliveryPartner":
        """Validate that availability and the current order agree."""
        if self.available == (self.current_order_id is not None):
            raise ValueError("partner must be either available or assigned to one order")
        return self

    def register_profile(self) -> str:
        return f"Delivery Partner {self.name} registered successfully with ID: {self.user_id}"

    def describe_profile(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "user_id": self.user_id,
            "name": self.name,
            "vehicle_type": self.vehicle_type,
            "earnings": str(self.earnings),
            "rating": self.rating.display(),
            "status": "Available" if self.available else "On Delivery",
        }

    def start_delivery(self, order_id: str) -> bool:
        """Take an order.

        Returns:
            bool: False if the partner is already on a delivery
        """
        if not self.available:
            return False

        self.available = False
        self.current_order_id = order_id
        return True

    def complete_delivery(self, tip: Decimal, stars: int | None = None) -> None:
        """Finish the current delivery, crediting the tip and folding in a rating."""
        if stars is not None:
            self.rating.add(stars)
        self.earnings = to_money(self.earnings + tip)
        self.release()

    def release(self) -> None:
        """Return to the available pool without completing a delivery."""
        self.available = True
        self.current_order_id = None


User = Annotated[Customer | RestaurantOwner | DeliveryPartner, Field(discriminator="kind")]
