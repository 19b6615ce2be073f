"""Cart models.

A cart is a transient collection of dish lines built during one ordering
session. It is copied into an Order at checkout and then discarded.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from foodmate.models.catalog_models import Dish
from foodmate.models.money import ZERO, to_money


class CartLine(BaseModel):
    """A dish and its quantity, with the price captured when it was added."""

    model_config = ConfigDict(frozen=True, json_encoders={Decimal: str})

    dish_id: str = Field(..., description="Dish identifier")
    name: str = Field(..., description="Dish name at the time it was added")
    unit_price: Decimal = Field(..., description="Unit price", gt=0)
    quantity: int = Field(..., description="Number of portions", ge=1)

    @property
    def line_total(self) -> Decimal:
        """Unit price times quantity."""
        return to_money(self.unit_price * self.quantity)


class Cart(BaseModel):
    """Mapping from dish id to cart line.

    Lines are keyed by dish id so two dishes that happen to share a name stay
    separate. Iteration is ordered by dish name, then dish id.
    """

    entries: dict[str, CartLine] = Field(default_factory=dict, description="Lines by dish id")

    def add_item(self, dish: Dish, quantity: int = 1) -> CartLine:
        """Add portions of a dish, merging with an existing line for the same dish.

        Args:
            dish: Dish to add
            quantity: Number of portions to add

        Returns:
            CartLine: The resulting line for this dish

        Raises:
            ValueError: If quantity is less than 1
        """
        if quantity < 1:
            raise ValueError("quantity must be at least 1")

        existing = self.entries.get(dish.dish_id)
        if existing is not None:
            line = existing.model_copy(update={"quantity": existing.quantity + quantity})
        else:
            line = CartLine(
                dish_id=dish.dish_id,
                name=dish.name,
                unit_price=dish.price,
                quantity=quantity,
            )

        self.entries[dish.dish_id] = line
        return line

    def remove_item(self, name: str) -> bool:
        """Remove the first line whose dish name matches.

        Only one line is removed even if several dishes share the name.

        Returns:
            bool: True if a line was removed, False otherwise
        """
        for line in self.lines():
            if line.name == name:
                del self.entries[line.dish_id]
                return True
        return False

    def lines(self) -> list[CartLine]:
        """Return the lines in deterministic order."""
        return sorted(self.entries.values(), key=lambda line: (line.name, line.dish_id))

    def subtotal(self) -> Decimal:
        """Sum of unit price times quantity over all lines."""
        return to_money(sum((line.line_total for line in self.entries.values()), ZERO))

    def is_empty(self) -> bool:
        """Whether the cart has no lines."""
        return not self.entries

    def snapshot(self) -> tuple[CartLine, ...]:
        """Frozen copy of the lines for an order."""
        return tuple(self.lines())
