"""Sequential identifier generation for marketplace entities."""

from itertools import count


class IdGenerator:
    """Generates prefixed sequential ids.

    Each marketplace owns one generator, so ids are unique within that
    marketplace and tests get predictable values.
    """

    def __init__(
        self,
        user_start: int = 1000,
        restaurant_start: int = 500,
        order_start: int = 100,
        dish_start: int = 100,
    ) -> None:
        """Initialize the counters.

        Args:
            user_start: Last user number issued; the first id is one higher
            restaurant_start: Last restaurant number issued
            order_start: Last order number issued
            dish_start: Last dish number issued
        """
        self._users = count(user_start + 1)
        self._restaurants = count(restaurant_start + 1)
        self._orders = count(order_start + 1)
        self._dishes = count(dish_start + 1)

    def next_user_id(self) -> str:
        return f"U{next(self._users)}"

    def next_restaurant_id(self) -> str:
        return f"R{next(self._restaurants)}"

    def next_order_id(self) -> str:
        return f"O{next(self._orders)}"

    def next_dish_id(self) -> str:
        return f"D{next(self._dishes)}"
