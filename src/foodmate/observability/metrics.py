"""Custom metrics for the order core."""

from opentelemetry import metrics

meter = metrics.get_meter("foodmate")

orders_placed_counter = meter.create_counter(
    name="orders_placed_total",
    description="Total number of orders placed by restaurant",
    unit="1",
)

orders_unassigned_counter = meter.create_counter(
    name="orders_unassigned_total",
    description="Orders placed while no delivery partner was available",
    unit="1",
)

status_transition_counter = meter.create_counter(
    name="order_status_transitions_total",
    description="Order status transitions by target status",
    unit="1",
)

discount_counter = meter.create_counter(
    name="offer_applications_total",
    description="Offer applications by code and outcome",
    unit="1",
)

payment_declined_counter = meter.create_counter(
    name="payments_declined_total",
    description="Simulated payments that were declined, by mode",
    unit="1",
)

rating_histogram = meter.create_histogram(
    name="rating_stars",
    description="Submitted star ratings by subject",
    unit="1",
)


def record_order_placed(restaurant_id: str, assigned: bool) -> None:
    """Record a placed order.

    Args:
        restaurant_id: Restaurant the order is from
        assigned: Whether a delivery partner was assigned
    """
    orders_placed_counter.add(1, {"restaurant_id": restaurant_id})
    if not assigned:
        orders_unassigned_counter.add(1, {"restaurant_id": restaurant_id})


def record_status_transition(status: str) -> None:
    """Record a status transition to the given status."""
    status_transition_counter.add(1, {"status": status})


def record_offer_application(code: str, outcome: str) -> None:
    """Record an offer application.

    Args:
        code: Offer code
        outcome: "applied" or the rejection reason
    """
    discount_counter.add(1, {"code": code, "outcome": outcome})


def record_payment_declined(mode: str) -> None:
    """Record a declined payment for the given payment mode."""
    payment_declined_counter.add(1, {"mode": mode})


def record_rating(subject: str, stars: int) -> None:
    """Record a star rating.

    Args:
        subject: "food" or "delivery"
        stars: Star score
    """
    rating_histogram.record(stars, {"subject": subject})
