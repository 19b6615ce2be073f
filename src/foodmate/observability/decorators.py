"""OpenTelemetry tracing decorators for order-core operations."""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace

F = TypeVar("F", bound=Callable[..., Any])

ORDER_ID_ATTRIBUTE = "order.id"
ORDER_STATUS_ATTRIBUTE = "order.status"


def order_attributes(bound: inspect.BoundArguments) -> dict[str, str]:
    """Extract order span attributes from a call's arguments.

    An ``order_id`` argument or an ``order`` argument carrying an
    ``order_id`` attribute identifies the order.
    """
    arguments = bound.arguments
    order_id = arguments.get("order_id")
    if order_id is None:
        order_id = getattr(arguments.get("order"), "order_id", None)

    attributes: dict[str, str] = {}
    if isinstance(order_id, str):
        attributes[ORDER_ID_ATTRIBUTE] = order_id
    new_status = arguments.get("new_status")
    if new_status is not None:
        attributes["order.target_status"] = getattr(new_status, "value", str(new_status))
    return attributes


def traced(span_name: str | None = None, service_name: str = "foodmate") -> Callable[[F], F]:
    """Decorator to add OpenTelemetry tracing to an order-core operation.

    The span is tagged with the order id and target status when the wrapped
    function takes them, and with the order's resulting status when it
    returns an order. A False or None result marks the span unsuccessful.

    Args:
        span_name: Name for the span (defaults to function name if not provided)
        service_name: Service name for span attributes

    Returns:
        Decorated function with tracing

    Example:
        @traced("place_order")
        def place_order(self, order: Order) -> Order | None:
            ...
    """

    def decorator(func: F) -> F:
        name = span_name or func.__name__
        tracer = trace.get_tracer(service_name)
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(name) as span:
                span.set_attribute("service.name", service_name)
                span.set_attribute("function.name", func.__name__)
                for key, value in order_attributes(signature.bind(*args, **kwargs)).items():
                    span.set_attribute(key, value)

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("success", False)
                    span.set_attribute("error.type", type(e).__name__)
                    span.record_exception(e)
                    raise

                span.set_attribute("success", result is not None and result is not False)
                status = getattr(result, "status", None)
                if status is not None:
                    status_value = getattr(status, "value", str(status))
                    span.set_attribute(ORDER_STATUS_ATTRIBUTE, status_value)
                return result

        return wrapper  # type: ignore

    return decorator
