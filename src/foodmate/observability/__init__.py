"""OpenTelemetry instrumentation and observability utilities."""

from foodmate.observability.config import configure_logging, setup_observability
from foodmate.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
