"""OpenTelemetry instrumentation, logging, and metrics."""

from rural_connect.observability.config import configure_logging, setup_observability
from rural_connect.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
