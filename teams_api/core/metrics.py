"""Prometheus metrics for the HTTP layer."""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, generate_latest

REQUEST_COUNTER_LABELS = ("method", "status_code", "path")


def create_request_counter(registry: CollectorRegistry) -> Counter:
    """Register the request counter on ``registry`` and return it."""
    return Counter(
        "http_requests_total",
        "Total number of HTTP requests",
        REQUEST_COUNTER_LABELS,
        registry=registry,
    )


def render_metrics(registry: CollectorRegistry) -> tuple[bytes, str]:
    """Render ``registry`` in the text exposition format."""
    return generate_latest(registry), CONTENT_TYPE_LATEST
