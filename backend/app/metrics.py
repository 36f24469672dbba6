"""Prometheus collectors shared by the HTTP layer and use cases."""
from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "event_status_requests_total", "Total HTTP requests", ["method", "path", "status"]
)
REQUEST_LATENCY = Histogram(
    "event_status_request_latency_seconds", "Latency of HTTP requests", ["method", "path"]
)

# Application-level domain metrics
STATUS_CHECK_COUNT = Counter(
    "event_status_checks_total", "Computed last-event statuses", ["status"]
)
