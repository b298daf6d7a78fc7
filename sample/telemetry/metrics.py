"""Prometheus metrics for HTTP traffic and saved greetings."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

_LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)

REQUEST_COUNT = Counter(
    "http_requests_total",
    "HTTP requests handled, by route template and status code",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "Time spent producing each HTTP response",
    ("method", "route"),
    buckets=_LATENCY_BUCKETS,
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Requests answered with a 5xx status",
    ("method", "route"),
)

MESSAGES_SAVED_COUNTER = Counter(
    "app_messages_saved_total",
    "Greeting messages written by GET /hello",
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record one finished request; empty labels and negative durations are normalised."""

    labels = {"method": method or "UNKNOWN", "route": route or "unknown"}

    REQUEST_COUNT.labels(status=str(status_code), **labels).inc()
    REQUEST_LATENCY.labels(**labels).observe(max(duration_seconds, 0.0))
    if status_code >= 500:
        ERROR_COUNTER.labels(**labels).inc()


def increment_messages_saved() -> None:
    MESSAGES_SAVED_COUNTER.inc()
