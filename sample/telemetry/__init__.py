"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    MESSAGES_SAVED_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    increment_messages_saved,
    observe_request,
)

__all__ = [
    "ERROR_COUNTER",
    "MESSAGES_SAVED_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "increment_messages_saved",
    "observe_request",
]
