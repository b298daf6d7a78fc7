"""SQLAlchemy models for the sample service."""

from .base import Base
from .log import RequestLog  # noqa: F401
from .message import Message  # noqa: F401

__all__ = [
    "Base",
    "Message",
    "RequestLog",
]
