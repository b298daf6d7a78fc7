"""Pydantic schemas used as views."""

from .common import ErrorResponse

__all__ = ["ErrorResponse"]
