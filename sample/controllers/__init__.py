"""FastAPI routers acting as controllers."""

from . import hello

__all__ = ["hello"]
