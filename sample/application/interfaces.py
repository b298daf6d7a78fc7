from abc import ABC, abstractmethod

from sample.models.message import Message


class MessageRepositoryInterface(ABC):
    """Persistence contract for greeting messages"""

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Insert ``message`` and return it with its identifier assigned."""
        ...
