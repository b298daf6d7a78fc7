from sample.application.interfaces import MessageRepositoryInterface
from sample.models.message import Message

GREETING = "Hello!"


class SaveGreetingUseCase:
    """Use case to persist the fixed greeting message"""

    def __init__(self, repository: MessageRepositoryInterface):
        self.repository = repository

    async def execute(self) -> Message:
        message = Message(content=GREETING)
        return await self.repository.save(message)
