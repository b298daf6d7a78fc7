from sqlalchemy.ext.asyncio import AsyncSession

from sample.application.interfaces import MessageRepositoryInterface
from sample.models.message import Message


class SQLAlchemyMessageRepository(MessageRepositoryInterface):
    """SQLAlchemy implementation of the message repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, message: Message) -> Message:
        self.session.add(message)
        await self.session.commit()
        await self.session.refresh(message)
        return message
