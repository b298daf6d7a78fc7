"""SQLAlchemy model for saved greeting messages."""

from sqlalchemy import Column, Integer, Text

from sample.models.base import Base


class Message(Base):
    __tablename__ = "message"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    content = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Message(id={self.id!r}, content={self.content!r})"


__all__ = ["Message"]
