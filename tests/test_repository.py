"""Tests for the SQLAlchemy repository and the greeting use case."""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from sample.application.interfaces import MessageRepositoryInterface
from sample.application.use_cases.greeting_use_cases import GREETING, SaveGreetingUseCase
from sample.database import session_scope
from sample.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemyMessageRepository,
)
from sample.models.message import Message


class RecordingRepository(MessageRepositoryInterface):
    def __init__(self):
        self.calls: list[Message] = []

    async def save(self, message: Message) -> Message:
        self.calls.append(message)
        message.id = len(self.calls)
        return message


def test_save_assigns_identifier(fetch_messages):
    async def save_two() -> list[Message]:
        async with session_scope() as session:
            repository = SQLAlchemyMessageRepository(session)
            first = await repository.save(Message(content="first"))
            second = await repository.save(Message(content="second"))
            return [first, second]

    first, second = asyncio.run(save_two())

    assert first.id is not None
    assert second.id > first.id
    assert [(m.id, m.content) for m in fetch_messages()] == [
        (first.id, "first"),
        (second.id, "second"),
    ]


def test_save_rejects_missing_content(fetch_messages):
    async def save_empty() -> None:
        async with session_scope() as session:
            await SQLAlchemyMessageRepository(session).save(Message())

    with pytest.raises(IntegrityError):
        asyncio.run(save_empty())
    assert fetch_messages() == []


def test_use_case_saves_fixed_greeting_once():
    repository = RecordingRepository()

    message = asyncio.run(SaveGreetingUseCase(repository).execute())

    assert len(repository.calls) == 1
    assert message is repository.calls[0]
    assert message.content == GREETING == "Hello!"
    assert message.id == 1
