"""Greeting controller: saves a fixed message on every call."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from sample.application.use_cases.greeting_use_cases import SaveGreetingUseCase
from sample.controllers.dependencies import MessageRepositoryDep
from sample.telemetry import increment_messages_saved

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hello"])


@router.get("/hello", response_class=PlainTextResponse)
async def hello_world(repository: MessageRepositoryDep) -> str:
    message = await SaveGreetingUseCase(repository).execute()
    increment_messages_saved()
    logger.info("Saved message id=%s", message.id)
    return f"Message saved: {message.content}"
