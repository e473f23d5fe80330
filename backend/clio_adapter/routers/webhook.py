"""Receiver endpoint Clio posts webhook deliveries to."""

from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import APIRouter, HTTPException, Request
from loguru import logger

from clio_adapter.models import WebhookEvent
from clio_adapter.services.webhook import handle_webhook

router = APIRouter(tags=["webhook"])

EventHandler = Callable[[WebhookEvent], Awaitable[None]]


async def log_event(event: WebhookEvent) -> None:
    logger.info("Clio event {} at {}", event.event, event.timestamp)


_event_handler: EventHandler = log_event


def set_event_handler(handler: EventHandler | None) -> None:
    """Register the coroutine each normalized event is passed to."""
    global _event_handler
    _event_handler = handler or log_event


@router.post("/webhook")
async def receive_webhook(request: Request):
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Webhook body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Webhook body must be a JSON object")

    result = handle_webhook(body, request.headers)
    for event in result.events:
        await _event_handler(event)

    if result.response_body is not None:
        return result.response_body
    return {"received": len(result.events)}
