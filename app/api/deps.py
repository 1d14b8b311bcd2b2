import asyncio
import logging
from typing import Awaitable, TypeVar

from fastapi import Request

from ..core.config import settings
from ..core.errors import ClientDisconnected

logger = logging.getLogger(__name__)

T = TypeVar("T")

async def run_until_disconnect(request: Request, awaitable: Awaitable[T]) -> T:
    """Await ``awaitable``, cancelling it if the inbound client goes away first."""
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=settings.DISCONNECT_POLL_SECONDS)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("Client disconnected from %s; cancelling in-flight work", request.url.path)
                task.cancel()
                raise ClientDisconnected(request.url.path)
    finally:
        if not task.done():
            task.cancel()
