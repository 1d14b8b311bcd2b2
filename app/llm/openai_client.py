import asyncio
import logging
from dataclasses import dataclass
from typing import Sequence, Union

import httpx

from ..core.config import settings
from ..core.errors import ConfigError, ErrorKind
from ..conversation.turns import Speaker, Turn

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CompletionRequest:
    system_prompt: str
    turns: Sequence[Turn]
    max_tokens: int
    temperature: float

@dataclass(frozen=True)
class Success:
    text: str

@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    detail: str = ""

CompletionResult = Union[Success, Failure]

def build_payload(req: CompletionRequest) -> dict:
    messages = [{"role": "system", "content": req.system_prompt}]
    for turn in req.turns:
        role = "user" if turn.speaker == Speaker.USER else "assistant"
        messages.append({"role": role, "content": turn.text})
    return {
        "model": settings.OPENAI_MODEL,
        "messages": messages,
        "temperature": req.temperature,
        "max_tokens": req.max_tokens,
    }

async def _post(payload: dict, transport: httpx.AsyncBaseTransport | None) -> httpx.Response:
    url = f"{settings.OPENAI_BASE_URL.rstrip('/')}/chat/completions"
    headers = {"Authorization": f"Bearer {settings.OPENAI_API_KEY}"}
    async with httpx.AsyncClient(timeout=settings.OPENAI_TIMEOUT_SECONDS, transport=transport) as client:
        return await client.post(url, headers=headers, json=payload)

async def complete(req: CompletionRequest, transport: httpx.AsyncBaseTransport | None = None) -> CompletionResult:
    """Issue one completion call. Provider trouble is returned as a Failure, never raised.

    Raises ConfigError when the provider key is not configured. No retries.
    """
    if not settings.OPENAI_API_KEY:
        raise ConfigError("OPENAI_API_KEY is not set")

    logger.debug("completion call model=%s turns=%d", settings.OPENAI_MODEL, len(req.turns))
    try:
        r = await asyncio.wait_for(_post(build_payload(req), transport), timeout=settings.COMPLETION_DEADLINE_SECONDS)
    except asyncio.TimeoutError:
        return Failure(ErrorKind.PROVIDER_ERROR, f"completion exceeded {settings.COMPLETION_DEADLINE_SECONDS}s deadline")
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        # InvalidURL and UnicodeError come from building the request (bad base URL or key)
        return Failure(ErrorKind.PROVIDER_ERROR, f"transport error: {e.__class__.__name__}: {e}")

    if not r.is_success:
        return Failure(ErrorKind.PROVIDER_ERROR, f"provider returned HTTP {r.status_code}: {r.text[:500]}")

    try:
        data = r.json()
    except ValueError:
        return Failure(ErrorKind.EMPTY_RESPONSE, "provider returned a non-JSON body")

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return Failure(ErrorKind.PROVIDER_ERROR, "provider response is missing choices[0].message.content")

    if not isinstance(content, str) or not content.strip():
        return Failure(ErrorKind.EMPTY_RESPONSE, "provider returned an empty completion")
    return Success(content)
