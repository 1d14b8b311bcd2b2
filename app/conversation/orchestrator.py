from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional
import logging

from .risk import RiskLevel, classify
from .turns import Turn, build_context
from ..core.config import settings
from ..core.errors import ConfigError
from ..llm import openai_client
from ..llm.openai_client import CompletionRequest, Failure
from ..llm.parser import extract_reply
from ..llm.prompts import SAFETY_SCRIPT, Tone, build_chat_prompt

logger = logging.getLogger(__name__)

ERROR_FALLBACK = "I'm here to support you. Sometimes I have technical difficulties, but your feelings matter to me. How are you doing right now?"

@dataclass(frozen=True)
class ChatOutcome:
    reply: str
    is_high_risk: bool
    error: Optional[str] = None

def with_safety_script(reply: str) -> str:
    """Append the safety script unless the reply already contains it verbatim.

    A paraphrased copy does not count, so the user may see similar text twice.
    """
    if SAFETY_SCRIPT in reply:
        return reply
    return f"{reply}\n\n{SAFETY_SCRIPT}"

def fallback_reply(risk: RiskLevel) -> str:
    # a HIGH risk message never gets the generic fallback
    if risk == RiskLevel.HIGH:
        return SAFETY_SCRIPT
    return ERROR_FALLBACK

async def handle_chat(message: str, history: Iterable[Turn], tone: Tone = Tone.GENTLE) -> ChatOutcome:
    risk = classify(message)
    high = risk == RiskLevel.HIGH
    if high:
        logger.warning("High-risk message detected; safety script will be attached")

    req = CompletionRequest(
        system_prompt=build_chat_prompt(tone, risk),
        turns=build_context(history, message, settings.CHAT_MAX_TURNS),
        max_tokens=settings.CHAT_MAX_TOKENS,
        temperature=settings.LLM_TEMPERATURE,
    )

    try:
        result = await openai_client.complete(req)
    except ConfigError as e:
        logger.error("Chat completion not configured: %s", e)
        return ChatOutcome(fallback_reply(risk), high, str(e))
    except Exception as e:
        logger.exception("Chat completion raised unexpectedly")
        return ChatOutcome(fallback_reply(risk), high, f"{e.__class__.__name__}: {e}")

    if isinstance(result, Failure):
        logger.warning("Chat completion failed kind=%s detail=%s", result.kind.value, result.detail)
        return ChatOutcome(fallback_reply(risk), high, f"{result.kind.value}: {result.detail}")

    reply = extract_reply(result.text)
    if high:
        reply = with_safety_script(reply)
    return ChatOutcome(reply, high)
