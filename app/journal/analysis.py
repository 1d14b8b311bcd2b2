from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from ..content.loader import load_myth_facts
from ..conversation.turns import Speaker, Turn
from ..core.config import settings
from ..core.errors import ConfigError
from ..llm import openai_client
from ..llm.openai_client import CompletionRequest, Failure
from ..llm.parser import JournalAnalysis, parse_analysis
from ..llm.prompts import build_journal_prompt, journal_entry_message

logger = logging.getLogger(__name__)

ANALYSIS_ERROR_FALLBACK = "Thank you for sharing your thoughts. Self-reflection through journaling is a wonderful practice for mental wellness."
SUGGESTION_ERROR_FALLBACK = "Visit our Learning Hub to explore helpful insights about mental health and wellness."

@dataclass(frozen=True)
class JournalOutcome:
    analysis: JournalAnalysis
    error: Optional[str] = None

def _fallback(error: str) -> JournalOutcome:
    return JournalOutcome(JournalAnalysis(ANALYSIS_ERROR_FALLBACK, SUGGESTION_ERROR_FALLBACK), error)

async def analyze_entry(content: str) -> JournalOutcome:
    catalog = load_myth_facts()
    req = CompletionRequest(
        system_prompt=build_journal_prompt(catalog),
        turns=(Turn(journal_entry_message(content), Speaker.USER),),
        max_tokens=settings.JOURNAL_MAX_TOKENS,
        temperature=settings.LLM_TEMPERATURE,
    )

    try:
        result = await openai_client.complete(req)
    except ConfigError as e:
        logger.error("Journal analysis not configured: %s", e)
        return _fallback(str(e))
    except Exception as e:
        logger.exception("Journal analysis raised unexpectedly")
        return _fallback(f"{e.__class__.__name__}: {e}")

    if isinstance(result, Failure):
        logger.warning("Journal analysis failed kind=%s detail=%s", result.kind.value, result.detail)
        return _fallback(f"{result.kind.value}: {result.detail}")

    analysis = parse_analysis(result.text, catalog)
    if analysis.matched_myth_fact_index is None:
        logger.info("Journal suggestion did not cite a valid myth/fact entry; keeping model text")
    return JournalOutcome(analysis)
