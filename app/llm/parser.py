import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..content.loader import MythFact, catalog_index

REPLY_FALLBACK = "I'm here to listen. Could you tell me more about how you're feeling?"
ANALYSIS_FALLBACK = "Your journal entry shows thoughtful self-reflection. Thank you for sharing your thoughts and feelings."
SUGGESTION_FALLBACK = "Consider exploring our Learning Hub for helpful insights about mental wellness."

ANALYSIS_MARKER = "ANALYSIS:"
SUGGESTION_MARKER = "SUGGESTION:"
MYTH_FACT_REF = re.compile(r"Myth\s*/\s*Fact\s*#\s*(\d{1,6})", re.IGNORECASE)

@dataclass(frozen=True)
class JournalAnalysis:
    analysis_text: str
    suggestion_text: str
    matched_myth_fact_index: Optional[int] = None  # 0-based

def extract_reply(raw: Optional[str]) -> str:
    text = (raw or "").strip()
    return text or REPLY_FALLBACK

def format_myth_fact(item: MythFact) -> str:
    return f'💡 Learning Hub Suggestion: "{item.myth}" - Actually, {item.fact}'

def split_sections(raw: str) -> tuple[str, str]:
    # stage 1: structural split; a missing marker leaves the suggestion empty
    head, _, tail = raw.partition(SUGGESTION_MARKER)
    analysis = head.replace(ANALYSIS_MARKER, "", 1).strip()
    return analysis, tail.strip()

def resolve_reference(suggestion: str, catalog: Sequence[MythFact]) -> Optional[int]:
    # stage 2: numeric back-reference into the catalog
    m = MYTH_FACT_REF.search(suggestion)
    if not m:
        return None
    return catalog_index(int(m.group(1)), len(catalog))

def parse_analysis(raw: Optional[str], catalog: Sequence[MythFact]) -> JournalAnalysis:
    analysis, suggestion = split_sections(raw or "")
    idx = resolve_reference(suggestion, catalog)
    if idx is not None:
        suggestion = format_myth_fact(catalog[idx])
    return JournalAnalysis(
        analysis_text=analysis or ANALYSIS_FALLBACK,
        suggestion_text=suggestion or SUGGESTION_FALLBACK,
        matched_myth_fact_index=idx,
    )
