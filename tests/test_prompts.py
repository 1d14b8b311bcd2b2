from app.content.loader import load_myth_facts
from app.conversation.risk import RiskLevel
from app.llm.prompts import (
    HELPLINES, SAFETY_CLAUSE, TONE_CLAUSES, Tone, build_chat_prompt, build_journal_prompt,
)

def test_formal_normal_prompt_has_formal_clause_and_no_safety():
    p = build_chat_prompt(Tone.FORMAL, RiskLevel.NORMAL)
    assert TONE_CLAUSES[Tone.FORMAL] in p
    assert TONE_CLAUSES[Tone.GENTLE] not in p
    assert SAFETY_CLAUSE not in p
    for name, number in HELPLINES:
        assert number not in p

def test_high_risk_prompt_has_safety_clause():
    p = build_chat_prompt(Tone.CHEERFUL, RiskLevel.HIGH)
    assert SAFETY_CLAUSE in p
    assert TONE_CLAUSES[Tone.CHEERFUL] in p

def test_tone_from_value_falls_back_to_gentle():
    assert Tone.from_value("FORMAL") == Tone.FORMAL
    assert Tone.from_value(" cheerful ") == Tone.CHEERFUL
    assert Tone.from_value("sarcastic") == Tone.GENTLE
    assert Tone.from_value(None) == Tone.GENTLE
    assert Tone.from_value("") == Tone.GENTLE

def test_journal_prompt_numbers_catalog_from_one():
    catalog = load_myth_facts()
    p = build_journal_prompt(catalog)
    for i, item in enumerate(catalog, start=1):
        assert f'{i}. Myth: "{item.myth}" | Fact: "{item.fact}"' in p
    assert "ANALYSIS:" in p and "SUGGESTION:" in p
