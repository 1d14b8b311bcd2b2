from enum import Enum

class RiskLevel(str, Enum):
    NORMAL = "NORMAL"
    HIGH = "HIGH"

# Plain substrings, matched case-insensitively. No stemming or fuzzy matching.
CRISIS_PHRASES = (
    "suicide",
    "kill myself",
    "end my life",
    "self-harm",
    "hurt myself",
    "want to die",
    "no point living",
)

def classify(message: str) -> RiskLevel:
    t = (message or "").lower()
    for phrase in CRISIS_PHRASES:
        if phrase in t:
            return RiskLevel.HIGH
    return RiskLevel.NORMAL
