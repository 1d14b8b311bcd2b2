from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple

class Speaker(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"

@dataclass(frozen=True)
class Turn:
    text: str
    speaker: Speaker

def window(turns: Sequence[Turn], max_turns: int) -> Tuple[Turn, ...]:
    # truncate from the oldest end only; order is never changed
    if max_turns <= 0:
        return ()
    return tuple(turns[-max_turns:])

def build_context(history: Iterable[Turn], message: str, max_turns: int) -> Tuple[Turn, ...]:
    """Window prior history and append the incoming user message.

    The result holds at most ``max_turns`` entries, the current message included.
    The current message is kept even when ``max_turns`` is below 1.
    """
    current = Turn(text=message, speaker=Speaker.USER)
    prior = window(tuple(history), max_turns - 1)
    return prior + (current,)
