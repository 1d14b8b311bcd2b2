import os, yaml
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

CATALOG_PATH = os.path.join(os.path.dirname(__file__), "myth_facts.yaml")

@dataclass(frozen=True)
class MythFact:
    myth: str
    fact: str

@lru_cache(maxsize=1)
def load_myth_facts() -> Tuple[MythFact, ...]:
    with open(CATALOG_PATH, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    return tuple(MythFact(myth=str(item["myth"]), fact=str(item["fact"])) for item in data)

def catalog_index(number: int, size: int) -> Optional[int]:
    """Convert a 1-based catalog number (as cited by the model) to a 0-based index.

    Returns None when the number does not name an entry.
    """
    idx = number - 1
    if 0 <= idx < size:
        return idx
    return None

def catalog_number(index: int) -> int:
    return index + 1
