# heuristics.py
# Hand-written rule tables for very common typing patterns.
#  - CORRECTIONS: in-progress token -> canonical form (apostrophe-less contractions)
#  - CONTINUATIONS: previous completed word -> likely next words
# Both are read-only.

from types import MappingProxyType
from typing import List, Optional

CORRECTIONS = MappingProxyType({
    "im": "I'm",
    "dont": "don't",
    "cant": "can't",
    "wont": "won't",
    "idk": "I don't know",
    "ive": "I've",
    "ill": "I'll",
    "didnt": "didn't",
    "isnt": "isn't",
    "youre": "you're",
    "theyre": "they're",
    "weve": "we've",
    "lets": "let's",
})

CONTINUATIONS = MappingProxyType({
    "i": ("am", "have", "will"),
    "you": ("are", "can", "will"),
    "we": ("are", "can", "will"),
    "they": ("are", "have", "will"),
    "to": ("be", "have", "go"),
    "for": ("the", "your", "a"),
    "in": ("the", "a", "this"),
    "on": ("the", "a", "this"),
    "with": ("the", "your", "a"),
})

# shown when nothing else applies to an empty/one-letter token
DEFAULT_SUGGESTIONS = ("the", "and", "you")


def correction_for(token: Optional[str]) -> List[str]:
    """Canonical replacement for the in-progress token, as a 0/1-item list."""
    if not token:
        return []
    fixed = CORRECTIONS.get(token.lower())
    return [fixed] if fixed else []


def continuations_for(previous: Optional[str], prefix: Optional[str] = None) -> List[str]:
    """Likely next words after `previous`, optionally narrowed to `prefix`."""
    if not previous:
        return []
    options = CONTINUATIONS.get(previous.lower(), ())
    if prefix:
        p = prefix.lower()
        return [w for w in options if w.startswith(p)]
    return list(options)
