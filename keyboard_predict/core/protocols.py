# keyboard_predict/core/protocols.py
"""
Protocol interfaces for the suggestion engine.

The host keyboard only ever talks to a SuggestionBackend: one method, text in,
at most three strings out. The pipeline depends on the two lookup protocols
rather than the concrete TermIndex/BigramIndex so tests can pass fakes.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Typed structures ------------------------------------------------------------

class EngineStats(TypedDict):
    """Snapshot returned by AutocompleteService.stats()."""
    state: str
    terms: int
    bigrams: int
    parse_count: int
    load_seconds: float


# Protocols ------------------------------------------------------------------

@runtime_checkable
class SuggestionBackend(Protocol):
    """What a keyboard host needs from a suggestion provider."""

    def suggest(self, text: str) -> List[str]:
        """Return up to three suggestions for `text` (cursor at the end)."""
        ...


class TermLookupProtocol(Protocol):
    """Dictionary lookups used by the pipeline's dictionary source."""

    def lookup_fuzzy(self, word: str, max_distance: int = 2) -> list:
        ...

    def lookup_compound(self, text: str, max_distance: int = 2) -> list:
        ...

    def __contains__(self, word: str) -> bool:
        ...

    def __len__(self) -> int:
        ...


class BigramLookupProtocol(Protocol):
    """Pair-frequency lookups used for next-word candidates and ranking."""

    def next_words(self, previous_word: Optional[str], prefix: Optional[str] = None) -> List[str]:
        ...

    def score(self, previous_word: Optional[str], candidate: Optional[str]) -> int:
        ...

    def __len__(self) -> int:
        ...
