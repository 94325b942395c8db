# autocomplete_service.py
"""
AutocompleteService - the facade a keyboard host talks to.

Purpose:
 - Own (or share) a ResourceLoader and build the SuggestionPipeline once the
   tables are in
 - Simple public API for hosts/CLI/tests:
     suggest(text), suggest_async(text), try_suggest(text), autocomplete(text),
     candidate_stream(text), stats()
 - Never raise into the host: a failure is logged and reads as "no suggestions"

The cursor is assumed to sit at the end of the text. Hosts that know the
caret position pass `cursor`; only the text before it is considered.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from keyboard_predict.core.loader import ResourceLoader, Resources, default_loader
from keyboard_predict.core.pipeline import Candidate, SuggestionPipeline
from keyboard_predict.core.protocols import EngineStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutocompleteResult:
    """What the host shows: the text it asked about and the suggestions."""
    input_text: str
    suggestions: Tuple[str, ...]


def _before_cursor(text: Optional[str], cursor: Optional[int]) -> str:
    text = text or ""
    if cursor is None:
        return text
    return text[:max(0, min(int(cursor), len(text)))]


class AutocompleteService:
    """Lazy-loading suggestion provider (satisfies SuggestionBackend)."""

    def __init__(self, loader: Optional[ResourceLoader] = None) -> None:
        self.loader = loader or default_loader()
        self._pipeline: Optional[SuggestionPipeline] = None
        self._pipeline_lock = threading.Lock()

    # Public API ---------------------------------------------------------
    def suggest(self, text: str, cursor: Optional[int] = None) -> List[str]:
        """Up to three suggestions; blocks only on the one-time cold load."""
        return self._run(self.loader.ensure_loaded(), _before_cursor(text, cursor))

    async def suggest_async(self, text: str, cursor: Optional[int] = None) -> List[str]:
        res = await self.loader.ensure_loaded_async()
        return self._run(res, _before_cursor(text, cursor))

    def try_suggest(self, text: str, cursor: Optional[int] = None) -> Optional[List[str]]:
        """
        Non-blocking variant: None while resources are still loading (the
        load is started if needed), suggestions otherwise.
        """
        res = self.loader.resources
        if res is None:
            self.loader.start()
            return None
        return self._run(res, _before_cursor(text, cursor))

    def autocomplete(self, text: str) -> AutocompleteResult:
        return AutocompleteResult(input_text=text or "", suggestions=tuple(self.suggest(text)))

    def candidate_stream(self, text: str) -> List[Candidate]:
        """Pre-dedup candidates with their sources (debugging aid)."""
        res = self.loader.ensure_loaded()
        return self._pipeline_for(res).candidate_stream(text or "")

    def stats(self) -> EngineStats:
        res = self.loader.resources
        return EngineStats(
            state=self.loader.state.value,
            terms=len(res.terms) if res else 0,
            bigrams=len(res.bigrams) if res else 0,
            parse_count=self.loader.parse_count,
            load_seconds=round(res.load_seconds, 3) if res else 0.0,
        )

    # internals ----------------------------------------------------------
    def _pipeline_for(self, res: Resources) -> SuggestionPipeline:
        if self._pipeline is None:
            with self._pipeline_lock:
                if self._pipeline is None:
                    self._pipeline = SuggestionPipeline(res.terms, res.bigrams)
        return self._pipeline

    def _run(self, res: Resources, text: str) -> List[str]:
        try:
            return self._pipeline_for(res).suggest(text)
        except Exception:
            logger.exception("suggest failed; returning no suggestions")
            return []
