# keyboard_predict/core/pipeline.py
"""
SuggestionPipeline - turns the text before the cursor into at most three
suggestions for the keyboard's suggestion bar.

Steps:
 - extract the in-progress token and the previous (context) word
 - short token (< 2 characters as typed, so "12" or "a1" is not short):
   continuation table, then bigram bucket of the previous word, else the
   default fillers. The dictionary is never touched.
 - full token: concatenate every source in priority order
     correction -> continuation (prefix filtered) -> bigram (prefix filtered)
     -> dictionary (compound tail + closest fuzzy matches)
   The prefix is the token lower-cased with non-letters dropped; a token
   with no letters at all is used lower-cased as typed.
 - dedupe case-insensitively, first occurrence wins
 - rank by bigram pair count with the previous word, ties by text
 - truncate to MAX_SUGGESTIONS

Once the tables are loaded every call is synchronous and does no I/O.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional

from keyboard_predict.context.tokenizer import current_token, normalize_word, previous_token
from keyboard_predict.core.bigram_table import BigramIndex
from keyboard_predict.core.heuristics import DEFAULT_SUGGESTIONS, continuations_for, correction_for
from keyboard_predict.core.protocols import BigramLookupProtocol, TermLookupProtocol
from keyboard_predict.core.term_index import TermIndex

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3
MIN_TOKEN_LENGTH = 2

# candidate sources, in merge priority order
SOURCE_CORRECTION = "correction"
SOURCE_CONTINUATION = "continuation"
SOURCE_BIGRAM = "bigram"
SOURCE_COMPOUND = "compound"
SOURCE_FUZZY = "fuzzy"
SOURCE_DEFAULT = "default"


@dataclass(frozen=True)
class Candidate:
    text: str
    source: str


class _Tokens(NamedTuple):
    raw: str                 # in-progress token as typed
    word: str                # normalized in-progress token ("" if none typed)
    previous: Optional[str]  # normalized context word


def dedupe(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Drop case-insensitive repeats, keeping the first occurrence."""
    seen = set()
    out: List[Candidate] = []
    for c in candidates:
        key = c.text.casefold()
        if key in seen:
            continue
        seen.add(key)
        out.append(c)
    return out


class SuggestionPipeline:
    """
    Stateless between calls: holds only the two read-only tables.

    Public API:
      - suggest(text) -> [str]
      - candidate_stream(text) -> [Candidate]  (pre-dedup, for inspection)
      - rank(candidates, previous) -> [Candidate]
    """

    def __init__(self,
                 terms: Optional[TermLookupProtocol] = None,
                 bigrams: Optional[BigramLookupProtocol] = None) -> None:
        self.terms = terms if terms is not None else TermIndex()
        self.bigrams = bigrams if bigrams is not None else BigramIndex()

    # -------------------------
    # Suggest API (hot-path)
    # -------------------------
    def suggest(self, text: str) -> List[str]:
        toks = self._tokens(text)
        merged = dedupe(self._stream(toks))
        if self._is_short(toks):
            ranked = merged
        else:
            ranked = self.rank(merged, toks.previous)
        return [c.text for c in ranked[:MAX_SUGGESTIONS]]

    def candidate_stream(self, text: str) -> List[Candidate]:
        """Every candidate in merge order, before dedupe and ranking."""
        return self._stream(self._tokens(text))

    def rank(self, candidates: List[Candidate], previous: Optional[str]) -> List[Candidate]:
        """
        Order by pair count (previous, candidate) desc, then text asc.
        Without a previous word there is no pair signal and merge order is kept.
        """
        if not previous:
            return list(candidates)
        return sorted(candidates, key=lambda c: (-self.bigrams.score(previous, c.text), c.text))

    # -------------------------
    # Sources
    # -------------------------
    @staticmethod
    def _tokens(text: str) -> _Tokens:
        text = text or ""
        raw = current_token(text)
        return _Tokens(raw, normalize_word(raw) or raw.lower(), previous_token(text))

    @staticmethod
    def _is_short(toks: _Tokens) -> bool:
        return len(toks.raw) < MIN_TOKEN_LENGTH

    def _stream(self, toks: _Tokens) -> List[Candidate]:
        if self._is_short(toks):
            return self._short_token_stream(toks.previous)

        word, previous = toks.word, toks.previous
        stream: List[Candidate] = []
        stream.extend(Candidate(w, SOURCE_CORRECTION) for w in correction_for(word))
        stream.extend(Candidate(w, SOURCE_CONTINUATION) for w in continuations_for(previous, word))
        stream.extend(Candidate(w, SOURCE_BIGRAM) for w in self.bigrams.next_words(previous, word))
        stream.extend(self._dictionary_candidates(toks))
        return stream

    def _short_token_stream(self, previous: Optional[str]) -> List[Candidate]:
        stream = [Candidate(w, SOURCE_CONTINUATION) for w in continuations_for(previous)]
        stream.extend(Candidate(w, SOURCE_BIGRAM)
                      for w in self.bigrams.next_words(previous)[:MAX_SUGGESTIONS])
        if not stream:
            stream = [Candidate(w, SOURCE_DEFAULT) for w in DEFAULT_SUGGESTIONS]
        return stream

    def _dictionary_candidates(self, toks: _Tokens) -> List[Candidate]:
        if not len(self.terms):
            return []
        out: List[Candidate] = []

        segments = self.terms.lookup_compound(toks.raw)
        if segments:
            words = segments[-1].term.split()
            # unresolved words come back as typed
            if words and words[-1] in self.terms:
                out.append(Candidate(words[-1], SOURCE_COMPOUND))

        for s in self.terms.lookup_fuzzy(toks.word)[:MAX_SUGGESTIONS]:
            out.append(Candidate(s.term, SOURCE_FUZZY))
        return out
