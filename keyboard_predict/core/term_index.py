# term_index.py
"""
TermIndex - in-memory word frequency dictionary for the keyboard.

Thin wrapper around a symspellpy.SymSpell instance configured with
PREFIX_LENGTH = 3 and MAX_EDIT_DISTANCE = 2:
 - exact lookup (word -> frequency)
 - fuzzy lookup within edit distance 2 (SymSpell's symmetric-delete index,
   keyed on the first 3 characters of each word)
 - compound lookup: resolve a run of text into known words, merging split
   words back together or splitting run-together words apart. Splits are
   scored with the bigram counts loaded through load_bigrams().

Adds what SymSpell leaves to the caller: the top-N term cap, lower-casing,
skipping malformed lines, deterministic ordering of equal-count matches,
and an empty index instead of an error when the file is missing.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from symspellpy import SymSpell, Verbosity
from symspellpy.helpers import parse_words

from keyboard_predict.utils.logger_utils import Log

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 3
MAX_EDIT_DISTANCE = 2
DEFAULT_TERM_COUNT = 25_000

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TermEntry:
    word: str
    frequency: int


@dataclass(frozen=True)
class TermSuggestion:
    """A dictionary term returned by a lookup, with its distance to the query."""
    term: str
    distance: int
    frequency: int


def _dictionary_rows(lines: TextIO, term_count: int) -> Tuple[List[str], int]:
    """
    Normalized "term count" rows for SymSpell.load_dictionary, at most
    `term_count` of them, plus the number of malformed lines skipped.
    """
    rows: List[str] = []
    skipped = 0
    for line in lines:
        if len(rows) >= term_count:
            break
        parts = line.split()
        if not parts or parts[0].startswith("#"):
            continue
        if len(parts) < 2:
            skipped += 1
            continue
        try:
            freq = int(parts[1])
        except ValueError:
            skipped += 1
            continue
        # SymSpell drops counts below 1
        if freq < 1:
            skipped += 1
            continue
        rows.append(f"{parts[0].lower()} {freq}")
    return rows, skipped


class TermIndex:
    """Frequency dictionary with exact/fuzzy/compound lookup."""

    def __init__(self, counts: Optional[Dict[str, int]] = None) -> None:
        self._sym = SymSpell(max_dictionary_edit_distance=MAX_EDIT_DISTANCE,
                             prefix_length=PREFIX_LENGTH)
        for word, freq in (counts or {}).items():
            self._sym.create_dictionary_entry(word, int(freq))

    # construction ----------------------------------------------------------
    @classmethod
    def from_entries(cls, entries: Iterable[Union[TermEntry, Tuple[str, int]]]) -> "TermIndex":
        index = cls()
        for item in entries:
            word, freq = (item.word, item.frequency) if isinstance(item, TermEntry) else item
            word = word.strip().lower()
            if word and freq > 0:
                # repeated words accumulate their counts
                index._sym.create_dictionary_entry(word, int(freq))
        return index

    @classmethod
    def load(cls,
             path: PathLike,
             term_count: int = DEFAULT_TERM_COUNT,
             bigram_path: Optional[PathLike] = None) -> "TermIndex":
        """
        Load a dictionary file: one term per line, column 0 the term and
        column 1 its frequency (further columns are ignored).
        Only the first `term_count` valid lines are kept.
        A missing or unreadable file gives an empty index.
        `bigram_path`, when given, is passed to load_bigrams().
        """
        path = Path(path)
        index = cls()
        try:
            with Log.time_block(f"TermIndex.load({path.name})"):
                with open(path, "r", encoding="utf-8") as f:
                    rows, skipped = _dictionary_rows(f, term_count)
                index._sym.load_dictionary(rows, term_index=0, count_index=1)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("dictionary unavailable at %s (%s); using an empty index", path, e)
            return cls()

        if skipped:
            logger.debug("skipped %d malformed dictionary lines in %s", skipped, path)
        logger.info("loaded %d terms from %s", len(index), path)
        Log.metric("term_index.size", len(index))

        if bigram_path is not None:
            index.load_bigrams(bigram_path)
        return index

    def load_bigrams(self, path: PathLike) -> bool:
        """
        Load "word1 word2 count" lines used to score word splits in
        lookup_compound(). Returns False when the file is missing or unreadable.
        """
        path = Path(path)
        if not path.is_file():
            logger.warning("bigram file unavailable at %s; splits use unigram estimates", path)
            return False
        try:
            with warnings.catch_warnings():
                # lines with an unparsable count are skipped
                warnings.simplefilter("ignore")
                return self._sym.load_bigram_dictionary(path, term_index=0, count_index=2,
                                                        encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read bigrams from %s (%s)", path, e)
            return False

    # exact ---------------------------------------------------------------
    def lookup_exact(self, word: str) -> Optional[int]:
        if not word:
            return None
        return self._sym.words.get(word.strip().lower())

    # fuzzy ---------------------------------------------------------------
    def lookup_fuzzy(self, word: str, max_distance: int = MAX_EDIT_DISTANCE) -> List[TermSuggestion]:
        """
        All terms within `max_distance` edits of `word`.
        Sorted by (distance, -frequency, term).
        """
        q = (word or "").strip().lower()
        if not q or not len(self):
            return []
        max_distance = max(0, min(int(max_distance), MAX_EDIT_DISTANCE))

        found = [TermSuggestion(s.term, s.distance, s.count)
                 for s in self._sym.lookup(q, Verbosity.ALL, max_distance)]
        found.sort(key=lambda s: (s.distance, -s.frequency, s.term))
        return found

    def lookup_best(self, word: str, max_distance: int = MAX_EDIT_DISTANCE) -> Optional[TermSuggestion]:
        """Closest, most frequent term for `word`, or None."""
        found = self.lookup_fuzzy(word, max_distance)
        return found[0] if found else None

    # compound ------------------------------------------------------------
    def lookup_compound(self, text: str, max_distance: int = MAX_EDIT_DISTANCE) -> List[TermSuggestion]:
        """
        Resolve `text` into known terms; the result holds one suggestion whose
        term is the corrected words joined by single spaces.
        Words SymSpell cannot resolve come back unchanged, so callers check
        membership before trusting any single word of the result.
        """
        if not parse_words(text or ""):
            return []
        max_distance = max(0, min(int(max_distance), MAX_EDIT_DISTANCE))
        found = self._sym.lookup_compound(text, max_distance)
        # SymSpell records every correction it makes; nothing here reads them back
        self._sym.replaced_words.clear()
        return [TermSuggestion(s.term, s.distance, s.count) for s in found]

    # utilities -------------------------------------------------------------
    def entries(self) -> Iterator[TermEntry]:
        """All entries, most frequent first."""
        for word, freq in sorted(self._sym.words.items(), key=lambda kv: (-kv[1], kv[0])):
            yield TermEntry(word, freq)

    def prefix_keys(self) -> FrozenSet[str]:
        """Keys of SymSpell's delete index (for inspection)."""
        return frozenset(self._sym.deletes)

    def prefix_bucket(self, key: str) -> FrozenSet[str]:
        return frozenset(self._sym.deletes.get(key, ()))

    def bigram_count(self) -> int:
        """Number of word pairs available for split scoring."""
        return len(self._sym.bigrams)

    def __contains__(self, word: str) -> bool:
        return self.lookup_exact(word) is not None

    def __len__(self) -> int:
        return self._sym.word_count
