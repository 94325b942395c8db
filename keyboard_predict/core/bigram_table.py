# bigram_table.py
# Word-pair frequency table for next-word prediction and ranking.
# Built once from a "word1 word2 count" file; buckets are sorted by count at
# build time so lookups only ever filter, never re-sort.

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from keyboard_predict.utils.logger_utils import Log

logger = logging.getLogger(__name__)

DEFAULT_PAIR_COUNT = 15_000

Word = str
Bucket = Tuple[Tuple[Word, int], ...]
PathLike = Union[str, Path]


@dataclass(frozen=True)
class BigramRecord:
    first: str
    second: str
    count: int


class BigramIndex:
    """
    previous word -> following words, most frequent first.

    Public API:
      - next_words(previous_word, prefix=None) -> [word]
      - score(previous_word, candidate) -> int
    """

    def __init__(self, pair_counts: Optional[Dict[Tuple[Word, Word], int]] = None) -> None:
        # (first, second) -> count, both lower-cased
        self._pairs: Dict[Tuple[Word, Word], int] = dict(pair_counts or {})
        self._buckets: Dict[Word, Bucket] = self._build_buckets(self._pairs)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_records(cls, records: Iterable[Union[BigramRecord, Tuple[str, str, int]]]) -> "BigramIndex":
        pairs: Dict[Tuple[Word, Word], int] = {}
        for rec in records:
            first, second, count = (
                (rec.first, rec.second, rec.count) if isinstance(rec, BigramRecord) else rec
            )
            pairs[(first.lower(), second.lower())] = int(count)
        return cls(pairs)

    @classmethod
    def load(cls, path: PathLike, pair_count: int = DEFAULT_PAIR_COUNT) -> "BigramIndex":
        """
        Parse "word1 word2 count" lines. Lines with fewer than three fields or
        a non-integer count are skipped; a repeated pair keeps its last count.
        Only the first `pair_count` lines are read.
        A missing or unreadable file gives an empty table.
        """
        path = Path(path)
        pairs: Dict[Tuple[Word, Word], int] = {}
        skipped = 0
        try:
            with Log.time_block(f"BigramIndex.load({path.name})"):
                with open(path, "r", encoding="utf-8") as f:
                    for lineno, line in enumerate(f):
                        if lineno >= pair_count:
                            break
                        parts = line.split()
                        if len(parts) < 3:
                            if parts:
                                skipped += 1
                            continue
                        try:
                            count = int(parts[2])
                        except ValueError:
                            skipped += 1
                            continue
                        pairs[(parts[0].lower(), parts[1].lower())] = count
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("bigram file unavailable at %s (%s); using an empty table", path, e)
            return cls()

        if skipped:
            logger.debug("skipped %d malformed bigram lines in %s", skipped, path)
        logger.info("loaded %d bigrams from %s", len(pairs), path)
        Log.metric("bigram_index.size", len(pairs))
        return cls(pairs)

    @staticmethod
    def _build_buckets(pairs: Dict[Tuple[Word, Word], int]) -> Dict[Word, Bucket]:
        grouped: Dict[Word, List[Tuple[Word, int]]] = {}
        for (first, second), count in pairs.items():
            grouped.setdefault(first, []).append((second, count))
        # count desc, then word asc so equal counts come out deterministically
        return {
            first: tuple(sorted(items, key=lambda wc: (-wc[1], wc[0])))
            for first, items in grouped.items()
        }

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def next_words(self, previous_word: Optional[str], prefix: Optional[str] = None) -> List[Word]:
        """
        Words seen after `previous_word`, most frequent first.
        With a non-empty `prefix`, only words starting with it are returned.
        """
        if not previous_word:
            return []
        bucket = self._buckets.get(previous_word.lower())
        if not bucket:
            return []
        if prefix:
            return [w for w, _ in bucket if w.startswith(prefix)]
        return [w for w, _ in bucket]

    def score(self, previous_word: Optional[str], candidate: Optional[str]) -> int:
        """Pair count for (previous_word, candidate); 0 when unseen."""
        if not previous_word or not candidate:
            return 0
        return self._pairs.get((previous_word.lower(), candidate.lower()), 0)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def records(self) -> Iterator[BigramRecord]:
        for first, bucket in sorted(self._buckets.items()):
            for second, count in bucket:
                yield BigramRecord(first, second, count)

    def vocabulary_size(self) -> int:
        """Number of distinct preceding words."""
        return len(self._buckets)

    def __len__(self) -> int:
        return len(self._pairs)
