# keyboard_predict/core/loader.py
"""
ResourceLoader - one-shot background load of the dictionary and bigram table.

State machine: NOT_LOADED -> LOADING -> LOADED, no way back.
 - the first caller flips NOT_LOADED -> LOADING under a lock and submits the
   parse to a single worker thread; the Future is kept
 - every caller (first included) waits on that same Future
 - once LOADED, ensure_loaded() returns immediately
 - a missing file or a parse failure still ends in LOADED, with empty tables

The tables are never reloaded, evicted or cancelled.
"""

from __future__ import annotations

import asyncio
import enum
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional

from keyboard_predict.core.bigram_table import BigramIndex
from keyboard_predict.core.term_index import TermIndex
from keyboard_predict.utils.config_manager import EngineConfig, load_config
from keyboard_predict.utils.logger_utils import Log

logger = logging.getLogger(__name__)


class LoadState(enum.Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class Resources:
    """The two read-only tables the pipeline runs on."""
    terms: TermIndex
    bigrams: BigramIndex
    load_seconds: float = 0.0

    @classmethod
    def empty(cls) -> "Resources":
        return cls(TermIndex(), BigramIndex())


class ResourceLoader:
    """
    Lazily load Resources exactly once per loader.

    Public API:
      - start() -> Future[Resources]         (kick off, don't wait)
      - ensure_loaded(timeout=None)          (block until loaded)
      - await ensure_loaded_async()          (same, from asyncio)
      - state / is_loaded / resources / parse_count
    """

    def __init__(self,
                 config: Optional[EngineConfig] = None,
                 on_parse: Optional[Callable[[EngineConfig], None]] = None) -> None:
        self.config = config or load_config()
        # instrumentation hook, called on the worker thread before parsing
        self._on_parse = on_parse
        self._lock = threading.Lock()
        self._state = LoadState.NOT_LOADED
        self._future: Optional["Future[Resources]"] = None
        self._resources: Optional[Resources] = None
        self.parse_count = 0

    # state ---------------------------------------------------------------
    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is LoadState.LOADED

    @property
    def resources(self) -> Optional[Resources]:
        """Loaded tables, or None while not loaded yet."""
        return self._resources

    # loading -------------------------------------------------------------
    def start(self) -> "Future[Resources]":
        """Begin loading if nobody has; return the shared Future."""
        with self._lock:
            if self._future is None:
                self._state = LoadState.LOADING
                self._future = self._submit()
            return self._future

    def ensure_loaded(self, timeout: Optional[float] = None) -> Resources:
        """Block until the tables are loaded (at most one parse, ever)."""
        res = self._resources
        if res is not None:
            return res
        return self.start().result(timeout)

    async def ensure_loaded_async(self) -> Resources:
        res = self._resources
        if res is not None:
            return res
        return await asyncio.wrap_future(self.start())

    def _submit(self) -> "Future[Resources]":
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="keyboard-predict-load")
        try:
            return executor.submit(self._load)
        finally:
            # lets the worker exit once the single job is done
            executor.shutdown(wait=False)

    def _load(self) -> Resources:
        self.parse_count += 1
        cfg = self.config
        timer = Log.time_block("resources.load")
        try:
            if self._on_parse is not None:
                self._on_parse(cfg)
            with timer:
                terms = TermIndex.load(cfg.dictionary_path, cfg.dictionary_term_count,
                                       bigram_path=cfg.bigram_path)
                bigrams = BigramIndex.load(cfg.bigram_path, cfg.bigram_pair_count)
            res = Resources(terms, bigrams, timer.elapsed)
        except Exception:
            logger.exception("loading suggestion resources failed; continuing with empty tables")
            res = Resources.empty()

        # publish tables before the state so readers of is_loaded see them
        self._resources = res
        self._state = LoadState.LOADED
        logger.info("suggestion resources ready: %d terms, %d bigrams (%.3fs)",
                    len(res.terms), len(res.bigrams), res.load_seconds)
        return res


# Process-wide loader --------------------------------------------------------
_default_loader: Optional[ResourceLoader] = None
_default_lock = threading.Lock()


def default_loader() -> ResourceLoader:
    """The shared loader for this process, created on first use."""
    global _default_loader
    if _default_loader is None:
        with _default_lock:
            if _default_loader is None:
                _default_loader = ResourceLoader()
    return _default_loader
