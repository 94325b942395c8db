# logger_utils.py - logging setup, metrics and block timing

import logging
import sys
import time
from typing import Optional, TextIO

# Package root logger; modules log through logging.getLogger(__name__)
PACKAGE_LOGGER = "keyboard_predict"
# Timings and counters go here so they can be silenced independently
METRICS_LOGGER = "keyboard_predict.metrics"

_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.
    Safe to call more than once (the handler is replaced, not duplicated).
    Library code never calls this; the CLI does.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if getattr(h, "_keyboard_predict", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    handler._keyboard_predict = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(_coerce_level(level))
    return logger


def _coerce_level(level) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.WARNING


class Log:
    """Metric and timing helpers on top of the standard logging module."""

    @staticmethod
    def metric(tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts, sizes).
        Example: "TermIndex.load done: 0.042s"
        """
        logging.getLogger(METRICS_LOGGER).debug("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Measure how long a block takes and report it as a metric:
            with Log.time_block("bigram_load") as t:
                do_some_work()
            t.elapsed  # seconds
        """
        return _Timer(label)


class _Timer:
    """Context manager used by Log.time_block."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
