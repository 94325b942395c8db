"""
keyboard_predict.core

The suggestion engine proper:
 - TermIndex: word frequencies with exact / fuzzy / compound lookup
 - BigramIndex: word-pair frequencies for next-word prediction and ranking
 - heuristics: fixed correction and continuation tables
 - SuggestionPipeline: merges the sources into the final ranked list
 - ResourceLoader: one-shot lazy load of the two tables
"""

from .bigram_table import BigramIndex, BigramRecord
from .loader import LoadState, ResourceLoader, Resources, default_loader
from .pipeline import Candidate, SuggestionPipeline
from .term_index import TermEntry, TermIndex, TermSuggestion

__all__ = [
    "BigramIndex",
    "BigramRecord",
    "Candidate",
    "LoadState",
    "ResourceLoader",
    "Resources",
    "SuggestionPipeline",
    "TermEntry",
    "TermIndex",
    "TermSuggestion",
    "default_loader",
]
