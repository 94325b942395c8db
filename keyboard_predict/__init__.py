"""
keyboard_predict

Predictive-text suggestion engine for a software keyboard: given the text
typed so far, return up to three completion / correction / next-word
suggestions.

    from keyboard_predict import AutocompleteService
    service = AutocompleteService()
    service.suggest("i ")       # ['am', 'have', 'will']
"""

import logging

from .autocomplete_service import AutocompleteResult, AutocompleteService
from .core.loader import LoadState, ResourceLoader, Resources, default_loader
from .core.pipeline import MAX_SUGGESTIONS, SuggestionPipeline
from .core.protocols import SuggestionBackend
from .utils.config_manager import ConfigError, EngineConfig, load_config

# library code logs, the application decides where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AutocompleteResult",
    "AutocompleteService",
    "ConfigError",
    "EngineConfig",
    "LoadState",
    "MAX_SUGGESTIONS",
    "ResourceLoader",
    "Resources",
    "SuggestionBackend",
    "SuggestionPipeline",
    "default_loader",
    "load_config",
]

__version__ = "0.1.0"
