# keyboard_predict/context/__init__.py
# token extraction helpers used by the suggestion pipeline

from .tokenizer import current_token, normalize_word, previous_token, split_tokens

__all__ = [
    "current_token",
    "normalize_word",
    "previous_token",
    "split_tokens",
]
