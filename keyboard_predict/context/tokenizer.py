# keyboard_predict/context/tokenizer.py
# token extraction for the text before the cursor

from typing import List, Optional


def split_tokens(text: str) -> List[str]:
    """Whitespace-delimited tokens (str.split handles all Unicode spaces)."""
    if not text:
        return []
    return text.split()


def normalize_word(word: Optional[str]) -> Optional[str]:
    """
    Lower-case and keep letters only ("Don't," -> "dont").
    Returns None when nothing is left.
    """
    if not word:
        return None
    letters = "".join(ch for ch in word.lower() if ch.isalpha())
    return letters or None


def current_token(text: str) -> str:
    """
    Raw token being typed: the trailing run of non-whitespace.
    Empty when the buffer is empty or ends in whitespace.
    """
    if not text or text[-1].isspace():
        return ""
    start = len(text)
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    return text[start:]


def previous_token(text: str) -> Optional[str]:
    """
    Normalized context word for the token being typed:
     - the token before the current one while a word is in progress
     - the last completed token when the buffer ends in whitespace
    """
    toks = split_tokens(text)
    if not toks:
        return None
    if current_token(text):
        return normalize_word(toks[-2]) if len(toks) >= 2 else None
    return normalize_word(toks[-1])
