# tests/test_tokenizer.py
from keyboard_predict.context.tokenizer import (
    current_token,
    normalize_word,
    previous_token,
    split_tokens,
)


def test_current_token():
    assert current_token("hello wor") == "wor"
    assert current_token("hello ") == ""
    assert current_token("") == ""
    assert current_token("hi\u00a0the") == "the"


def test_previous_token():
    assert previous_token("hello wor") == "hello"
    assert previous_token("Hello, ") == "hello"
    assert previous_token("wor") is None
    assert previous_token("   ") is None


def test_normalize_word():
    assert normalize_word("Don't,") == "dont"
    assert normalize_word("123") is None
    assert normalize_word(None) is None


def test_split_tokens():
    assert split_tokens(" a  b\tc\n") == ["a", "b", "c"]
    assert split_tokens("") == []
