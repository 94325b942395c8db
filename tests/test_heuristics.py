# tests/test_heuristics.py
import pytest

from keyboard_predict.core.heuristics import (
    CONTINUATIONS,
    CORRECTIONS,
    continuations_for,
    correction_for,
)


def test_correction_lookup():
    assert correction_for("im") == ["I'm"]
    assert correction_for("DONT") == ["don't"]
    assert correction_for("hello") == []
    assert correction_for("") == []


def test_continuations():
    assert continuations_for("to") == ["be", "have", "go"]
    assert continuations_for("I") == ["am", "have", "will"]
    assert continuations_for("banana") == []
    assert continuations_for(None) == []


def test_continuations_prefix():
    assert continuations_for("to", "h") == ["have"]
    assert continuations_for("to", "x") == []


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CORRECTIONS["u"] = "you"  # type: ignore[index]
    with pytest.raises(TypeError):
        CONTINUATIONS["a"] = ("lot",)  # type: ignore[index]
