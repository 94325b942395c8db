# tests/conftest.py
# shared fixtures: small on-disk resource files and the tables built from them

import pytest

from keyboard_predict.core.bigram_table import BigramIndex
from keyboard_predict.core.term_index import TermIndex
from keyboard_predict.utils.config_manager import EngineConfig

DICTIONARY_LINES = """\
# term frequency
the 1000
and 900
you 800
i 700
am 600
have 500
will 450
hello 400
help 350
world 300
be 280
go 250
to 240
is 230
helps 100
heal 50
held 40
hell 30
"""

BIGRAM_LINES = """\
i am 50
i have 10
to be 40
to go 20
hello world 300
you are 70
"""


@pytest.fixture
def dictionary_file(tmp_path):
    p = tmp_path / "dictionary.txt"
    p.write_text(DICTIONARY_LINES, encoding="utf-8")
    return p


@pytest.fixture
def bigram_file(tmp_path):
    p = tmp_path / "bigrams.txt"
    p.write_text(BIGRAM_LINES, encoding="utf-8")
    return p


@pytest.fixture
def terms(dictionary_file, bigram_file):
    return TermIndex.load(dictionary_file, bigram_path=bigram_file)


@pytest.fixture
def bigrams(bigram_file):
    return BigramIndex.load(bigram_file)


@pytest.fixture
def config(dictionary_file, bigram_file):
    return EngineConfig.from_dict({
        "dictionary_path": str(dictionary_file),
        "bigram_path": str(bigram_file),
    })


@pytest.fixture
def missing_config(tmp_path):
    """Config pointing at files that do not exist."""
    return EngineConfig.from_dict({
        "dictionary_path": str(tmp_path / "nope.txt"),
        "bigram_path": str(tmp_path / "nope_bigrams.txt"),
    })
