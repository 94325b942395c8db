# tests/test_term_index.py
import logging

from keyboard_predict.core.term_index import TermIndex, TermSuggestion


def test_load_counts(terms):
    assert len(terms) == 18
    assert terms.lookup_exact("hello") == 400
    assert terms.lookup_exact("HELLO") == 400
    assert terms.lookup_exact("helo") is None
    assert "world" in terms
    assert terms.bigram_count() == 6


def test_load_skips_malformed_and_sums_duplicates(tmp_path):
    p = tmp_path / "d.txt"
    p.write_text("# header\nApple 10\nbroken\npear x\nplum -4\nkiwi 0\napple 5\nfig 3 extra cols\n",
                 encoding="utf-8")
    idx = TermIndex.load(p)
    assert idx.lookup_exact("apple") == 15
    assert idx.lookup_exact("fig") == 3
    assert "pear" not in idx
    assert "plum" not in idx
    assert "kiwi" not in idx


def test_load_keeps_first_n_terms(tmp_path):
    p = tmp_path / "d.txt"
    p.write_text("bad\none 5\ntwo 4\nthree 3\nfour 2\nfive 1\n", encoding="utf-8")
    idx = TermIndex.load(p, term_count=3)
    assert [e.word for e in idx.entries()] == ["one", "two", "three"]


def test_missing_file_gives_empty_index(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        idx = TermIndex.load(tmp_path / "missing.txt")
    assert len(idx) == 0
    assert idx.lookup_fuzzy("hello") == []
    assert "dictionary unavailable" in caplog.text


def test_missing_bigram_file(dictionary_file, tmp_path):
    idx = TermIndex.load(dictionary_file)
    assert not idx.load_bigrams(tmp_path / "missing.txt")
    assert idx.bigram_count() == 0


def test_fuzzy_finds_close_word(terms):
    found = terms.lookup_fuzzy("helo")
    assert found[0] == TermSuggestion("hello", 1, 400)
    assert all(s.distance <= 2 for s in found)
    keys = [(s.distance, -s.frequency, s.term) for s in found]
    assert keys == sorted(keys)


def test_fuzzy_swap(terms):
    assert terms.lookup_best("teh").term == "the"


def test_fuzzy_respects_max_distance(terms):
    assert [s.term for s in terms.lookup_fuzzy("hello", max_distance=0)] == ["hello"]
    assert terms.lookup_fuzzy("zzzzzz") == []
    # larger distances are clamped instead of rejected
    assert terms.lookup_best("helo", max_distance=5).term == "hello"


def test_delete_index_only_holds_known_words(terms):
    for key in terms.prefix_keys():
        for word in terms.prefix_bucket(key):
            assert word in terms


def test_compound_merges_split_word(terms):
    out = terms.lookup_compound("hel lo")
    assert [s.term for s in out] == ["hello"]


def test_compound_splits_run_together_words(terms):
    out = terms.lookup_compound("helloworld")
    assert [s.term for s in out] == ["hello world"]


def test_compound_keeps_known_words(terms):
    out = terms.lookup_compound("hello world")
    assert [s.term for s in out] == ["hello world"]
    assert out[0].distance == 0


def test_compound_unknown_word_comes_back_as_typed(terms):
    out = terms.lookup_compound("qqqq")
    assert [s.term for s in out] == ["qqqq"]
    assert "qqqq" not in terms


def test_compound_empty(terms):
    assert terms.lookup_compound("") == []
    assert terms.lookup_compound("  ,, ") == []
    assert [s.term for s in TermIndex().lookup_compound("hello")] == ["hello"]


def test_from_entries():
    idx = TermIndex.from_entries([("Cat", 3), ("dog", 2), ("cat", 1), ("eel", 0)])
    assert idx.lookup_exact("cat") == 4
    assert len(idx) == 2
