# tests/test_bigram_table.py
from keyboard_predict.core.bigram_table import BigramIndex, BigramRecord


def test_next_words_sorted_by_count(bigrams):
    assert bigrams.next_words("i") == ["am", "have"]
    assert bigrams.next_words("I") == ["am", "have"]
    assert bigrams.next_words("to") == ["be", "go"]


def test_next_words_prefix_filter(bigrams):
    assert bigrams.next_words("i", "h") == ["have"]
    assert bigrams.next_words("i", "x") == []


def test_next_words_unknown_or_empty(bigrams):
    assert bigrams.next_words("zebra") == []
    assert bigrams.next_words(None) == []
    assert bigrams.next_words("") == []


def test_score(bigrams):
    assert bigrams.score("i", "am") == 50
    assert bigrams.score("I", "Have") == 10
    assert bigrams.score("i", "banana") == 0
    assert bigrams.score(None, "am") == 0


def test_equal_counts_ordered_by_word():
    idx = BigramIndex.from_records([("a", "zeta", 5), ("a", "beta", 5), ("a", "mid", 9)])
    assert idx.next_words("a") == ["mid", "beta", "zeta"]


def test_load_skips_bad_lines_and_keeps_last_repeat(tmp_path):
    p = tmp_path / "b.txt"
    p.write_text("a b 1\nshort line\na c many\n\nA B 7\n", encoding="utf-8")
    idx = BigramIndex.load(p)
    assert len(idx) == 1
    assert idx.score("a", "b") == 7


def test_load_reads_first_n_lines(tmp_path):
    p = tmp_path / "b.txt"
    p.write_text("a b 1\na c 2\na d 3\n", encoding="utf-8")
    idx = BigramIndex.load(p, pair_count=2)
    assert idx.next_words("a") == ["c", "b"]


def test_missing_file_gives_empty_table(tmp_path):
    idx = BigramIndex.load(tmp_path / "missing.txt")
    assert len(idx) == 0
    assert idx.next_words("i") == []


def test_records_and_vocabulary(bigrams):
    recs = list(bigrams.records())
    assert BigramRecord("i", "am", 50) in recs
    assert len(recs) == len(bigrams)
    assert bigrams.vocabulary_size() == 4
