# tests/test_collector.py
# ordering, cap/truncation and casing modes of the Collector

import string

import pytest

from trie_autocompleter.core.collector import Collector, PrefixResult
from trie_autocompleter.core.trie import Trie


def test_cap_defaults_to_100_and_flags_truncation():
    t = Trie()
    words = [a + b for a in string.ascii_lowercase for b in string.ascii_lowercase[:5]]  # 130 words
    t.insert_many(words)
    result = t.enumerate_all()
    assert result.count == 100
    assert result.truncated is True
    assert result.words == sorted(words)[:100]


def test_exactly_cap_matches_is_not_truncated():
    t = Trie(max_results=4)
    t.insert_many(["ab", "ac", "ad", "ae"])
    result = t.prefix_search("a")
    assert result.count == 4
    assert result.truncated is False


def test_explicit_limit_overrides_cap():
    t = Trie()
    t.insert_many(["ab", "ac", "ad", "ae"])
    result = t.prefix_search("a", limit=2)
    assert result.words == ["ab", "ac"]
    assert result.truncated is True


def test_order_is_alphabetical_not_insertion():
    t = Trie()
    t.insert_many(["zeta", "alpha", "Mu", "beta", "al"])
    assert t.enumerate_all().words == ["al", "alpha", "beta", "Mu", "zeta"]


def test_preorder_puts_shorter_word_first():
    t = Trie()
    t.insert_many(["careful", "care", "car"])
    assert t.prefix_search("ca").words == ["car", "care", "careful"]


def test_label_mode_reports_first_inserted_casing():
    t = Trie()
    t.insert("CarDiff")
    t.insert("cARE")
    assert t.prefix_search("car").words == ["CarDiff", "cARE"]


def test_path_mode_uses_typed_prefix_then_lowercase():
    t = Trie(case_mode="path")
    t.insert("CarDiff")
    t.insert("cARE")
    assert t.prefix_search("CAR").words == ["CARdiff", "CARe"]
    assert t.enumerate_all().words == ["cardiff", "care"]


def test_collector_rejects_bad_settings():
    with pytest.raises(ValueError):
        Collector(max_results=0)
    with pytest.raises(ValueError):
        Collector(case_mode="upper")
    t = Trie()
    with pytest.raises(ValueError):
        t.prefix_search("a", limit=0)


def test_bad_limit_rejected_on_every_path():
    t = Trie()
    t.insert("car")
    with pytest.raises(ValueError):
        t.prefix_search("", limit=0)
    with pytest.raises(ValueError):
        t.prefix_search("zz", limit=-1)
    with pytest.raises(ValueError):
        t.enumerate_all(limit=0)
    assert t.prefix_search("zz", limit=1).words == []
    assert t.enumerate_all(limit=1).words == ["car"]


def test_deep_word_does_not_recurse():
    t = Trie(max_word_length=5000)
    word = "ab" * 2500
    t.insert(word)
    assert t.prefix_search("abab").words == [word]


def test_prefix_result_unpacks_as_count_and_words():
    result = PrefixResult(["a", "b"], truncated=True)
    count, words = result
    assert count == 2
    assert words == ["a", "b"]
    assert result.as_tuple() == (2, ["a", "b"])
    assert list(result) == [2, ["a", "b"]]
    assert bool(PrefixResult()) is False


def test_walk_yields_nodes_in_order():
    t = Trie()
    t.insert_many(["b", "a", "ab"])
    paths = [acc for acc, _node in t.collector.walk(t.root, "")]
    assert paths == ["a", "ab", "b"]
