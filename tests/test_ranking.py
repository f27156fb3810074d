# tests/test_ranking.py
# top-k, autocomplete, selection and spelling suggestions

import pytest
from word_completion.core.ranking import (
    Correction,
    autocomplete,
    select_suggestion,
    spell_suggest,
    top_k,
)
from word_completion.core.trie import Trie


def make_trie(freqs):
    t = Trie()
    for w, n in freqs.items():
        for _ in range(n):
            t.insert(w)
    return t


@pytest.fixture
def abcd():
    return make_trie({"a": 5, "b": 3, "c": 3, "d": 1})


def test_top_k_ties_broken_by_text(abcd):
    assert top_k(abcd, 2) == [("a", 5), ("b", 3)]
    assert top_k(abcd, 3) == [("a", 5), ("b", 3), ("c", 3)]


def test_top_k_more_than_available(abcd):
    assert [w for w, _ in top_k(abcd, 50)] == ["a", "b", "c", "d"]


def test_top_k_empty_and_nonpositive(abcd):
    assert top_k(Trie(), 10) == []
    assert top_k(abcd, 0) == []


def test_top_k_returns_fresh_lists(abcd):
    first = top_k(abcd, 4)
    first.clear()
    assert len(top_k(abcd, 4)) == 4


def test_autocomplete_scoped_to_prefix():
    t = make_trie({"dog": 1, "door": 2, "cat": 4})
    assert autocomplete(t, "do", 10) == [("door", 2), ("dog", 1)]
    assert autocomplete(t, "Do", 1) == [("door", 2)]


def test_autocomplete_tie_order_and_exact_word():
    t = make_trie({"car": 1, "care": 1, "cart": 1})
    assert [w for w, _ in autocomplete(t, "car", 10)] == ["car", "care", "cart"]


def test_autocomplete_missing_prefix():
    t = make_trie({"dog": 1})
    assert autocomplete(t, "x", 5) == []
    assert autocomplete(Trie(), "", 5) == []


def test_select_existing_bumps_frequency():
    t = make_trie({"dog": 2})
    assert select_suggestion(t, "DOG") == 3
    assert t.search("dog").freq == 3


def test_select_unknown_inserts():
    t = make_trie({"dog": 2})
    assert select_suggestion(t, "dot") == 1
    assert t.search("dot").freq == 1
    assert select_suggestion(t, "") is None


def test_spell_suggest_orders_by_distance_then_freq_then_text():
    t = make_trie({"cat": 1, "car": 4, "cap": 4, "dog": 9, "cast": 2})
    out = spell_suggest(t, "caz", 4)
    assert out == [
        Correction("cap", 1, 4),
        Correction("car", 1, 4),
        Correction("cat", 1, 1),
        Correction("cast", 2, 2),
    ]


def test_spell_suggest_folds_input():
    t = make_trie({"hello": 1})
    assert spell_suggest(t, "HELLO", 1) == [Correction("hello", 0, 1)]


def test_spell_suggest_compares_all_words():
    t = make_trie({"xyz": 1})
    out = spell_suggest(t, "abc", 3)
    assert out == [Correction("xyz", 3, 1)]


def test_spell_suggest_empty_dictionary_signal():
    assert spell_suggest(Trie(), "anything", 5) is None
    assert spell_suggest(make_trie({"a": 1}), "a", 0) == []


def test_spell_suggest_max_dist():
    t = make_trie({"cat": 1, "elephant": 1})
    assert [c.word for c in spell_suggest(t, "bat", 5, max_dist=1)] == ["cat"]
    assert spell_suggest(t, "zzzzzz", 5, max_dist=1) == []
