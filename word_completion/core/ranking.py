# ranking.py
"""
Ranking and suggestion algorithms on top of the Trie.

 - top_k(): most frequent words in the whole dictionary
 - autocomplete(): most frequent completions of a prefix
 - select_suggestion(): record that the user picked a suggestion
 - spell_suggest(): nearest stored words by edit distance ("did you mean")

Ordering is deterministic: frequency first, then locale-aware text order.
Every call returns a fresh list.
"""

from __future__ import annotations

import locale
import logging
from typing import List, NamedTuple, Optional

from word_completion.core.distance import levenshtein
from word_completion.core.trie import Candidate, Trie, fold

logger = logging.getLogger(__name__)


class Correction(NamedTuple):
    """A spelling suggestion: stored word, its distance to the input, its frequency."""

    word: str
    distance: int
    freq: int


def collation_key(word: str) -> str:
    """Sort key following the process collation (LC_COLLATE); code point order in the C locale."""
    return locale.strxfrm(word)


def _by_frequency(cands: List[Candidate]) -> List[Candidate]:
    # higher freq first, ties in ascending text order
    return sorted(cands, key=lambda c: (-c[1], collation_key(c[0])))


def top_k(trie: Trie, k: int) -> List[Candidate]:
    """The k most frequent (word, freq) pairs. Empty dictionary gives []."""
    if k <= 0:
        return []
    return _by_frequency(trie.collect_all())[:k]


def autocomplete(trie: Trie, prefix: str, k: int) -> List[Candidate]:
    """
    The k most frequent words starting with `prefix`, same order as top_k.
    Unknown prefix gives [].
    """
    if k <= 0:
        return []
    return _by_frequency(trie.collect_under_prefix(prefix))[:k]


def select_suggestion(trie: Trie, word: str) -> Optional[int]:
    """
    Count a user's pick of `word`.
    Existing words gain 1; text that is no longer stored is inserted with
    frequency 1. Returns the resulting frequency (None for an empty word).
    """
    node = trie.search(word)
    if node is not None:
        node.freq += 1
        return node.freq
    logger.debug("selected word %r not stored, inserting", word)
    return trie.insert(word)


def spell_suggest(
    trie: Trie, text: str, k: int, max_dist: Optional[int] = None
) -> Optional[List[Correction]]:
    """
    Stored words closest to `text` by Levenshtein distance.
    Sorted by (distance, -freq, text order), first k returned.
    With max_dist set, words further away are left out.
    Returns None when the dictionary is empty (nothing to compare against).
    """
    words = trie.collect_all()
    if not words:
        return None
    if k <= 0:
        return []

    q = fold(text)
    out: List[Correction] = []
    for w, freq in words:
        d = levenshtein(q, w, max_dist)
        if max_dist is not None and d > max_dist:
            continue
        out.append(Correction(w, d, freq))

    out.sort(key=lambda c: (c.distance, -c.freq, collation_key(c.word)))
    return out[:k]
