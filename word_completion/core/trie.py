# trie.py
# Trie (prefix tree) holding the dictionary words and their frequencies.
# Every key is case-folded before it touches the tree, so only the
# canonical lowercase form of a word is stored.

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

Word = str
Freq = int
Candidate = Tuple[Word, Freq]

# longest word kept, in code points; longer input is truncated
MAX_WORD_LEN = 511


def fold(word: str) -> str:
    """Case-fold a word and clip it to MAX_WORD_LEN code points."""
    w = word.lower()
    if len(w) > MAX_WORD_LEN:
        logger.debug("truncating %d-char word to %d chars", len(w), MAX_WORD_LEN)
        w = w[:MAX_WORD_LEN]
    return w


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: True if an inserted word ends exactly here
    freq: occurrence/selection count, always 0 when is_word is False
    """

    __slots__ = ("children", "is_word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.freq = 0

    def __repr__(self) -> str:
        return f"TrieNode(is_word={self.is_word}, freq={self.freq}, children={len(self.children)})"


class Trie:
    """
    Prefix tree of case-folded words with per-word frequencies.
    Used by WordDictionary for:
     - exact lookup and frequency bookkeeping
     - prefix collection for autocomplete
     - full enumeration for top-k and spelling suggestions
    """

    def __init__(self, root: Optional[TrieNode] = None) -> None:
        self._root = root if root is not None else TrieNode()
        self._size = 0
        if root is not None:
            self._size = sum(1 for _ in self._walk(self._root, ""))

    @property
    def root(self) -> TrieNode:
        return self._root

    # node store ----------------------------------------------------------
    def clear(self) -> None:
        """Drop every node. The old subtree goes with its last reference."""
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------------
    def insert(self, word: str) -> Optional[int]:
        """
        Insert a word, creating missing nodes along its path.
        Each call adds exactly 1 to the word's frequency.
        Returns the new frequency, or None for an empty word (nothing stored).
        """
        w = fold(word)
        if not w:
            return None

        node = self._root
        for ch in w:
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1
        node.freq += 1
        return node.freq

    # lookup --------------------------------------------------------------
    def _walk_path(self, folded: str) -> Optional[TrieNode]:
        node = self._root
        for ch in folded:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> Optional[TrieNode]:
        """Return the terminal node for `word`, or None. Never changes frequencies."""
        node = self._walk_path(fold(word))
        if node is None or not node.is_word:
            return None
        return node

    def find_prefix_node(self, prefix: str) -> Optional[TrieNode]:
        """Node at the end of `prefix`, terminal or not. Empty prefix gives the root."""
        return self._walk_path(fold(prefix))

    # deletion ------------------------------------------------------------
    def delete(self, word: str) -> bool:
        """
        Remove a word and prune the branch it leaves behind.
        Pruning walks back up the recorded path and stops at the first node
        that is still terminal or still has children. The root is never removed.
        Returns False if the word was not stored.
        """
        path: List[Tuple[TrieNode, str]] = []
        node = self._root
        for ch in fold(word):
            nxt = node.children.get(ch)
            if nxt is None:
                return False
            path.append((node, ch))
            node = nxt

        if not node.is_word:
            return False
        node.is_word = False
        node.freq = 0
        self._size -= 1

        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.is_word or child.children:
                break
            del parent.children[ch]
        return True

    # traversal -----------------------------------------------------------
    @staticmethod
    def _walk(start: TrieNode, prefix: str) -> Iterator[Candidate]:
        """Depth-first pre-order walk yielding (word, freq) for terminal nodes."""
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_word:
                yield word, node.freq
            for ch, child in node.children.items():
                stack.append((child, word + ch))

    def collect_all(self) -> List[Candidate]:
        """All stored (word, freq) pairs, unsorted. Empty trie gives []."""
        return list(self._walk(self._root, ""))

    def collect_under_prefix(self, prefix: str) -> List[Candidate]:
        """
        All (word, freq) pairs whose word starts with `prefix`.
        Words are returned whole, not relative to the prefix.
        """
        p = fold(prefix)
        node = self._walk_path(p)
        if node is None:
            return []
        return list(self._walk(node, p))

    # convenience ---------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Candidate]:
        return self._walk(self._root, "")

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.search(word) is not None
