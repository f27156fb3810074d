"""
word_completion.core

The dictionary engine behind the word completion shell.
Contains:
 - the case-folded prefix tree with word frequencies (Trie)
 - ranking and suggestion algorithms (top-k, autocomplete, spelling)
 - Levenshtein edit distance
 - the session facade that owns the trie and its files (WordDictionary)
"""

from .errors import DictionaryError, DecodeError, EncodeError
from .trie import Trie, TrieNode, MAX_WORD_LEN
from .distance import levenshtein
from .ranking import Correction, top_k, autocomplete, select_suggestion, spell_suggest
from .dictionary import WordDictionary

__all__ = [
    "DictionaryError",
    "DecodeError",
    "EncodeError",
    "Trie",
    "TrieNode",
    "MAX_WORD_LEN",
    "levenshtein",
    "Correction",
    "top_k",
    "autocomplete",
    "select_suggestion",
    "spell_suggest",
    "WordDictionary",
]
