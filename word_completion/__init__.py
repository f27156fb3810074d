# word_completion - trie-based word completion, ranking and spelling suggestions

from .core import Trie, WordDictionary, DecodeError, EncodeError

__all__ = ["Trie", "WordDictionary", "DecodeError", "EncodeError"]

__version__ = "0.1.0"
