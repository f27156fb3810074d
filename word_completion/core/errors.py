# errors.py
# Exceptions raised by the dictionary engine.
# Recoverable "not found" conditions are return values (None/False/[]),
# only genuine persistence failures are raised.

from __future__ import annotations
from typing import Optional


class DictionaryError(Exception):
    """Base class for all word_completion errors."""


class DecodeError(DictionaryError):
    """
    A binary trie stream is malformed (truncated, inconsistent counts,
    trailing bytes, invalid code points).
    offset: byte position where decoding failed, if known.
    """

    def __init__(self, msg: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            msg = f"{msg} (at byte {offset})"
        super().__init__(msg)
        self.offset = offset


class EncodeError(DictionaryError):
    """Writing a dictionary file failed. The in-memory trie is untouched."""

    def __init__(self, msg: str, path: Optional[str] = None) -> None:
        super().__init__(msg)
        self.path = path
