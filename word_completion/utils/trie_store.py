# trie_store.py - persistence layer for the word dictionary

# handles saving and loading the trie in two formats:
# - binary: pre-order node dump, keeps frequencies, fast to reload
# - text: UTF-8 word list, one word per line, sorted (frequencies not kept)
#
# Binary node layout (little endian):
#   <i is_word> <i freq> <i child_count>, then per child: <I code point> <child node>
# Loaders return None when the file does not exist; malformed data raises
# DecodeError, write failures raise EncodeError.
# Saves go to a temp file in the target directory and replace the target,
# so a failed save leaves the previous file intact.

from __future__ import annotations

import logging
import os
import struct
import tempfile
from typing import Iterable, List, Optional, Tuple

from word_completion.core.errors import DecodeError, EncodeError
from word_completion.core.ranking import collation_key
from word_completion.core.trie import MAX_WORD_LEN, Trie, TrieNode

logger = logging.getLogger(__name__)

_NODE = struct.Struct("<iii")
_EDGE = struct.Struct("<I")
_MAX_CODE_POINT = 0x10FFFF
_LINE_BREAKS = ("\n", "\r")


def _atomic_write(path: str, chunks: Iterable[bytes]) -> None:
    """Write chunks to a temp file beside `path`, then swap it in. OSError propagates."""
    dirname = os.path.dirname(path) or "."
    fd, tmp_path = tempfile.mkstemp(prefix=".wc_", suffix=".tmp", dir=dirname)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.writelines(chunks)
        os.replace(tmp_path, path)
    except OSError:
        try:
            os.unlink(tmp_path)
        except OSError:
            logger.warning("could not remove temp file %s", tmp_path)
        raise


# Binary format -----------------------------------------
def dumps_binary(trie: Trie) -> bytes:
    """
    Serialise a trie to bytes.
    Uses an explicit stack; children are written in sorted order so equal
    tries produce equal bytes.
    Raises EncodeError if a frequency does not fit the 4-byte field.
    """
    chunks: List[bytes] = []
    stack: List[Tuple[Optional[str], TrieNode]] = [(None, trie.root)]
    while stack:
        ch, node = stack.pop()
        if ch is not None:
            chunks.append(_EDGE.pack(ord(ch)))
        try:
            chunks.append(_NODE.pack(int(node.is_word), node.freq, len(node.children)))
        except struct.error as e:
            raise EncodeError(f"node with frequency {node.freq} cannot be encoded: {e}") from e
        # reversed so the smallest key is popped (and written) first
        for key in sorted(node.children, reverse=True):
            stack.append((key, node.children[key]))
    return b"".join(chunks)


class _Reader:
    """Cursor over a byte buffer that turns short reads into DecodeError."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def unpack(self, fmt: struct.Struct, what: str) -> tuple:
        end = self.pos + fmt.size
        if end > len(self.data):
            raise DecodeError(f"truncated stream while reading {what}", self.pos)
        vals = fmt.unpack_from(self.data, self.pos)
        self.pos = end
        return vals

    def node(self) -> Tuple[TrieNode, int]:
        at = self.pos
        is_word, freq, count = self.unpack(_NODE, "node header")
        if is_word not in (0, 1):
            raise DecodeError(f"bad terminal flag {is_word}", at)
        if freq < 0 or count < 0:
            raise DecodeError(f"negative frequency/child count ({freq}, {count})", at)
        if not is_word and freq != 0:
            raise DecodeError(f"non-terminal node with frequency {freq}", at)
        node = TrieNode()
        node.is_word = bool(is_word)
        node.freq = freq
        return node, count


def loads_binary(data: bytes) -> Trie:
    """Rebuild a trie from bytes produced by dumps_binary."""
    reader = _Reader(data)
    root, count = reader.node()
    if root.is_word:
        raise DecodeError("root node marked as a word", 0)
    # each entry: (node, children still to read)
    stack: List[List] = [[root, count]]
    while stack:
        top = stack[-1]
        if top[1] == 0:
            stack.pop()
            continue
        top[1] -= 1
        if len(stack) > MAX_WORD_LEN:
            raise DecodeError("path longer than the maximum word length", reader.pos)

        at = reader.pos
        (code,) = reader.unpack(_EDGE, "edge character")
        # lone surrogates are legal edges: they come from surrogateescape'd input
        if code > _MAX_CODE_POINT:
            raise DecodeError(f"invalid code point {code:#x}", at)
        ch = chr(code)
        parent: TrieNode = top[0]
        if ch in parent.children:
            raise DecodeError(f"duplicate edge {ch!r}", at)

        child_at = reader.pos
        child, child_count = reader.node()
        if not child.is_word and child_count == 0:
            raise DecodeError("dangling node (no word, no children)", child_at)
        parent.children[ch] = child
        stack.append([child, child_count])

    if reader.pos != len(data):
        raise DecodeError(f"{len(data) - reader.pos} trailing bytes", reader.pos)
    return Trie(root)


def save_binary(path: str, trie: Trie) -> int:
    """
    Write the trie to `path` (replaces it). Returns the number of bytes written.
    Raises EncodeError if the trie cannot be encoded or the file cannot be
    written; the previous file is kept in both cases.
    """
    payload = dumps_binary(trie)
    try:
        _atomic_write(path, [payload])
    except OSError as e:
        raise EncodeError(f"cannot write binary trie {path}: {e}", path) from e
    logger.debug("saved %d words (%d bytes) to %s", len(trie), len(payload), path)
    return len(payload)


def load_binary(path: str) -> Optional[Trie]:
    """
    Load a trie saved by save_binary.
    Returns None if `path` does not exist; raises DecodeError for corrupt data.
    """
    if not os.path.exists(path):
        return None
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise DecodeError(f"cannot read binary trie {path}: {e}") from e
    trie = loads_binary(data)
    logger.debug("loaded %d words from %s", len(trie), path)
    return trie


# Text format -------------------------------------------
def load_text(path: str, trie: Trie) -> Optional[int]:
    """
    Insert every word of a UTF-8 word list into `trie`.
    Blank lines and lines that are not valid UTF-8 are skipped; a word that
    appears n times gains n in frequency.
    Returns the number of words inserted, or None if `path` does not exist.
    """
    if not os.path.exists(path):
        return None
    added = 0
    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, 1):
            raw = raw.rstrip(b"\r\n")
            if not raw:
                continue
            try:
                word = raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("%s:%d: not valid UTF-8, skipped", path, lineno)
                continue
            if trie.insert(word) is not None:
                added += 1
    logger.debug("loaded %d words from %s", added, path)
    return added


def save_text(path: str, trie: Trie) -> int:
    """
    Write every stored word to `path`, one per line, in ascending text order.
    Words that cannot be encoded as UTF-8, or that contain a line break (they
    would not read back as one word), are skipped.
    Returns the number of words written; raises EncodeError on write failure
    and keeps the previous file.
    """
    encoded: List[Tuple[str, bytes]] = []
    for w, _freq in trie.collect_all():
        if any(br in w for br in _LINE_BREAKS):
            logger.warning("word %r contains a line break, skipped", w)
            continue
        try:
            encoded.append((w, w.encode("utf-8") + b"\n"))
        except UnicodeEncodeError:
            logger.warning("word %r cannot be encoded as UTF-8, skipped", w)
    encoded.sort(key=lambda item: collation_key(item[0]))
    lines = [line for _w, line in encoded]
    try:
        _atomic_write(path, lines)
    except OSError as e:
        raise EncodeError(f"cannot write dictionary {path}: {e}", path) from e
    logger.debug("saved %d words to %s", len(lines), path)
    return len(lines)
