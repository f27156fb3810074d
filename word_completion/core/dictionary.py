# dictionary.py
"""
WordDictionary - session facade over the Trie.

Purpose:
 - Own the Trie for one session
 - Restore it at startup (binary dump first, then the text word list, else empty)
 - Simple public API for the CLI/tests:
     insert, search, delete, select, top_k, autocomplete, spell_suggest,
     save_binary, load_binary, reload, load_text, save_text, stats
 - Autosave the text word list after every change (config "autosave")
 - Save the binary dump on close()

Frequency counts insertions and explicit selections. A plain search() does
not count; search(word, select=True) does.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from word_completion.core import ranking
from word_completion.core.errors import DecodeError, EncodeError
from word_completion.core.ranking import Correction
from word_completion.core.trie import Candidate, Trie
from word_completion.utils import trie_store
from word_completion.utils.config_manager import Config
from word_completion.utils.logger_utils import Log


class WordDictionary:
    """Application facade exposing a small API (see module docstring)."""

    def __init__(
        self,
        config: Optional[Config] = None,
        log: Optional[Log] = None,
        restore: bool = True,
    ):
        self.cfg = config or Config()
        self.log = log or Log(self.cfg.log_path)
        self.trie = Trie()
        self.source = "empty"
        self._started_at = time.time()
        if restore:
            self.source = self._restore_state()

    # Persistence ---------------------------------------------------------
    def _restore_state(self) -> str:
        """Binary dump if present and valid, then the text list, then empty."""
        bin_path, text_path = self.cfg.bin_path, self.cfg.text_path
        try:
            trie = trie_store.load_binary(bin_path)
        except DecodeError as e:
            self.log.warning(f"binary dictionary {bin_path} unreadable: {e}")
            trie = None
        if trie is not None:
            self.trie = trie
            self.log.info(f"loaded {len(trie)} words from {bin_path}")
            return "binary"

        n = trie_store.load_text(text_path, self.trie)
        if n is not None:
            self.log.info(f"loaded {n} words from {text_path}")
            return "text"

        self.log.info("starting with an empty dictionary")
        return "empty"

    def _autosave(self) -> bool:
        """Rewrite the text word list after a change. Failures are logged, not raised."""
        if not self.cfg.autosave:
            return True
        try:
            trie_store.save_text(self.cfg.text_path, self.trie)
        except EncodeError as e:
            self.log.error(f"autosave failed: {e}")
            return False
        return True

    def save_binary(self, path: Optional[str] = None) -> int:
        path = path or self.cfg.bin_path
        with self.log.time_block("save_binary"):
            size = trie_store.save_binary(path, self.trie)
        self.log.info(f"saved {len(self.trie)} words to {path}")
        return size

    def load_binary(self, path: Optional[str] = None) -> bool:
        """
        Replace the dictionary with a binary dump.
        Returns False (dictionary untouched) if the file is absent.
        DecodeError propagates and also leaves the dictionary untouched.
        """
        path = path or self.cfg.bin_path
        with self.log.time_block("load_binary"):
            trie = trie_store.load_binary(path)
        if trie is None:
            self.log.warning(f"no binary dictionary at {path}")
            return False
        self.trie = trie
        self.log.info(f"loaded {len(trie)} words from {path}")
        return True

    def reload(self) -> bool:
        """Reload from the binary dump, or start empty if there is none."""
        if self.load_binary():
            return True
        self.trie.clear()
        return False

    def load_text(self, path: Optional[str] = None) -> Optional[int]:
        """Merge a text word list into the dictionary. None if the file is absent."""
        path = path or self.cfg.text_path
        n = trie_store.load_text(path, self.trie)
        if n is None:
            self.log.warning(f"no text dictionary at {path}")
        else:
            self.log.info(f"merged {n} words from {path}")
            if n:
                self._autosave()
        return n

    def save_text(self, path: Optional[str] = None) -> int:
        path = path or self.cfg.text_path
        with self.log.time_block("save_text"):
            n = trie_store.save_text(path, self.trie)
        self.log.info(f"exported {n} words to {path}")
        return n

    def close(self) -> None:
        """Persist the binary dump. EncodeError propagates."""
        self.save_binary()

    def __enter__(self) -> "WordDictionary":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Public API ---------------------------------------------------------
    def insert(self, word: str) -> Optional[int]:
        freq = self.trie.insert(word)
        if freq is not None:
            self._autosave()
        return freq

    def search(self, word: str, select: bool = False) -> Optional[int]:
        """Frequency of `word`, or None if not stored. select=True also counts the lookup."""
        node = self.trie.search(word)
        if node is None:
            return None
        if select:
            node.freq += 1
            self._autosave()
        return node.freq

    def delete(self, word: str) -> bool:
        removed = self.trie.delete(word)
        if removed:
            self._autosave()
        return removed

    def select(self, word: str) -> Optional[int]:
        """Accept a suggestion (see ranking.select_suggestion)."""
        freq = ranking.select_suggestion(self.trie, word)
        if freq is not None:
            self._autosave()
        return freq

    def top_k(self, k: Optional[int] = None) -> List[Candidate]:
        return ranking.top_k(self.trie, self.cfg.top_k if k is None else k)

    def autocomplete(self, prefix: str, k: Optional[int] = None) -> List[Candidate]:
        return ranking.autocomplete(self.trie, prefix, self.cfg.top_k if k is None else k)

    def spell_suggest(self, text: str, k: Optional[int] = None) -> Optional[List[Correction]]:
        return ranking.spell_suggest(
            self.trie,
            text,
            self.cfg.top_k if k is None else k,
            max_dist=self.cfg.spell_max_dist,
        )

    def stats(self) -> Dict[str, Any]:
        return {
            "words": len(self.trie),
            "source": self.source,
            "uptime_s": round(time.time() - self._started_at, 1),
        }

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: object) -> bool:
        return word in self.trie
