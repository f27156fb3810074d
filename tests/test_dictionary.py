# tests/test_dictionary.py
# WordDictionary: restore order, autosave, selection semantics, persistence errors

import pytest
from word_completion.core.dictionary import WordDictionary
from word_completion.core.errors import DecodeError, EncodeError
from word_completion.core.trie import Trie
from word_completion.utils import trie_store
from word_completion.utils.config_manager import ENV_BIN_PATH, ENV_TEXT_PATH, Config


@pytest.fixture
def cfg(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_TEXT_PATH, raising=False)
    monkeypatch.delenv(ENV_BIN_PATH, raising=False)
    c = Config()
    c.set("text_path", str(tmp_path / "words.txt"))
    c.set("bin_path", str(tmp_path / "words.txt.bin"))
    c.set("log_path", str(tmp_path / "logs" / "session.log"))
    return c


@pytest.fixture
def wd(cfg):
    return WordDictionary(cfg)


def read_words(cfg):
    with open(cfg.text_path, encoding="utf-8") as f:
        return f.read().splitlines()


def test_starts_empty_without_files(wd):
    assert wd.source == "empty"
    assert len(wd) == 0
    assert wd.top_k() == []
    assert wd.spell_suggest("abc") is None


def test_restores_from_text(cfg):
    with open(cfg.text_path, "w", encoding="utf-8") as f:
        f.write("Dog\ndoor\ndog\n")
    wd = WordDictionary(cfg)
    assert wd.source == "text"
    assert wd.search("dog") == 2


def test_prefers_binary_over_text(cfg):
    trie_store.save_binary(cfg.bin_path, Trie())
    with open(cfg.text_path, "w", encoding="utf-8") as f:
        f.write("ignored\n")
    wd = WordDictionary(cfg)
    assert wd.source == "binary"
    assert "ignored" not in wd


def test_corrupt_binary_falls_back_to_text(cfg):
    with open(cfg.bin_path, "wb") as f:
        f.write(b"\x00\x01")
    with open(cfg.text_path, "w", encoding="utf-8") as f:
        f.write("fallback\n")
    wd = WordDictionary(cfg)
    assert wd.source == "text"
    assert "fallback" in wd


def test_insert_autosaves_sorted_text(wd, cfg):
    wd.insert("pear")
    wd.insert("Apple")
    assert read_words(cfg) == ["apple", "pear"]


def test_autosave_can_be_disabled(cfg):
    cfg.set("autosave", "false")
    wd = WordDictionary(cfg)
    wd.insert("x")
    with pytest.raises(FileNotFoundError):
        read_words(cfg)


def test_autosave_failure_keeps_dictionary_usable(cfg, tmp_path):
    cfg.set("text_path", str(tmp_path))  # a directory: every write fails
    wd = WordDictionary(cfg, restore=False)
    assert wd.insert("still") == 1
    assert wd.search("still") == 1
    log_text = (tmp_path / "logs" / "session.log").read_text(encoding="utf-8")
    assert "autosave failed" in log_text


def test_search_counts_only_when_selecting(wd):
    wd.insert("hello")
    assert wd.search("hello") == 1
    assert wd.search("HELLO", select=True) == 2
    assert wd.search("hello") == 2
    assert wd.search("nothere", select=True) is None


def test_delete(wd, cfg):
    wd.insert("cat")
    wd.insert("car")
    assert wd.delete("cat")
    assert not wd.delete("cat")
    assert read_words(cfg) == ["car"]


def test_autocomplete_and_select(wd):
    for w in ["dog", "door", "door", "cat"]:
        wd.insert(w)
    assert wd.autocomplete("do") == [("door", 2), ("dog", 1)]
    assert wd.select("dog") == 2
    assert wd.select("dot") == 1
    assert wd.autocomplete("do", k=1) == [("dog", 2)]


def test_top_k_uses_configured_default(cfg):
    cfg.set("top_k", 2)
    wd = WordDictionary(cfg)
    for w in ["a", "b", "c"]:
        wd.insert(w)
    assert len(wd.top_k()) == 2
    assert len(wd.top_k(5)) == 3


def test_spell_suggest_uses_configured_cutoff(cfg):
    cfg.set("spell_max_dist", "1")
    wd = WordDictionary(cfg)
    wd.insert("cat")
    wd.insert("horse")
    assert [c.word for c in wd.spell_suggest("bat")] == ["cat"]


def test_binary_save_and_reload(wd):
    wd.insert("alpha")
    wd.insert("alpha")
    wd.save_binary()
    wd.insert("beta")
    assert wd.reload() is True
    assert wd.search("alpha") == 2
    assert "beta" not in wd


def test_reload_without_binary_empties(wd):
    wd.insert("temp")
    assert wd.reload() is False
    assert len(wd) == 0


def test_load_binary_absent_keeps_words(wd):
    wd.insert("keep")
    assert wd.load_binary() is False
    assert "keep" in wd


def test_load_binary_corrupt_propagates(wd, cfg):
    wd.insert("keep")
    with open(cfg.bin_path, "wb") as f:
        f.write(b"junk")
    with pytest.raises(DecodeError):
        wd.load_binary()
    assert "keep" in wd


def test_save_binary_failure_propagates(wd, tmp_path):
    with pytest.raises(EncodeError):
        wd.save_binary(str(tmp_path / "missing" / "x.bin"))


def test_text_export_import(wd, tmp_path):
    for w in ["b", "a", "a"]:
        wd.insert(w)
    out = str(tmp_path / "export.txt")
    assert wd.save_text(out) == 2
    other = str(tmp_path / "other.txt")
    with open(other, "w", encoding="utf-8") as f:
        f.write("c\na\n")
    assert wd.load_text(other) == 2
    assert wd.search("a") == 3
    assert wd.load_text(str(tmp_path / "none.txt")) is None


def test_merging_a_word_list_autosaves(wd, cfg, tmp_path):
    wd.insert("zebra")
    other = tmp_path / "merge.txt"
    other.write_text("apple\nmango\n", encoding="utf-8")
    assert wd.load_text(str(other)) == 2
    assert read_words(cfg) == ["apple", "mango", "zebra"]


def test_context_manager_saves_binary(cfg):
    with WordDictionary(cfg) as wd:
        wd.insert("persisted")
    again = WordDictionary(cfg)
    assert again.source == "binary"
    assert again.search("persisted") == 1


def test_stats(wd):
    wd.insert("one")
    s = wd.stats()
    assert s["words"] == 1
    assert s["source"] == "empty"
