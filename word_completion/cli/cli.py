"""
cli.py - command line shell for the word dictionary
Features:
- Autocomplete with frequency-ranked suggestions and numbered selection
- Exact search (counts as a selection), insert, delete
- Top-k frequent words and "did you mean" spelling suggestions
- Binary save/load and text import/export
- Uses Rich for tables and formatting
"""

import argparse
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from word_completion.core.dictionary import WordDictionary
from word_completion.core.errors import DecodeError, EncodeError
from word_completion.core.ranking import Correction
from word_completion.core.trie import Candidate
from word_completion.utils.config_manager import Config

HELP = [
    ("<prefix>", "autocomplete (same as /complete)"),
    ("/complete <prefix>", "suggestions for a prefix, pick one to count it"),
    ("/search <word>", "look up a word (counts as a selection)"),
    ("/insert <word>", "add a word or bump its frequency"),
    ("/delete <word>", "remove a word"),
    ("/top [k]", "most frequent words"),
    ("/spell <word>", "did you mean?"),
    ("/save", "save the binary dictionary"),
    ("/load", "reload the binary dictionary"),
    ("/export [path]", "write the sorted word list"),
    ("/import [path]", "merge a word list"),
    ("/stats", "dictionary statistics"),
    ("/quit", "save and exit"),
]


class CLI:
    """Command-line interface managing user interaction with one WordDictionary."""

    def __init__(self, dictionary: WordDictionary, console: Optional[Console] = None):
        self.wd = dictionary
        self.console = console or Console()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - prompts for a command or a prefix
        - dispatches it until /quit or EOF
        """
        self.console.rule("[bold magenta]Word Completion[/bold magenta]")
        self.console.print(f"[dim]{len(self.wd)} words loaded ({self.wd.source}). /help for commands.[/dim]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Run one input line. Returns False once the shell should stop."""
        line = line.strip()
        if not line:
            return self.running
        if not line.startswith("/"):
            self._complete(line)
            return self.running

        cmd, _, arg = line.partition(" ")
        arg = arg.strip()
        handler = {
            "/complete": self._complete,
            "/search": self._search,
            "/insert": self._insert,
            "/delete": self._delete,
            "/top": self._top,
            "/spell": self._spell,
            "/save": self._save,
            "/load": self._load,
            "/export": self._export,
            "/import": self._import,
            "/stats": self._stats,
            "/help": self._help,
            "/quit": self._quit,
            "/exit": self._quit,
        }.get(cmd)
        if handler is None:
            self.console.print(f"[red]Unknown command:[/red] {cmd}")
            return self.running
        handler(arg)
        return self.running

    def _need(self, arg: str, what: str) -> bool:
        if arg:
            return True
        self.console.print(f"[red]Missing {what}.[/red]")
        return False

    # CORE COMMANDS ---------------------------------------------------------------
    def _complete(self, prefix: str):
        """
        Loop:
        suggestions → display → user choice → selection counted
        """
        if not self._need(prefix, "prefix"):
            return
        suggestions = self.wd.autocomplete(prefix)
        if not suggestions:
            self.console.print(f"[dim](no suggestions for \"{escape(prefix.lower())}\")[/dim]")
            return

        self._display_candidates("Suggestions", suggestions)
        chosen = Prompt.ask("Pick # / Enter to skip", default="", console=self.console)
        if not chosen.isdigit() or not 1 <= int(chosen) <= len(suggestions):
            self.console.print("[dim]Cancelled.[/dim]")
            return
        word = suggestions[int(chosen) - 1][0]
        freq = self.wd.select(word)
        self.console.print(f"[green]Chosen:[/green] {escape(word)} [dim](freq {freq})[/dim]")

    def _search(self, word: str):
        if not self._need(word, "word"):
            return
        freq = self.wd.search(word, select=True)
        if freq is None:
            self.console.print(f"Word \"{escape(word.lower())}\" [red]not found[/red].")
        else:
            self.console.print(f"Word \"{escape(word.lower())}\" found. Frequency now {freq}.")

    def _insert(self, word: str):
        if not self._need(word, "word"):
            return
        freq = self.wd.insert(word)
        self.console.print(f"[cyan]Inserted:[/cyan] {escape(word.lower())} [dim](freq {freq})[/dim]")

    def _delete(self, word: str):
        if not self._need(word, "word"):
            return
        if self.wd.delete(word):
            self.console.print(f"[yellow]Deleted:[/yellow] {escape(word.lower())}")
        else:
            self.console.print(f"Word \"{escape(word.lower())}\" [red]not found[/red].")

    def _top(self, arg: str):
        k = int(arg) if arg.isdigit() else None
        if k == 0:
            self.console.print("[red]k must be at least 1.[/red]")
            return
        words = self.wd.top_k(k)
        if not words:
            self.console.print("[dim]No words in dictionary.[/dim]")
            return
        self._display_candidates(f"Top {len(words)} frequent words", words)

    def _spell(self, word: str):
        if not self._need(word, "word"):
            return
        out = self.wd.spell_suggest(word)
        if out is None:
            self.console.print("[dim]No words to compare.[/dim]")
            return
        if not out:
            self.console.print("[dim](no close matches)[/dim]")
            return
        self._display_corrections(word, out)

    # PERSISTENCE -----------------------------------------------------------------
    def _save(self, _arg: str = ""):
        try:
            self.wd.save_binary()
        except EncodeError as e:
            self.console.print(f"[red]Save failed:[/red] {e}")
            return
        self.console.print(f"[green]Saved to {self.wd.cfg.bin_path}.[/green]")

    def _load(self, _arg: str = ""):
        try:
            found = self.wd.reload()
        except DecodeError as e:
            self.console.print(f"[red]Load failed:[/red] {e}")
            return
        if found:
            self.console.print(f"[green]Loaded {len(self.wd)} words from {self.wd.cfg.bin_path}.[/green]")
        else:
            self.console.print(f"[yellow]No dictionary at {self.wd.cfg.bin_path}, starting empty.[/yellow]")

    def _export(self, path: str):
        try:
            n = self.wd.save_text(path or None)
        except EncodeError as e:
            self.console.print(f"[red]Export failed:[/red] {e}")
            return
        self.console.print(f"[green]Exported {n} words.[/green]")

    def _import(self, path: str):
        n = self.wd.load_text(path or None)
        if n is None:
            self.console.print(f"[red]No such file:[/red] {path or self.wd.cfg.text_path}")
        else:
            self.console.print(f"[green]Imported {n} words.[/green]")

    # DISPLAY ---------------------------------------------------------------------
    def _display_candidates(self, title: str, rows: List[Candidate]):
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Freq", justify="right", style="magenta")
        for i, (w, freq) in enumerate(rows, 1):
            table.add_row(str(i), escape(w), str(freq))
        self.console.print(table)

    def _display_corrections(self, text: str, rows: List[Correction]):
        table = Table(title=f"Did you mean ({escape(text.lower())})", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Dist", justify="right", style="yellow")
        table.add_column("Freq", justify="right", style="magenta")
        for i, c in enumerate(rows, 1):
            table.add_row(str(i), escape(c.word), str(c.distance), str(c.freq))
        self.console.print(table)

    def _stats(self, _arg: str = ""):
        t = Table(title="Dictionary", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self.wd.stats().items():
            t.add_row(k, str(v))
        self.console.print(t)

    def _help(self, _arg: str = ""):
        t = Table(box=box.SIMPLE, show_header=False)
        for cmd, desc in HELP:
            t.add_row(f"[cyan]{cmd}[/cyan]", desc)
        self.console.print(t)

    # EXIT ------------------------------------------------------------------------
    def _quit(self, _arg: str = ""):
        self._exit()

    def _exit(self):
        """Save the binary dictionary and stop the loop."""
        self.console.rule("[red]Exiting[/red]")
        self._save()
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="word-completion", description="Word completion shell")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--text", help="text word list (one word per line)")
    parser.add_argument("--bin", help="binary dictionary file")
    parser.add_argument("--no-autosave", action="store_true", help="don't rewrite the word list after changes")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    if args.text:
        cfg.set("text_path", args.text)
    if args.bin:
        cfg.set("bin_path", args.bin)
    if args.no_autosave:
        cfg.set("autosave", False)

    CLI(WordDictionary(cfg)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
