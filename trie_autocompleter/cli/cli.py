"""
cli.py - interactive shell over the prefix trie
Features:
- Bare text runs a prefix search (autocomplete), results in a Rich table
- Slash commands for insert/search/delete/enumerate/compact
- Word lists loaded from plain text files (one word per line)
- Per-command latency tracked and shown with /stats
"""

import shlex
import time
from typing import List

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from trie_autocompleter.core.alphabet import is_valid_word
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.core.collector import PrefixResult
from trie_autocompleter.core.errors import TrieError
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import Log
from trie_autocompleter.utils.metrics_tracker import Metrics

HELP = """\
[bold]<text>[/bold]             prefix search (autocomplete)
/insert <w> \\[w ...]  insert words
/search <w>          exact lookup
/prefix <p>          prefix search
/delete <w>          logical delete
/all                 every live word
/load <file>         insert words from a file, one per line
/compact             drop dead branches
/stats               counters and latencies
/config \\[key val]    show or change settings
/help  /quit"""


def build_trie(cfg: Config) -> Trie:
    """Trie configured from the settings file."""
    return Trie(
        max_results=int(cfg["max_results"]),
        max_word_length=int(cfg["max_word_length"]),
        case_mode=cfg["label_case"],
    )


class CLI:
    """Command-line shell managing a single Trie for the session."""

    def __init__(self, trie: Trie = None, cfg: Config = None,
                 console: Console = None, log: Log = None):
        self.cfg = cfg or Config()
        self.trie = trie or build_trie(self.cfg)
        self.console = console or Console()
        self.log = log or Log(self.cfg.get("log_path"), echo=False)
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for input.
        - Slash commands are dispatched, anything else is a prefix search.
        """
        self.console.rule("[bold magenta]Trie Autocompleter[/bold magenta]")
        self.console.print("[cyan]Type a prefix for suggestions, /help for commands.[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str):
        """Run one line of input. Trie errors are reported, never fatal."""
        line = line.strip()
        if not line:
            return
        try:
            if line.startswith("/"):
                self._handle_command(line)
            else:
                self._prefix(line)
        except TrieError as e:
            self.log.warning(f"{line!r}: {e}")
            self.console.print(f"[red]{escape(str(e))}[/red]")

    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            # unbalanced quotes
            self.console.print(f"[red]Bad input:[/red] {escape(str(e))}. Type /help for usage.")
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
        elif cmd == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
        elif cmd == "/insert" and args:
            self._insert(args)
        elif cmd == "/search" and len(args) == 1:
            self._search(args[0])
        elif cmd == "/prefix" and len(args) == 1:
            self._prefix(args[0])
        elif cmd == "/delete" and len(args) == 1:
            self._delete(args[0])
        elif cmd == "/all":
            self._show_result("all words", self._timed("enumerate_time", self.trie.enumerate_all))
        elif cmd == "/load" and len(args) == 1:
            self._load(args[0])
        elif cmd == "/compact":
            released = self.trie.compact()
            self.console.print(f"[yellow]Released {released} nodes.[/yellow]")
        elif cmd == "/stats":
            self._show_stats()
        elif cmd == "/config":
            self._config(args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _timed(self, key: str, fn, *args):
        t0 = time.perf_counter()
        out = fn(*args)
        self.metrics.record(key, time.perf_counter() - t0)
        return out

    # COMMANDS -------------------------------------------------------------------
    def _insert(self, words: List[str]):
        for w in words:
            if self._timed("insert_time", self.trie.insert, w):
                self.console.print(f"[green]Inserted:[/green] {w}")
            else:
                self.console.print(f"[dim]Already present:[/dim] {w}")

    def _search(self, word: str):
        if self._timed("search_time", self.trie.search, word):
            self.console.print(f"[green]Found:[/green] {word}")
        else:
            self.console.print(f"[red]Not found:[/red] {word}")

    def _prefix(self, prefix: str):
        result = self._timed("prefix_time", self.trie.prefix_search, prefix)
        self._show_result(f"'{prefix}'", result)

    def _delete(self, word: str):
        if self.trie.delete(word):
            self.console.print(f"[yellow]Deleted:[/yellow] {word}")
        else:
            self.console.print(f"[dim]Not present:[/dim] {word}")

    def _load(self, path: str):
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [w.strip() for w in f if w.strip()]
        except OSError as e:
            self.console.print(f"[red]Cannot read {escape(path)}:[/red] {escape(str(e))}")
            return
        rejected = sum(1 for w in words if not is_valid_word(w, self.trie.max_word_length))
        with self.log.time_block(f"load {path}") as timer:
            added = self.trie.insert_many(words)
        self.console.print(
            f"[green]Loaded {added} new words[/green] from {len(words)} lines "
            f"[dim]({timer.elapsed * 1000:.1f} ms)[/dim]"
        )
        if rejected:
            self.console.print(f"[yellow]Skipped {rejected} invalid lines.[/yellow]")

    def _config(self, args: List[str]):
        if not args:
            self.cfg.show(self.console)
            return
        if len(args) != 2:
            self.console.print("[red]Usage:[/red] /config <key> <value>")
            return
        try:
            self.cfg.set(args[0], args[1])
        except (KeyError, ValueError) as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        self.console.print(f"[cyan]{args[0]}[/cyan] = {self.cfg[args[0]]} (applies to new sessions)")

    # DISPLAY -------------------------------------------------------------------------------
    def _show_result(self, title: str, result: PrefixResult):
        if not result.words:
            self.console.print("[dim](no matches)[/dim]")
            return
        table = Table(title=f"Matches for {title}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(result.words, 1):
            table.add_row(str(i), w)
        self.console.print(table)
        footer = f"{result.count} shown"
        if result.truncated:
            footer += f" [yellow](truncated at {result.count}, more matches exist)[/yellow]"
        self.console.print(footer)

    def _show_stats(self):
        table = Table(title="Trie", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Live words", str(self.trie.word_count))
        table.add_row("Nodes", str(self.trie.node_count))
        for key, (n, avg) in self.metrics.summary().items():
            table.add_row(f"{key} (n={n})", f"{avg * 1000:.3f} ms")
        self.console.print(table)

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        released = self.trie.teardown()
        self.log.info(f"session closed, released {released} nodes")
        self.running = False


def main():
    CLI().run()


if __name__ == "__main__":
    main()
