# tui_app.py - live autocomplete over the trie
# -------------------------------------------------------
# Text based terminal UI wrapping a single Trie.
# Features:
#  - Suggestions refresh on every keystroke (prefix search)
#  - TAB accepts the top suggestion into the input box
#  - Ctrl+N inserts the typed word, Ctrl+T deletes it
#  - Status line with word/node counts and last lookup latency
# -------------------------------------------------------

from __future__ import annotations

import time

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from trie_autocompleter.core.collector import PrefixResult
from trie_autocompleter.core.errors import TrieError
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.logger_utils import Log


class SuggestionPanel(Static):
    """
    Right-side suggestion panel.
    Shows up to `shown` matches with 1-based indices and flags truncation.
    """
    shown = 10

    def update_result(self, result: PrefixResult):
        if not result.words:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = [
            f"[b]{i}[/b] • [cyan]{word}[/cyan]"
            for i, word in enumerate(result.words[: self.shown], 1)
        ]
        hidden = result.count - min(result.count, self.shown)
        if hidden or result.truncated:
            more = f"+{hidden}" + ("+" if result.truncated else "")
            lines.append(f"[dim]{more} more[/dim]")
        self.update("\n".join(lines))


class StatusLine(Static):
    """Bottom readout: trie size and how long the last lookup took."""
    def set_status(self, trie: Trie, seconds: float, note: str = ""):
        ms = seconds * 1000
        text = f"[dim]words[/dim] {trie.word_count}  [dim]nodes[/dim] {trie.node_count}  [dim]lookup[/dim] {ms:.2f}ms"
        if note:
            text += f"  {note}"
        self.update(text)


# Main Application -----------------------------------------------------------------
class TUIAutocompleter(App):
    """
    Textual app driving a Trie.
     - input changes -> prefix search -> reactive result -> panel refresh
     - key bindings mutate the trie (insert / delete / accept)
    """
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border: round $accent; padding: 0 1; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept top", priority=True),
        Binding("ctrl+n", "insert_word", "Insert word", priority=True),
        Binding("ctrl+t", "delete_word", "Delete word", priority=True),
    ]

    result = reactive(PrefixResult, always_update=True, init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, trie: Trie = None, log: Log = None):
        super().__init__()
        self.trie = trie if trie is not None else Trie()
        self.log_file = log
        self.note = ""

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing…", id="text_input")
            with Container(id="right"):
                yield SuggestionPanel("[dim]No suggestions[/dim]", id="suggestions")
        with Horizontal(id="bottom"):
            yield StatusLine(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(Input).focus()
        self.query_one(StatusLine).set_status(self.trie, 0.0)

    @property
    def suggestions(self):
        return self.result.words

    # Typing: re-run the prefix search
    def on_input_changed(self, event: Input.Changed) -> None:
        self.lookup(event.value)

    def lookup(self, text: str) -> None:
        prefix = text.strip()
        self.note = ""
        start = time.perf_counter()
        try:
            res = self.trie.prefix_search(prefix)
        except TrieError as e:
            res = PrefixResult()
            self.note = f"[red]{escape(str(e))}[/red]"
        self.latency = time.perf_counter() - start
        self.result = res

    # Reactive state (watcher functions) ---------------------------------------
    def watch_result(self, result: PrefixResult) -> None:
        self.query_one(SuggestionPanel).update_result(result)
        self.query_one(StatusLine).set_status(self.trie, self.latency, self.note)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self) -> None:
        """TAB = replace the input with the top suggestion."""
        if not self.result.words:
            return
        self.query_one(Input).value = self.result.words[0]

    def action_insert_word(self) -> None:
        """Ctrl+N = insert what is typed."""
        word = self.query_one(Input).value.strip()
        try:
            added = self.trie.insert(word)
        except TrieError as e:
            self._report(f"[red]{escape(str(e))}[/red]")
            return
        if added and self.log_file is not None:
            self.log_file.info(f"tui inserted: {word}")
        self.lookup(word)
        self._report("[green]inserted[/green]" if added else "[dim]already present[/dim]")

    def action_delete_word(self) -> None:
        """Ctrl+T = logically delete what is typed."""
        word = self.query_one(Input).value.strip()
        try:
            removed = self.trie.delete(word)
        except TrieError as e:
            self._report(f"[red]{escape(str(e))}[/red]")
            return
        if removed and self.log_file is not None:
            self.log_file.info(f"tui deleted: {word}")
        self.lookup(word)
        self._report("[yellow]deleted[/yellow]" if removed else "[dim]not present[/dim]")

    def _report(self, note: str) -> None:
        self.note = note
        self.query_one(StatusLine).set_status(self.trie, self.latency, note)


if __name__ == "__main__":
    TUIAutocompleter().run()
