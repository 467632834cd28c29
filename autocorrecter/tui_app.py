# tui_app.py - Autocorrecter terminal UI
# -------------------------------------------------------
# Type a word, see the suggestions update on every keystroke:
#  - best autocomplete for the text as a prefix
#  - known words one edit away
#  - the merged list ranked by frequency
# TAB replaces the input with the top suggestion.
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from autocorrecter.core.suggestion_engine import SuggestionEngine


def format_suggestions(engine: SuggestionEngine, word: str, limit: int = 5,
                       ranked: Optional[List[str]] = None) -> str:
    """
    Markup for the suggestion panel: autocomplete, autocorrect and ranked list.
    ranked: precomputed get_best_suggestions(word), looked up when omitted
    """
    if not word:
        return "[dim]Start typing…[/dim]"

    autocomplete = engine.get_best_autocomplete(word)
    autocorrect = sorted(engine.get_best_autocorrect(word))
    if ranked is None:
        ranked = engine.get_best_suggestions(word)

    lines = [
        f"[b]Autocomplete:[/b] {escape(autocomplete) if autocomplete is not None else '[dim]none[/dim]'}",
        f"[b]Autocorrect:[/b] {escape(', '.join(autocorrect)) if autocorrect else '[dim]none[/dim]'}",
        "",
    ]
    if not ranked:
        lines.append("[dim]No suggestions[/dim]")
    for i, w in enumerate(ranked[:limit], 1):
        count = engine.store.lookup(w)
        lines.append(f"[b]{i}[/b] • [green]{escape(w)}[/green]  [dim]{count}[/dim]")
    return "\n".join(lines)


class SuggestionPanel(Static):
    """Right-hand panel listing the current suggestions."""


class TypingLatency(Static):
    """Bottom readout showing how long the last lookup took."""

    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


class AutocorrectApp(App):
    """Textual front-end over a SuggestionEngine (read-only)."""

    CSS = """
    #left { width: 1fr; }
    #right { width: 1fr; border: round $accent; padding: 0 1; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept top suggestion", priority=True),
        Binding("ctrl+l", "clear", "Clear"),
    ]

    suggestions: reactive[List[str]] = reactive(list)
    latency = reactive(0.0)

    def __init__(self, engine: SuggestionEngine, max_suggestions: int = 5):
        super().__init__()
        self.engine = engine
        self.max_suggestions = max_suggestions

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Type a word…", id="word_input")
            with Container(id="right"):
                yield SuggestionPanel(format_suggestions(self.engine, ""), id="predictions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
        yield Footer()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the lookups every time the text changes."""
        word = event.value.strip()
        start = time.perf_counter()
        ranked = self.engine.get_best_suggestions(word) if word else []
        panel = format_suggestions(self.engine, word, self.max_suggestions, ranked=ranked)
        self.suggestions = ranked
        self.latency = time.perf_counter() - start
        self.query_one(SuggestionPanel).update(panel)

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self) -> None:
        if self.suggestions:
            self.accept_word(self.suggestions[0])

    def action_clear(self) -> None:
        self.query_one(Input).value = ""

    def accept_word(self, word: str) -> None:
        self.query_one(Input).value = word
