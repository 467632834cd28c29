"""
cli.py - command line front-end
Features:
- Loads a text corpus into a fixed-size word frequency table
- Prints the entry count and a dump of the table's first buckets
- Interactive loop showing autocomplete, autocorrect and ranked suggestions per word
- Slash commands for table dump, stats, config and export
- Uses Rich for tables and formatting
"""

import argparse
import json
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.prompt import IntPrompt, Prompt
from rich import box
from rich.markup import escape

from autocorrecter.context.ingest import load_corpus
from autocorrecter.core.suggestion_engine import SuggestionEngine
from autocorrecter.errors import InvalidCapacityError
from autocorrecter.utils.cache_utils import timed
from autocorrecter.utils.config_manager import Config
from autocorrecter.utils.logger_utils import Log
from autocorrecter.utils.metrics_tracker import Metrics

STOP_WORD = "stop"
HELP = "Commands: /table [n] /stats /config [key val] /export <file> /help /quit"


class CLI:
    """Interactive word loop over a SuggestionEngine."""

    def __init__(self, engine: SuggestionEngine, cfg: Config = None, log: Log = None,
                 console: Console = None, stream=None):
        """
        stream: optional text stream to read answers from instead of stdin
        """
        self.engine = engine
        self.cfg = cfg or Config()
        self.log = log or Log(echo=False)
        self.console = console or Console()
        self.stream = stream
        self.metrics = Metrics()
        self.running = True
        self._query = timed(self._run_queries)

    def run(self):
        """
        Main loop: prompt for a word, show results, until 'stop', /quit or EOF.
        """
        self.console.rule("[bold magenta]Autocorrecter[/bold magenta]")
        self.console.print(f"[cyan]{escape(HELP)}[/cyan]")

        while self.running:
            try:
                line = Prompt.ask(
                    f"\nEnter a word, or '{STOP_WORD}' to end",
                    console=self.console,
                    stream=self.stream,
                )
            except (EOFError, KeyboardInterrupt):
                break
            self.handle_line(line)
        self.console.rule("[red]Exiting[/red]")

    def handle_line(self, line: str) -> bool:
        """Process one input line; returns False once the loop should end."""
        if line == STOP_WORD:
            self.running = False
        elif line.startswith("/"):
            self._handle_command(line)
        elif line:
            self.show_word(line)
        return self.running

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def _run_queries(self, word: str):
        return (
            self.engine.get_best_autocomplete(word),
            self.engine.get_best_autocorrect(word),
            self.engine.get_best_suggestions(word),
        )

    def show_word(self, word: str):
        (autocomplete, autocorrect, suggestions), dt = self._query(word)
        self.metrics.record("suggest_time", dt)
        self.log.debug(f"query {word!r}: {len(suggestions)} suggestions in {dt * 1000:.2f} ms")

        limit = self.cfg.get("max_suggestions")
        shown = ", ".join(suggestions[:limit]) or "(none)"
        if len(suggestions) > limit:
            shown += f"  (+{len(suggestions) - limit} more)"

        table = Table(box=box.SIMPLE, show_header=False, show_edge=False)
        table.add_column("Kind", style="cyan")
        table.add_column("Result")
        table.add_row("Autocomplete", Text(autocomplete if autocomplete is not None else "(none)"))
        # autocorrect is a set, sort only for display
        table.add_row("Autocorrect", Text(", ".join(sorted(autocorrect)) or "(none)"))
        table.add_row("Best suggestions", Text(shown, style="bold"))
        self.console.print(table)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        parts = cmd.split()
        c = parts[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
        elif c == "/help":
            self.console.print(escape(HELP))
        elif c == "/table":
            self._show_table(parts[1:])
        elif c == "/stats":
            self._show_stats()
        elif c == "/config":
            self._config(parts[1:])
        elif c == "/export" and len(parts) > 1:
            self._export(parts[1])
        else:
            self.console.print(f"[red]Unknown command:[/red] {cmd}")

    def _show_table(self, args: List[str]):
        limit = self.cfg.get("render_limit")
        if args:
            if not (args[0].isascii() and args[0].isdecimal()) or int(args[0]) <= 0:
                self.console.print("[red]usage:[/red] " + escape("/table [n]"))
                return
            limit = int(args[0])
        # bucket dumps contain [..], print without markup
        self.console.print(Text(self.engine.store.render(limit)))

    def _stats(self):
        store = self.engine.store
        sizes = store.bucket_sizes()
        return {
            "entries": sum(sizes),
            "capacity": store.capacity,
            "load_factor": round(store.load_factor(), 3),
            "longest_chain": max(sizes),
            "empty_buckets": sizes.count(0),
            "queries": self.metrics.count("suggest_time"),
            "avg_query_ms": round(self.metrics.avg("suggest_time") * 1000, 3),
        }

    def _show_stats(self):
        t = Table(title="Table Stats", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self._stats().items():
            t.add_row(k, str(v))
        self.console.print(t)

    def _config(self, args: List[str]):
        if not args:
            self.console.print(Panel(self.cfg.show(), title="Config", border_style="cyan"))
        elif len(args) == 2:
            try:
                ok = self.cfg.set(args[0], args[1])
            except ValueError as e:
                self.log.warning(f"rejected /config {args[0]} {args[1]}: {e}")
                self.console.print(f"[red]bad value for {args[0]}:[/red] {escape(args[1])}")
                return
            if ok:
                self.console.print(f"[green]{args[0]} = {self.cfg.get(args[0])}[/green]")
            else:
                self.console.print(f"[red]No such option:[/red] {args[0]}")
        else:
            self.console.print("[red]usage:[/red] " + escape("/config [key val]"))

    def _export(self, path: str):
        data = {"config": self.cfg.data, "stats": self._stats(), "metrics": self.metrics.summary()}
        try:
            with open(path, "w", encoding="utf8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            self.log.error(f"export to {path} failed: {e}")
            self.console.print(f"[red]Export failed:[/red] {e}")
            return
        self.console.print(f"[green]exported ->[/green] {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autocorrecter",
        description="Word frequency autocomplete/autocorrect over a text corpus.",
    )
    parser.add_argument("corpus", nargs="?", help="text file to read (prompted if omitted)")
    parser.add_argument("--size", type=int, help="hash table slot count (prompted if omitted)")
    parser.add_argument("--config", help="JSON config file (created with defaults if missing)")
    parser.add_argument("--no-table", action="store_true", help="skip the table dump after loading")
    parser.add_argument("--tui", action="store_true", help="open the terminal UI instead of the prompt loop")
    parser.add_argument("--log-file", help="log file path (default logs/autocorrecter.log)")
    return parser


def main(argv: Optional[List[str]] = None, console: Console = None, stream=None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)
    log = Log(path=args.log_file, echo=False)

    corpus = args.corpus or Prompt.ask("Enter filename of text to read", console=console, stream=stream)
    size = args.size
    if size is None:
        size = IntPrompt.ask(
            "Enter size of hash table", console=console, stream=stream,
            default=cfg.get("table_size"),
        )

    try:
        with log.time_block(f"load {corpus}"):
            store = load_corpus(
                corpus, size,
                lowercase=cfg.get("lowercase"),
                strip_punctuation=cfg.get("strip_punctuation"),
            )
    except FileNotFoundError:
        log.error(f"bad filename: {corpus}")
        console.print(f"[red]Bad filename:[/red] {corpus}")
        return 1
    except InvalidCapacityError as e:
        log.error(str(e))
        console.print(f"[red]{e}[/red]")
        return 1
    log.info(f"loaded {corpus}: {len(store)} entries, {size} slots")

    console.print(f"Entries in table: {len(store)}")
    if cfg.get("show_table") and not args.no_table:
        console.print(Text(store.render(cfg.get("render_limit"))))

    engine = SuggestionEngine(store)
    if args.tui:
        from autocorrecter.tui_app import AutocorrectApp
        AutocorrectApp(engine, max_suggestions=cfg.get("max_suggestions")).run()
        return 0

    CLI(engine, cfg=cfg, log=log, console=console, stream=stream).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
