# test_cli.py - prompt loop and entry point
import io
import json

import pytest
from rich.console import Console

from autocorrecter.cli import CLI, main
from autocorrecter.core.frequency_store import FrequencyStore
from autocorrecter.core.suggestion_engine import SuggestionEngine
from autocorrecter.utils.config_manager import Config
from autocorrecter.utils.logger_utils import Log


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def cli(tmp_path):
    store = FrequencyStore(8)
    for w, c in {"word": 5, "world": 3, "row": 2, "the": 10}.items():
        store.insert_or_update(w, c)
    return CLI(
        SuggestionEngine(store),
        cfg=Config(),
        log=Log(path=str(tmp_path / "cli.log"), echo=False),
        console=make_console(),
    )


def output(cli):
    return cli.console.file.getvalue()


def test_word_shows_all_three_results(cli):
    assert cli.handle_line("wrod")
    out = output(cli)
    assert "Autocomplete" in out and "(none)" in out
    assert "Autocorrect" in out
    assert "Best suggestions" in out
    assert "word" in out
    assert cli.metrics.count("suggest_time") == 1


def test_stop_ends_loop(cli):
    assert cli.handle_line("stop") is False
    assert cli.running is False


def test_quit_command(cli):
    assert cli.handle_line("/quit") is False


def test_table_command(cli):
    cli.handle_line("/table 3")
    out = output(cli)
    assert "Index 0 (" in out
    assert "Index 2 (" in out
    assert "Index 3 (" not in out


def test_stats_command(cli):
    cli.handle_line("wrod")
    cli.handle_line("/stats")
    out = output(cli)
    assert "capacity" in out
    assert "longest_chain" in out
    stats = cli._stats()
    assert stats["entries"] == 4
    assert stats["capacity"] == 8
    assert stats["queries"] == 1


def test_config_command(cli):
    cli.handle_line("/config max_suggestions 1")
    assert cli.cfg.get("max_suggestions") == 1
    cli.handle_line("/config bogus 1")
    assert "No such option" in output(cli)


def test_unknown_command(cli):
    cli.handle_line("/frobnicate")
    assert "Unknown command" in output(cli)


def test_export(cli, tmp_path):
    path = tmp_path / "export.json"
    cli.handle_line("wrod")
    cli.handle_line(f"/export {path}")
    data = json.loads(path.read_text(encoding="utf8"))
    assert data["stats"]["entries"] == 4
    assert data["metrics"]["suggest_time"]["count"] == 1
    assert data["config"]["max_suggestions"] == 5


def test_run_reads_until_stop(cli):
    cli.stream = io.StringIO("wrod\n/stats\nstop\nthe\n")
    cli.run()
    assert cli.metrics.count("suggest_time") == 1
    assert "Exiting" in output(cli)


@pytest.fixture
def corpus(tmp_path):
    p = tmp_path / "corpus.txt"
    p.write_text("the word the world\nthis word\n", encoding="utf8")
    return p


def test_main_loads_and_loops(tmp_path, corpus):
    console = make_console()
    code = main(
        [str(corpus), "--size", "5", "--log-file", str(tmp_path / "m.log")],
        console=console,
        stream=io.StringIO("wrod\nstop\n"),
    )
    out = console.file.getvalue()
    assert code == 0
    assert "Entries in table: 4" in out
    assert "Index 0 (" in out
    assert "word" in out


def test_main_prompts_for_missing_args(tmp_path, corpus):
    console = make_console()
    code = main(
        ["--no-table", "--log-file", str(tmp_path / "m.log")],
        console=console,
        stream=io.StringIO(f"{corpus}\n7\nstop\n"),
    )
    out = console.file.getvalue()
    assert code == 0
    assert "Enter filename of text to read" in out
    assert "Entries in table: 4" in out
    assert "Index 0 (" not in out


def test_main_bad_filename(tmp_path):
    console = make_console()
    code = main(
        [str(tmp_path / "missing.txt"), "--size", "5", "--log-file", str(tmp_path / "m.log")],
        console=console,
    )
    assert code == 1
    assert "Bad filename" in console.file.getvalue()


def test_main_bad_size(tmp_path, corpus):
    console = make_console()
    code = main(
        [str(corpus), "--size", "0", "--log-file", str(tmp_path / "m.log")],
        console=console,
    )
    assert code == 1
    assert "capacity must be a positive integer" in console.file.getvalue()


@pytest.mark.parametrize("arg", ["²", "0", "-2", "abc", "٣"])
def test_table_command_bad_count(cli, arg):
    cli.handle_line(f"/table {arg}")
    out = output(cli)
    assert "usage: /table [n]" in out
    assert "Index 0 (" not in out


def test_help_shows_bracketed_args(cli):
    cli.handle_line("/help")
    assert "/config [key val]" in output(cli)


def test_config_rejects_non_positive(cli, tmp_path):
    cli.handle_line("/config max_suggestions -1")
    assert "bad value for max_suggestions" in output(cli)
    assert cli.cfg.get("max_suggestions") == 5
    cli.handle_line("wrod")
    assert "word" in output(cli)
    logged = (tmp_path / "cli.log").read_text(encoding="utf8")
    assert "WARNING" in logged
    assert "rejected /config max_suggestions -1" in logged


def test_main_with_string_config_values(tmp_path, corpus):
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(json.dumps({"render_limit": "2", "max_suggestions": "5"}), encoding="utf8")
    console = make_console()
    code = main(
        [str(corpus), "--size", "5", "--config", str(cfg_path),
         "--log-file", str(tmp_path / "m.log")],
        console=console,
        stream=io.StringIO("wrod\nstop\n"),
    )
    out = console.file.getvalue()
    assert code == 0
    assert "Index 1 (" in out
    assert "Index 2 (" not in out
    assert "Best suggestions" in out
