# tests/test_cli.py - shell commands against a recorded Rich console

import pytest
from rich.console import Console

from trie_autocompleter.cli.cli import CLI, build_trie
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import Log


@pytest.fixture
def shell(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    console = Console(record=True, width=120, color_system=None)
    log = Log(str(tmp_path / "logs" / "cli.log"), echo=False)
    return CLI(cfg=cfg, console=console, log=log)


def output(shell):
    return shell.console.export_text(clear=False)


def test_build_trie_uses_config(tmp_path):
    cfg = Config(str(tmp_path / "c.json"))
    cfg.set("max_results", "2")
    cfg.set("label_case", "path")
    trie = build_trie(cfg)
    assert trie.collector.max_results == 2
    assert trie.collector.case_mode == "path"


def test_insert_and_prefix(shell):
    shell.handle("/insert cat car card")
    shell.handle("car")
    text = output(shell)
    assert "Inserted: card" in text
    assert "card" in text
    assert "2 shown" in text
    assert shell.trie.word_count == 3


def test_search_and_delete(shell):
    shell.handle("/insert apple")
    shell.handle("/search APPLE")
    shell.handle("/delete apple")
    shell.handle("/search apple")
    text = output(shell)
    assert "Found: APPLE" in text
    assert "Deleted: apple" in text
    assert "Not found: apple" in text


def test_invalid_word_reported_not_raised(shell, tmp_path):
    shell.handle("/insert ab3")
    assert "Invalid character '3'" in output(shell)
    assert shell.running
    assert "Invalid character" in (tmp_path / "logs" / "cli.log").read_text(encoding="utf-8")


def test_truncated_footer(shell):
    shell.trie = build_trie(shell.cfg)
    shell.trie.collector.max_results = 2
    shell.handle("/insert aa ab ac")
    shell.handle("/all")
    assert "truncated at 2" in output(shell)


def test_load_file(shell, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("alpha\nbeta\n\nbad word\nAlpha\n", encoding="utf-8")
    shell.handle(f"/load {words}")
    assert shell.trie.word_count == 2
    assert "Loaded 2 new words" in output(shell)
    assert "Skipped 1 invalid lines" in output(shell)


def test_load_missing_file(shell, tmp_path):
    shell.handle(f"/load {tmp_path / 'nope.txt'}")
    assert "Cannot read" in output(shell)


def test_compact_and_stats(shell):
    shell.handle("/insert dog")
    shell.handle("/delete dog")
    shell.handle("/compact")
    shell.handle("/stats")
    text = output(shell)
    assert "Released 3 nodes" in text
    assert "Live words" in text


def test_config_command(shell):
    shell.handle("/config max_results 5")
    shell.handle("/config nope 1")
    text = output(shell)
    assert shell.cfg["max_results"] == 5
    assert "No such option" in text


def test_unknown_and_quit(shell):
    shell.handle("/frobnicate")
    assert "Unknown command" in output(shell)
    shell.handle("/quit")
    assert shell.running is False
    assert shell.trie.closed


def test_unbalanced_quote_reported(shell):
    shell.handle('/insert "abc')
    assert "Bad input" in output(shell)
    assert shell.running
    assert shell.trie.word_count == 0


def test_config_command_rejects_bad_value(shell):
    shell.handle("/config label_case upper")
    shell.handle("/config max_results 0")
    assert "label_case must be one of" in output(shell)
    assert shell.cfg["label_case"] == "label"
    assert shell.cfg["max_results"] == 100
    build_trie(Config(shell.cfg.path))
