# tests/test_utils.py - config, log file and metrics helpers

import json

import pytest

from trie_autocompleter.utils.config_manager import DEFAULTS, Config
from trie_autocompleter.utils.logger_utils import Log
from trie_autocompleter.utils.metrics_tracker import Metrics


def test_config_creates_file_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert path.exists()
    assert cfg["max_results"] == 100
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_config_loads_overrides_and_ignores_unknown(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_results": 7, "bogus": 1}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg["max_results"] == 7
    assert "bogus" not in cfg.data


def test_config_corrupt_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_config_set_casts_and_persists(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_word_length", "40")
    assert cfg["max_word_length"] == 40
    assert Config(str(path))["max_word_length"] == 40
    with pytest.raises(KeyError):
        cfg.set("missing", 1)
    with pytest.raises(ValueError):
        cfg.set("max_results", "many")


def test_log_writes_file_and_echoes(tmp_path, capsys):
    log = Log(str(tmp_path / "nested" / "app.log"), use_color=False)
    log.info("hello")
    log.metric("prefix_search", 0.25, "ms")
    text = (tmp_path / "nested" / "app.log").read_text(encoding="utf-8")
    assert "INFO    | hello" in text
    assert "prefix_search: 0.25ms" in text
    assert "hello" in capsys.readouterr().out


def test_time_block_records_elapsed(tmp_path):
    log = Log(str(tmp_path / "t.log"), echo=False)
    with log.time_block("work") as timer:
        sum(range(1000))
    assert timer.elapsed >= 0
    assert "work done" in (tmp_path / "t.log").read_text(encoding="utf-8")


def test_metrics_average_and_persist(tmp_path):
    path = tmp_path / "metrics.json"
    m = Metrics(str(path))
    m.record("prefix_time", 1.0)
    m.record("prefix_time", 3.0)
    assert m.avg("prefix_time") == 2.0
    assert m.avg("unknown") == 0.0
    m.save()
    again = Metrics(str(path))
    assert again.summary() == {"prefix_time": (2, 2.0)}


def test_config_set_rejects_out_of_range_and_keeps_file(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    with pytest.raises(ValueError):
        cfg.set("label_case", "upper")
    with pytest.raises(ValueError):
        cfg.set("max_results", "0")
    with pytest.raises(ValueError):
        cfg.set("log_level", "loud")
    cfg.set("log_level", "debug")
    assert cfg["log_level"] == "DEBUG"
    on_disk = json.loads(path.read_text(encoding="utf8"))
    assert on_disk["label_case"] == "label"
    assert on_disk["max_results"] == 100


def test_config_bad_loaded_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"label_case": "upper", "max_results": 0, "max_word_length": 12}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg["label_case"] == "label"
    assert cfg["max_results"] == 100
    assert cfg["max_word_length"] == 12
