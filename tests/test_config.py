# tests/test_config.py
import json
import logging

import pytest

from autocorrecter.utils.config_manager import DEFAULTS, Config


def test_defaults_in_memory():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg.get("render_limit") == 100


def test_missing_file_is_created(tmp_path):
    path = tmp_path / "cfg.json"
    Config(str(path))
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"table_size": 31, "show_table": False}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("table_size") == 31
    assert cfg.get("show_table") is False
    assert cfg.get("max_suggestions") == 5


def test_malformed_file_keeps_defaults(tmp_path, caplog):
    path = tmp_path / "cfg.json"
    path.write_text("{not json", encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert "unreadable config" in caplog.text


def test_set_casts_and_saves(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    assert cfg.set("max_suggestions", "3")
    assert cfg.get("max_suggestions") == 3
    assert cfg.set("lowercase", "true")
    assert cfg.get("lowercase") is True
    assert cfg.set("show_table", "no")
    assert cfg.get("show_table") is False
    saved = json.loads(path.read_text(encoding="utf8"))
    assert saved["max_suggestions"] == 3


def test_set_unknown_key():
    cfg = Config()
    assert cfg.set("nope", "1") is False
    assert "nope" not in cfg.data


def test_file_values_are_cast_like_set(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"render_limit": "10", "max_suggestions": "5",
                                "lowercase": "yes"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("render_limit") == 10
    assert cfg.get("max_suggestions") == 5
    assert cfg.get("lowercase") is True


@pytest.mark.parametrize("value", [True, "abc", 0, -3, 2.5, None, [1]])
def test_bad_file_value_keeps_default(tmp_path, caplog, value):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"render_limit": value, "table_size": 31}), encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(path))
    assert cfg.get("render_limit") == DEFAULTS["render_limit"]
    assert cfg.get("table_size") == 31
    assert "keeping default for render_limit" in caplog.text


def test_bad_file_bool_keeps_default(tmp_path, caplog):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"show_table": 1}), encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(path))
    assert cfg.get("show_table") is True
    assert "keeping default for show_table" in caplog.text


@pytest.mark.parametrize("key,value", [
    ("max_suggestions", "-1"),
    ("render_limit", "0"),
    ("table_size", "x"),
    ("table_size", True),
])
def test_set_rejects_bad_values(tmp_path, key, value):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    with pytest.raises(ValueError):
        cfg.set(key, value)
    assert cfg.get(key) == DEFAULTS[key]
    assert json.loads(path.read_text(encoding="utf8"))[key] == DEFAULTS[key]
