# tests/test_config.py
import json

import pytest

from phrase_trie.errors import ConfigError
from phrase_trie.utils.config_manager import DEFAULTS, Config


def test_in_memory_defaults(tmp_path):
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg.get("default_limit") == 10
    cfg.set("default_limit", 3)
    assert cfg["default_limit"] == 3


def test_missing_file_is_created_with_defaults(tmp_path):
    p = tmp_path / "conf" / "config.json"
    Config(str(p))
    assert json.loads(p.read_text(encoding="utf8")) == DEFAULTS


def test_set_coerces_and_persists(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    assert cfg.set("default_limit", "5") == 5
    assert cfg.set("show_timings", "yes") is True
    again = Config(str(p))
    assert again.get("default_limit") == 5
    assert again.get("show_timings") is True


@pytest.mark.parametrize(
    "key,val",
    [("nope", "1"), ("default_limit", "ten"), ("default_limit", "0"), ("color", "maybe")],
)
def test_bad_values_raise(key, val):
    with pytest.raises(ConfigError):
        Config().set(key, val)


def test_unreadable_file_keeps_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    cfg = Config(str(p))
    assert cfg.data == DEFAULTS


def test_unknown_keys_in_file_are_ignored(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"default_limit": 7, "theme": "dark"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("default_limit") == 7
    with pytest.raises(ConfigError):
        cfg.get("theme")


def test_show_renders_table(console):
    Config().show(console)
    out = console.file.getvalue()
    assert "default_limit" in out
    assert "10" in out


def test_bad_values_in_file_keep_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"default_limit": "ten", "color": "maybe", "show_timings": True}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("default_limit") == 10
    assert cfg.get("color") is True
    assert cfg.get("show_timings") is True


def test_non_positive_limit_in_file_keeps_default(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"default_limit": 0}), encoding="utf8")
    assert Config(str(p)).get("default_limit") == 10
