# test_cli.py - CLI commands driven through CLI.handle / main
import json

import pytest

from phrase_trie.cli import cli as cli_mod
from phrase_trie.cli.cli import CLI, main
from phrase_trie.utils.config_manager import Config
from phrase_trie.utils.logger_utils import Log


@pytest.fixture
def cli(tmp_path, console):
    return CLI(cfg=Config(), console=console, log=Log(str(tmp_path / "cli.log")))


def out(cli):
    return cli.console.file.getvalue()


def test_add_and_find_word(cli):
    cli.handle("/add Hello")
    cli.handle("/find hello")
    cli.handle("/find nope")
    text = out(cli)
    assert "Added word: Hello" in text
    assert "hello: yes" in text
    assert "nope: no" in text


def test_word_autocomplete_with_limit(cli):
    for w in ("test", "testing", "text"):
        cli.handle(f"/add {w}")
    cli.handle("/words te 2")
    text = out(cli).split("Words: te", 1)[1]
    assert "test" in text and "testing" in text
    assert "text" not in text


def test_phrases_and_bare_input(cli):
    cli.handle('/phrase "hello world"')
    cli.handle("/phrase hello universe")
    cli.handle("/findp hello")
    cli.handle("hel")
    text = out(cli)
    assert "hello: no" in text
    assert "hello universe" in text and "hello world" in text
    assert cli.metrics.count("/phrases") == 1


def test_counts_and_deletes(cli):
    cli.handle("/add echo")
    cli.handle("/add echo")
    cli.handle("/count echo")
    cli.handle("/del echo")
    cli.handle("/del echo")
    cli.handle("/del echo")
    cli.handle("/phrase a b")
    cli.handle("/delp a")
    cli.handle("/delp a b")
    cli.handle("/countp a b")
    text = out(cli)
    assert "echo: 2" in text
    assert text.count("Deleted word: echo") == 2
    assert "Word not found: echo" in text
    assert "Phrase not found: a" in text
    assert "Deleted phrase: a b" in text
    assert "a b: 0" in text


def test_prefix_check(cli):
    cli.handle("/add cart")
    cli.handle("/prefix car")
    cli.handle("/prefix cat")
    text = out(cli)
    assert "car: yes" in text
    assert "cat: no" in text


def test_stats_demo_and_clear(cli):
    cli.handle("/demo")
    cli.handle("/stats")
    assert "Loaded 30 demo phrases." in out(cli)
    assert "totalPhrases" in out(cli)
    cli.handle("/clear")
    assert cli.engine.get_stats().total_nodes == 2


def test_usage_unknown_and_bad_quotes(cli):
    cli.handle("/add")
    cli.handle("/words")
    cli.handle("/bogus")
    cli.handle('/add "unterminated')
    text = out(cli)
    assert "usage: /add <word>" in text
    assert "usage: /words <p> [limit]" in text
    assert "Unknown command: /bogus" in text
    assert "Bad input:" in text


def test_config_command(cli):
    cli.handle("/config default_limit 2")
    assert cli.engine.default_limit == 2
    cli.handle("/config default_limit 0")
    cli.handle("/config nope 1")
    cli.handle("/config")
    text = out(cli)
    assert "default_limit = 2" in text
    assert "Error: default_limit must be a positive integer" in text
    assert "Error: No such option: nope" in text
    assert cli.engine.default_limit == 2


def test_show_timings_and_metrics(cli):
    cli.handle("/config show_timings true")
    cli.handle("/add x")
    cli.handle("/metrics")
    text = out(cli)
    assert " ms)" in text
    assert "Latency" in text and "/add" in text


def test_help_lists_commands(cli):
    cli.handle("/help")
    text = out(cli)
    for cmd, _ in cli_mod.HELP:
        assert cmd.split()[0] in text


def test_quit(cli):
    assert cli.handle("/add x") is True
    assert cli.handle("/quit") is False
    assert cli.running is False


def test_session_is_logged(cli, tmp_path):
    cli.handle("/add logged")
    log_text = (tmp_path / "cli.log").read_text(encoding="utf-8")
    assert "word added: 'logged'" in log_text
    assert "/add took:" in log_text


def test_run_loop_until_eof(cli, monkeypatch):
    lines = iter(["/add loop", "/find loop"])

    def fake_ask(*args, **kwargs):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(cli_mod.Prompt, "ask", fake_ask)
    cli.run()
    assert "loop: yes" in out(cli)


def test_main_exec(tmp_path, monkeypatch, console):
    monkeypatch.chdir(tmp_path)
    rc = main(["--demo", "--limit", "2", "-e", "/phrases собираю", "-e", "/stats"], console=console)
    assert rc == 0
    text = console.file.getvalue()
    assert "Phrases: собираю" in text
    assert "totalPhrases" in text


def test_main_config_file(tmp_path, monkeypatch, console):
    monkeypatch.chdir(tmp_path)
    conf = tmp_path / "c.json"
    assert main(["--config", str(conf), "-e", "/add hi", "-e", "/quit", "-e", "/add never"], console=console) == 0
    assert conf.exists()
    assert "never" not in console.file.getvalue()


def test_main_rejects_bad_limit(tmp_path, monkeypatch, console):
    monkeypatch.chdir(tmp_path)
    assert main(["--limit", "0", "-e", "/stats"], console=console) == 2
    assert "Error:" in console.file.getvalue()


def test_non_ascii_digit_is_part_of_the_prefix(cli):
    cli.handle("/add test")
    assert cli.handle("/words te ²") is True
    assert cli.running is True
    assert "no suggestions for 'te ²'" in out(cli)
    cli.handle("/words te ٣")
    assert "Words: te" in out(cli)


def test_main_bad_config_values_fall_back_to_defaults(tmp_path, monkeypatch, console):
    monkeypatch.chdir(tmp_path)
    conf = tmp_path / "c.json"
    conf.write_text(json.dumps({"default_limit": "ten", "show_timings": "maybe"}), encoding="utf8")
    assert main(["--config", str(conf), "-e", "/config"], console=console) == 0
    text = console.file.getvalue()
    assert "default_limit" in text and "10" in text


def test_main_saves_metrics_when_path_configured(tmp_path, monkeypatch, console):
    monkeypatch.chdir(tmp_path)
    conf = tmp_path / "c.json"
    stats = tmp_path / "m" / "metrics.json"
    conf.write_text(json.dumps({"metrics_path": str(stats)}), encoding="utf8")
    assert main(["--config", str(conf), "-e", "/add hi", "-e", "/find hi"], console=console) == 0
    saved = json.loads(stats.read_text(encoding="utf8"))
    assert saved["/add"]["count"] == 1
    assert saved["/find"]["count"] == 1


def test_config_changes_apply_to_running_session(cli, tmp_path):
    cli.handle("/config color false")
    assert cli.console.no_color is True
    assert cli.log.use_color is False
    moved = tmp_path / "moved.log"
    cli.handle(f"/config log_path {moved}")
    cli.handle("/add after")
    assert "word added: 'after'" in moved.read_text(encoding="utf-8")
    assert "word added: 'after'" not in (tmp_path / "cli.log").read_text(encoding="utf-8")
