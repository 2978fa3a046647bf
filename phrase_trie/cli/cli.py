"""
cli.py - command line interface for the trie engine
Features:
- Insert / look up / delete words and phrases
- Word and phrase autocomplete with a per-call limit
- Stats, demo data, live config edits and per-command latency
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
import shlex
from typing import Callable, Dict, List, Optional, Sequence

# ui styling with Rich
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from phrase_trie import __version__
from phrase_trie.core.engine import TrieEngine
from phrase_trie.errors import TrieError
from phrase_trie.utils.config_manager import Config
from phrase_trie.utils.logger_utils import Log
from phrase_trie.utils.metrics_tracker import Metrics

HELP = [
    ("/add <word>", "insert a word"),
    ("/phrase <text>", "insert a phrase"),
    ("/find <word>", "exact word lookup"),
    ("/findp <text>", "exact phrase lookup (complete phrases only)"),
    ("/prefix <p>", "is any word stored under this prefix?"),
    ("/words <p> [limit]", "word autocomplete"),
    ("/phrases <p> [limit]", "phrase autocomplete"),
    ("/count <word>", "occurrences of a word"),
    ("/countp <text>", "occurrences of a phrase"),
    ("/del <word>", "remove one occurrence of a word"),
    ("/delp <text>", "remove one occurrence of a phrase"),
    ("/stats", "node / entry / occurrence totals"),
    ("/clear", "empty both tries"),
    ("/demo", "load the demo phrases"),
    ("/config [key val]", "show or change settings"),
    ("/metrics", "average latency per command"),
    ("/quit", "leave"),
]


class CLI:
    """Command-line interface: reads commands, drives a TrieEngine, prints results."""

    def __init__(
        self,
        engine: Optional[TrieEngine] = None,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        log: Optional[Log] = None,
        metrics: Optional[Metrics] = None,
    ):
        self.cfg = cfg or Config()
        self.engine = engine or TrieEngine.from_config(self.cfg)
        self.console = console or Console(no_color=not self.cfg.get("color"))
        self.log = log or Log(self.cfg.get("log_path"), use_color=self.cfg.get("color"))
        self.metrics = metrics or Metrics(self.cfg.get("metrics_path") or None)
        self.running = True

        self.commands: Dict[str, Callable[[List[str]], None]] = {
            "/add": self._add_word,
            "/phrase": self._add_phrase,
            "/find": self._find_word,
            "/findp": self._find_phrase,
            "/prefix": self._check_prefix,
            "/words": self._complete_words,
            "/phrases": self._complete_phrases,
            "/count": self._count_word,
            "/countp": self._count_phrase,
            "/del": self._delete_word,
            "/delp": self._delete_phrase,
            "/stats": self._show_stats,
            "/clear": self._clear,
            "/demo": self._load_demo,
            "/config": self._config,
            "/metrics": self._show_metrics,
            "/help": self._show_help,
        }

        if self.cfg.get("load_demo"):
            self._load_demo([])

    def run(self):
        """
        Main interactive loop:
        - /commands drive the engine
        - anything else is treated as a phrase-autocomplete query
        """
        self.console.rule(f"[bold magenta]phrase_trie {__version__}[/bold magenta]")
        self.console.print("[cyan]Type a prefix for phrase suggestions, or /help.[/cyan]\n")
        self.log.info("session start")

        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break
            self.handle(line)
        self.close()

    def close(self) -> None:
        """Persist command latency (when metrics_path is set) and log the end of the session."""
        self.metrics.save()
        self.log.info("session end")

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Run one line of input. Returns False once the user asked to quit."""
        line = (line or "").strip()
        if not line:
            return self.running

        if not line.startswith("/"):
            self._timed("/phrases", self._complete_phrases, [line])
            return self.running

        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad input:[/red] {escape(str(e))}")
            return self.running

        cmd, args = parts[0].lower(), parts[1:]
        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
            return False

        fn = self.commands.get(cmd)
        if fn is None:
            self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}  (try /help)")
            return self.running

        self._timed(cmd, fn, args)
        return self.running

    def _timed(self, cmd: str, fn: Callable[[List[str]], None], args: List[str]) -> None:
        try:
            with self.log.time_block(cmd) as t:
                fn(args)
        except TrieError as e:
            self.log.warning(f"{cmd} rejected: {e}")
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")
            return
        self.metrics.record(cmd, t.elapsed_ms)
        if self.cfg.get("show_timings"):
            self.console.print(f"[dim]({t.elapsed_ms:.3f} ms)[/dim]")

    def _usage(self, usage: str) -> None:
        self.console.print(f"[yellow]usage:[/yellow] {escape(usage)}")

    def _need(self, args: List[str], usage: str) -> Optional[str]:
        text = " ".join(args).strip()
        if not text:
            self._usage(usage)
            return None
        return text

    @staticmethod
    def _split_limit(args: List[str]):
        """'/words te 5' -> ('te', 5); a lone numeric arg is the prefix itself."""
        if len(args) >= 2 and args[-1].isdecimal():
            return " ".join(args[:-1]), int(args[-1])
        return " ".join(args), None

    # MUTATIONS -------------------------------------------------------------------
    def _add_word(self, args: List[str]):
        word = self._need(args, "/add <word>")
        if word is None:
            return
        self.engine.insert_word(word)
        n = self.engine.word_count(word)
        self.console.print(f"[green]Added word:[/green] {escape(word)}  [dim](count {n})[/dim]")
        self.log.info(f"word added: {word!r}")

    def _add_phrase(self, args: List[str]):
        phrase = self._need(args, "/phrase <text>")
        if phrase is None:
            return
        self.engine.insert_phrase(phrase)
        n = self.engine.phrase_count(phrase)
        self.console.print(f"[green]Added phrase:[/green] {escape(phrase)}  [dim](count {n})[/dim]")
        self.log.info(f"phrase added: {phrase!r}")

    def _delete_word(self, args: List[str]):
        word = self._need(args, "/del <word>")
        if word is None:
            return
        if self.engine.delete_word(word):
            self.console.print(f"[green]Deleted word:[/green] {escape(word)}")
            self.log.info(f"word deleted: {word!r}")
        else:
            self.console.print(f"[yellow]Word not found:[/yellow] {escape(word)}")

    def _delete_phrase(self, args: List[str]):
        phrase = self._need(args, "/delp <text>")
        if phrase is None:
            return
        if self.engine.delete_phrase(phrase):
            self.console.print(f"[green]Deleted phrase:[/green] {escape(phrase)}")
            self.log.info(f"phrase deleted: {phrase!r}")
        else:
            self.console.print(f"[yellow]Phrase not found:[/yellow] {escape(phrase)}")

    def _clear(self, args: List[str]):
        self.engine.clear()
        self.console.print("[green]Both tries cleared.[/green]")
        self.log.info("tries cleared")

    def _load_demo(self, args: List[str]):
        n = self.engine.load_demo_phrases()
        self.console.print(f"[green]Loaded {n} demo phrases.[/green]")
        self.log.info(f"demo phrases loaded: {n}")

    # LOOKUPS ---------------------------------------------------------------------
    def _show_exists(self, text: str, exists: bool):
        mark = "[green]yes[/green]" if exists else "[red]no[/red]"
        self.console.print(f"{escape(text)}: {mark}")

    def _find_word(self, args: List[str]):
        word = self._need(args, "/find <word>")
        if word is not None:
            self._show_exists(word, self.engine.search(word))

    def _find_phrase(self, args: List[str]):
        phrase = self._need(args, "/findp <text>")
        if phrase is not None:
            self._show_exists(phrase, self.engine.search_phrase(phrase))

    def _check_prefix(self, args: List[str]):
        prefix = self._need(args, "/prefix <p>")
        if prefix is not None:
            self._show_exists(prefix, self.engine.starts_with(prefix))

    def _count_word(self, args: List[str]):
        word = self._need(args, "/count <word>")
        if word is not None:
            self.console.print(f"{escape(word)}: {self.engine.word_count(word)}")

    def _count_phrase(self, args: List[str]):
        phrase = self._need(args, "/countp <text>")
        if phrase is not None:
            self.console.print(f"{escape(phrase)}: {self.engine.phrase_count(phrase)}")

    def _complete_words(self, args: List[str]):
        prefix, limit = self._split_limit(args)
        if not prefix.strip():
            self._usage("/words <p> [limit]")
            return
        self._display_suggestions("Words", prefix, self.engine.words_with_prefix(prefix, limit))

    def _complete_phrases(self, args: List[str]):
        prefix, limit = self._split_limit(args)
        if not prefix.strip():
            self._usage("/phrases <p> [limit]")
            return
        self._display_suggestions("Phrases", prefix, self.engine.phrases_with_prefix(prefix, limit))

    # DISPLAY -------------------------------------------------------------------------------
    def _display_suggestions(self, title: str, prefix: str, suggestions: Sequence[str]):
        if not suggestions:
            self.console.print(f"[dim](no suggestions for {escape(prefix)!r})[/dim]")
            return
        table = Table(title=f"{title}: {escape(prefix)}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Suggestion", style="bold")
        for i, s in enumerate(suggestions, 1):
            table.add_row(str(i), escape(s))
        self.console.print(table)

    def _show_stats(self, args: List[str]):
        table = Table(title="Trie stats", box=box.SIMPLE, show_edge=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="magenta")
        for k, v in self.engine.get_stats().to_dict().items():
            table.add_row(k, str(v))
        self.console.print(table)

    def _show_metrics(self, args: List[str]):
        snap = self.metrics.snapshot()
        if not snap:
            self.console.print("[dim](no metrics yet)[/dim]")
            return
        table = Table(title="Latency", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Calls", justify="right")
        table.add_column("Avg ms", justify="right", style="magenta")
        for k, v in snap.items():
            table.add_row(k, str(v["count"]), f"{v['avg']:.3f}")
        self.console.print(table)

    def _show_help(self, args: List[str]):
        table = Table(box=box.SIMPLE, show_header=False, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("What it does")
        for cmd, desc in HELP:
            table.add_row(escape(cmd), desc)
        self.console.print(table)

    def _config(self, args: List[str]):
        if not args:
            self.cfg.show(self.console)
            return
        if len(args) != 2:
            self._usage("/config [key val]")
            return
        key, val = args
        value = self.cfg.set(key, val)
        self._apply_setting(key, value)
        self.console.print(f"[green]{escape(key)}[/green] = {escape(str(value))}")
        self.log.info(f"config {key} -> {value!r}")

    def _apply_setting(self, key: str, value) -> None:
        # carry a changed setting into the running session
        if key == "default_limit":
            self.engine.default_limit = value
        elif key == "color":
            self.console.no_color = not value
            self.log.use_color = value
        elif key == "log_path":
            self.log.path = value
        elif key == "metrics_path":
            self.metrics.path = value or None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="phrase_trie", description="Word and phrase autocomplete on a dual trie."
    )
    ap.add_argument("--config", help="JSON config file (created if missing)")
    ap.add_argument("--demo", action="store_true", help="load the demo phrases on start")
    ap.add_argument("--limit", type=int, help="default autocomplete size")
    ap.add_argument("--no-color", action="store_true", help="plain output")
    ap.add_argument(
        "-e",
        "--exec",
        action="append",
        default=[],
        metavar="CMD",
        help="run a command and exit (repeatable), e.g. -e '/words te'",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = Config(args.config)
        if args.limit is not None:
            cfg.data["default_limit"] = args.limit
        if args.no_color:
            cfg.data["color"] = False
        if args.demo:
            cfg.data["load_demo"] = True
        cli = CLI(cfg=cfg, console=console)
    except TrieError as e:
        (console or Console()).print(f"[red]Error:[/red] {escape(str(e))}")
        return 2

    if args.exec:
        for line in args.exec:
            if not cli.handle(line):
                break
        cli.close()
        return 0

    cli.run()
    return 0
