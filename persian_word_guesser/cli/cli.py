"""
cli.py - command line host for the Persian word guesser
Features:
- Live guesses for whatever you type, shown in a numbered Rich table
- Pick a number to commit that candidate (it is promoted for next time)
- Verb roots, custom words and config edits from slash commands
- Selection history saved on exit and with /save

Subcommands:
  persian-guesser repl            interactive loop (default)
  persian-guesser guess <text>    print ranked guesses and exit
  persian-guesser build <src> <dst> [--format text|binary]
"""

import argparse
import shlex
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from persian_word_guesser.core.errors import GuesserError
from persian_word_guesser.core.loader import load_from_config
from persian_word_guesser.core.session import TypingSession
from persian_word_guesser.core.word_guesser import WordGuesser
from persian_word_guesser.core.wordlist import clean_words, read_word_list, write_word_list
from persian_word_guesser.utils.config_manager import Config
from persian_word_guesser.utils.logger_utils import Log

console = Console()

HELP = (
    "Type Persian text to see guesses, a number to pick one.\n"
    "Commands: /commit /add <word> /verb <past> <present> [colloquial]\n"
    "          /history /stats /config [key val] /save /help /quit"
)


def _configure_logging(cfg: Config) -> None:
    Log.configure(
        path=cfg.get("log_path") or "",
        level=cfg.get("log_level") or "INFO",
        echo=bool(cfg.get("log_echo")),
    )


def _open_guesser(cfg: Config) -> WordGuesser:
    result = load_from_config(cfg)
    if not result.ok:
        console.print(f"[yellow]Word list unavailable:[/yellow] {result.error}")
    console.print(
        f"[dim]{result.words_loaded} words loaded, "
        f"{result.selections_restored} selections restored.[/dim]"
    )
    return result.guesser


class CLI:
    """Interactive loop: composing text -> candidate table -> pick/commit -> promotion."""

    def __init__(self, cfg: Config, guesser: Optional[WordGuesser] = None):
        self.cfg = cfg
        self.guesser = guesser or _open_guesser(cfg)
        self.session = TypingSession(
            self.guesser, select_suggestion=bool(cfg.get("select_suggestion"))
        )
        self.running = True

    def run(self):
        console.rule("[bold magenta]Persian Word Guesser[/bold magenta]")
        console.print(f"[cyan]{HELP}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", show_default=False)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    def handle(self, line: str) -> None:
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
        elif line.isdigit() and self.session.composing:
            self._pick(int(line))
        else:
            self._show_guesses(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]Bad command:[/red] {e}")
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
        elif cmd == "/help":
            console.print(HELP)
        elif cmd == "/commit":
            text = self.session.commit()
            console.print(f"[green]Committed:[/green] {text}" if text else "[dim](nothing)[/dim]")
        elif cmd == "/add" and args:
            word = " ".join(args)
            self.guesser.add_word_to_dictionary(word)
            console.print(f"[cyan]Added:[/cyan] {word}")
        elif cmd == "/verb" and len(args) in (2, 3):
            n = self.guesser.add_verb_root(*args)
            console.print(f"[cyan]Added {n} verb forms.[/cyan]")
        elif cmd == "/history":
            self._show_history()
        elif cmd == "/stats":
            self._show_stats()
        elif cmd == "/config":
            if not args:
                self._show_config()
            elif len(args) == 2:
                if not self.cfg.set(args[0], args[1]):
                    console.print(f"[red]Cannot set[/red] {args[0]} = {args[1]}")
            else:
                console.print("usage: /config [key val]")
        elif cmd == "/save":
            self._save_state()
        else:
            console.print(f"[red]Unknown command:[/red] {line}")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def _show_guesses(self, text: str):
        t0 = time.perf_counter()
        strip = self.session.update(text)
        Log.metric("guess time", round((time.perf_counter() - t0) * 1000, 2), "ms")

        if len(strip.candidates) == 1:
            console.print("[dim](no guesses)[/dim]")
            return

        table = Table(title="Guesses", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Note", style="dim")
        for i, word in enumerate(strip.candidates):
            note = ""
            if i == 0:
                note = "typed (in dictionary)" if strip.in_word_list else "typed"
            elif word == strip.best_guess:
                note = "best"
            table.add_row(str(i), word, note)
        console.print(table)

    def _pick(self, index: int):
        if index >= len(self.session.strip.candidates):
            console.print(f"[red]No candidate {index}[/red]")
            return
        text = self.session.pick(index)
        console.print(f"[green]Picked:[/green] {text.strip()}")

    # DISPLAY -------------------------------------------------------------------------------
    def _show_history(self):
        history = self.guesser.history
        table = Table(title="Selected words (newest last)", box=box.MINIMAL)
        table.add_column("#", justify="right")
        table.add_column("Word")
        for i, word in enumerate(history[-20:], max(1, len(history) - 19)):
            table.add_row(str(i), word)
        console.print(table)

    def _show_stats(self):
        t = Table(title="Guesser", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self.guesser.stats().items():
            t.add_row(k, str(v))
        console.print(t)

    def _show_config(self):
        body = "\n".join(f"{k:22} = {v}" for k, v in self.cfg.data.items())
        console.print(Panel(body, title="Config", border_style="cyan"))

    # STATE/SAVING ----------------------------------------------------------
    def _save_state(self, quiet=False) -> bool:
        try:
            self.guesser.save_state()
        except GuesserError as e:
            Log.error(f"[CLI] save failed: {e}")
            console.print(f"[red]Save failed:[/red] {e}")
            return False
        if not quiet:
            console.print("[green]State saved.[/green]")
        return True

    def _exit(self):
        console.rule("[red]Exiting[/red]")
        self._save_state()
        self.running = False


# argparse entry point ------------------------------------------------------------------
def _cmd_repl(args, cfg: Config) -> int:
    CLI(cfg).run()
    return 0


def _cmd_guess(args, cfg: Config) -> int:
    guesser = load_from_config(cfg).guesser
    words = guesser.guess_ranked(" ".join(args.text))
    if not words:
        console.print("(no guesses)")
        return 1
    for word, rank in words:
        if args.ranks:
            console.print(f"{rank}\t{word}", markup=False)
        else:
            console.print(word, markup=False)
    return 0


def _cmd_build(args, cfg: Config) -> int:
    try:
        raw = read_word_list(args.src, args.src_format)
    except GuesserError as e:
        console.print(f"[red]Cannot read {args.src}:[/red] {e}")
        return 2
    words = clean_words(raw)
    n = write_word_list(words, args.dst, args.format)
    console.print(f"built {args.dst}: {n} of {len(raw)} entries kept")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="persian-guesser", description="Persian word guesser")
    parser.add_argument("--config", default="config.json", help="path to the JSON config")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("repl", help="interactive guessing loop (default)")

    p_guess = sub.add_parser("guess", help="print guesses for some text")
    p_guess.add_argument("text", nargs="+")
    p_guess.add_argument("--ranks", action="store_true", help="show ranks next to words")

    p_build = sub.add_parser("build", help="clean a raw word list and write a dictionary file")
    p_build.add_argument("src")
    p_build.add_argument("dst")
    p_build.add_argument("--src-format", choices=("text", "binary"), default=None)
    p_build.add_argument("--format", choices=("text", "binary"), default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    _configure_logging(cfg)

    handlers = {"guess": _cmd_guess, "build": _cmd_build}
    handler = handlers.get(args.command, _cmd_repl)
    return handler(args, cfg)


if __name__ == "__main__":
    sys.exit(main())
