"""
cli.py - developer console for the suggestion engine
Features:
- One-shot `suggest` for a piece of text
- Interactive loop showing the suggestion bar for every line typed
  (end a line with a space to ask for the next word)
- `/stream` toggle to show every candidate with its source before dedupe
- `stats` readout of the loaded tables
- Uses Rich for tables and formatting
"""

import argparse
import sys
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from keyboard_predict.autocomplete_service import AutocompleteService
from keyboard_predict.core.loader import ResourceLoader
from keyboard_predict.core.pipeline import Candidate
from keyboard_predict.utils.config_manager import ConfigError, load_config
from keyboard_predict.utils.logger_utils import configure_logging

# initialise console for rich output
console = Console()


class CLI:
    """Interactive console around an AutocompleteService."""

    def __init__(self, service: AutocompleteService, out: Optional[Console] = None):
        self.service = service
        self.console = out or console
        self.show_stream = False
        self.running = True

    def run(self) -> None:
        """
        Main loop:
        - prompt for text (trailing spaces are kept)
        - handle /commands
        - show suggestions for anything else
        """
        self.console.rule("[bold magenta]Keyboard Predict[/bold magenta]")
        self.console.print("[cyan]Type text; end with a space for next-word suggestions.[/cyan]")
        self.console.print("Commands: /quit /stats /stream\n")

        while self.running:
            try:
                # console.input keeps trailing spaces, Prompt.ask strips them
                text = self.console.input("[green]Text[/green]: ")
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            if text.startswith("/"):
                self.handle_command(text.strip())
                continue
            self.show_suggestions(text)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, cmd: str) -> None:
        if cmd == "/quit":
            self._exit()
            return
        if cmd == "/stats":
            self.show_stats()
            return
        if cmd == "/stream":
            self.show_stream = not self.show_stream
            state = "on" if self.show_stream else "off"
            self.console.print(f"[yellow]candidate stream {state}[/yellow]")
            return
        self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    # DISPLAY -------------------------------------------------------------------------------
    def show_suggestions(self, text: str) -> List[str]:
        suggestions = self.service.suggest(text)
        if self.show_stream:
            self._display_stream(self.service.candidate_stream(text))
        if not suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return suggestions

        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, word in enumerate(suggestions, 1):
            table.add_row(str(i), escape(word))
        self.console.print(table)
        return suggestions

    def _display_stream(self, stream: Sequence[Candidate]) -> None:
        table = Table(title="Candidate stream", box=box.MINIMAL)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Candidate")
        table.add_column("Source", style="magenta")
        for i, c in enumerate(stream, 1):
            table.add_row(str(i), escape(c.text), c.source)
        self.console.print(table)

    def show_stats(self) -> None:
        self.service.loader.ensure_loaded()
        stats = self.service.stats()
        lines = "\n".join(f"{k:12} {v}" for k, v in stats.items())
        self.console.print(Panel(lines, title="Engine", border_style="cyan"))

    def _exit(self) -> None:
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyboard-predict",
        description="Predictive-text suggestions from the command line.",
    )
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command")

    p_suggest = sub.add_parser("suggest", help="Print suggestions for TEXT")
    p_suggest.add_argument("text", nargs="+", help="Text typed so far")
    p_suggest.add_argument("--next", action="store_true",
                           help="Treat the text as finished (append a space)")

    sub.add_parser("interactive", help="Type lines and see suggestions")
    sub.add_parser("stats", help="Show loaded table sizes")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return 2

    configure_logging(args.log_level or cfg.log_level)
    cli = CLI(AutocompleteService(ResourceLoader(cfg)))

    if args.command == "suggest":
        text = " ".join(args.text) + (" " if args.next else "")
        cli.show_suggestions(text)
    elif args.command == "stats":
        cli.show_stats()
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
