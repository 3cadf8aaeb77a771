"""Autocomplete CLI — query a seeded engine or drive it interactively."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from autocompleter.autocomplete.builder import AutocompleteBuilder
from autocompleter.autocomplete.service import AutocompleteService
from autocompleter.config.logging_config import setup_logging
from autocompleter.config.settings import AutocompleteSettings, get_settings

_BAR_WIDTH = 5
_ALL_WORDS_SHOWN = 30

HELP_TEXT = """\
Commands:
  /help     Show this help message
  /stats    Show engine statistics
  /history  Show recent selections
  /all      Show all words
  /add      Add a new word
  exit      Leave (also: quit)"""


def frequency_bar(frequency: int) -> str:
    """Five-cell bar, one filled cell per 3 frequency points."""
    filled = max(0, min(frequency // 3, _BAR_WIDTH))
    return "█" * filled + "░" * (_BAR_WIDTH - filled)


class InteractiveConsole:
    """Line-oriented front end: type a prefix, pick a suggestion, add words."""

    def __init__(
        self,
        service: AutocompleteService,
        ac_settings: Optional[AutocompleteSettings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._service = service
        self._ac = ac_settings or AutocompleteSettings()
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def run(self) -> None:
        self._print("Type a prefix to see suggestions, /help for commands, 'exit' to quit.")
        while True:
            line = self._prompt("> ")
            if line is None or line.lower() in ("exit", "quit"):
                break
            if line.startswith("/"):
                self._handle_command(line)
            elif line.strip():
                self._handle_prefix(line)
        self._print_stats()
        self._print("Goodbye!")

    # ---- input/output ----

    def _print(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _prompt(self, text: str) -> Optional[str]:
        """Show *text* and read one line; None at end of input."""
        self._out.write(text)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _read_frequency(self) -> Optional[int]:
        low, high = self._ac.min_seed_frequency, self._ac.max_seed_frequency
        raw = self._prompt(f"Frequency ({low}-{high}): ")
        try:
            value = int(raw or "")
        except ValueError:
            self._print("Invalid frequency. Word not added.")
            return None
        if not low <= value <= high:
            self._print(f"Frequency must be between {low} and {high}. Word not added.")
            return None
        return value

    # ---- actions ----

    def _handle_prefix(self, prefix: str) -> None:
        suggestions = self._service.get_suggestions(prefix)
        if not suggestions:
            self._print("No suggestions found.")
            answer = self._prompt(f"Add '{prefix}' as a new word? (y/n): ")
            if answer and answer.strip().lower() == "y":
                self._add(prefix)
            return

        self._print(f"Top suggestions for '{prefix}':")
        for i, entry in enumerate(suggestions, start=1):
            self._print(
                f"  {i}. {entry.term:<20} {frequency_bar(entry.frequency)} freq: {entry.frequency}"
            )

        choice = self._prompt(f"Select (1-{len(suggestions)}) or press Enter to skip: ")
        if not choice:
            return
        try:
            index = int(choice) - 1
        except ValueError:
            return
        if 0 <= index < len(suggestions):
            selected = suggestions[index].term
            self._service.select_suggestion(selected)
            self._print(f"Selected: {selected} (frequency increased)")

    def _add(self, term: str) -> None:
        frequency = self._read_frequency()
        if frequency is None:
            return
        self._service.add_word(term, frequency)
        self._print(f"Added '{term.lower()}'.")

    def _handle_command(self, command: str) -> None:
        command = command.strip().lower()
        if command == "/help":
            self._print(HELP_TEXT)
        elif command == "/stats":
            self._print_stats()
        elif command == "/history":
            history = self._service.get_search_history()
            if not history:
                self._print("No search history yet.")
            for i, term in enumerate(history, start=1):
                self._print(f"  {i}. {term}")
        elif command == "/all":
            self._print_all_words()
        elif command == "/add":
            term = self._prompt("New word: ")
            if term and term.strip():
                self._add(term)
            else:
                self._print("Empty word. Nothing added.")
        else:
            self._print("Unknown command. Type /help for available commands.")

    def _print_all_words(self) -> None:
        words = self._service.get_all_words()
        self._print(f"Total: {len(words)} words")
        for entry in words[:_ALL_WORDS_SHOWN]:
            self._print(f"  {entry.term:<20} freq: {entry.frequency}")
        if len(words) > _ALL_WORDS_SHOWN:
            self._print(f"  ... and {len(words) - _ALL_WORDS_SHOWN} more")

    def _print_stats(self) -> None:
        stats = self._service.stats()
        self._print(f"Total words: {stats.total_words}")
        self._print(f"Recent searches: {stats.recent_searches}")
        if stats.top_selected:
            self._print("Most selected:")
            for term, count in stats.top_selected:
                self._print(f"  - {term} (selected {count} times)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Autocomplete tools.")
    sub = parser.add_subparsers(dest="command")

    suggest = sub.add_parser("suggest", help="Show suggestions for a prefix.")
    suggest.add_argument("prefix", help="Prefix to complete.")

    words = sub.add_parser("words", help="List all words, highest frequency first.")
    words.add_argument("--limit", type=int, default=None, help="Max words to print.")

    sub.add_parser("repl", help="Interactive autocomplete session.")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir, level=logging.WARNING)

    if args.command is None:
        parser.print_help()
        return 1

    service = AutocompleteBuilder(settings.autocomplete).build()

    if args.command == "suggest":
        for entry in service.get_suggestions(args.prefix):
            print(f"  {entry.frequency:6d}  {entry.term}")

    elif args.command == "words":
        entries = service.get_all_words()
        if args.limit is not None:
            entries = entries[: args.limit]
        for entry in entries:
            print(f"  {entry.frequency:6d}  {entry.term}")

    elif args.command == "repl":
        InteractiveConsole(service, ac_settings=settings.autocomplete).run()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
