"""Replay command: rewind replay <step>... [--initial VALUE]

Runs a sequence of textual steps through a HistoryStore and prints the
resulting history. Steps:

  set:VALUE  replace:VALUE  reset:VALUE  undo  redo
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from rewind.config import load_settings
from rewind.errors import CommandParseError, RewindError
from rewind.history import EMPTY, Command, History, Redo, Replace, Reset, Set, Undo
from rewind.store import HistoryStore


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_VALUE_STEPS = {"set": Set, "replace": Replace, "reset": Reset}
_BARE_STEPS = {"undo": Undo, "redo": Redo}


def parse_step(token: str) -> Command:
    """Turn 'set:B' / 'undo' into a command."""
    name, sep, value = token.partition(":")
    name = name.strip().lower()

    if name in _BARE_STEPS:
        if sep:
            raise CommandParseError(f"'{name}' takes no value: {token!r}")
        return _BARE_STEPS[name]()

    if name in _VALUE_STEPS:
        if not sep:
            raise CommandParseError(f"'{name}' needs a value, e.g. {name}:X")
        return _VALUE_STEPS[name](value)

    raise CommandParseError(f"Unknown step: {token!r}")


def format_timeline(history: History) -> str:
    """Render the timeline with the present in brackets: A B [C] D"""
    present = "[-]" if history.present is EMPTY else f"[{history.present}]"
    parts = [str(v) for v in history.past] + [present] + [str(v) for v in history.future]
    return " ".join(parts)


def _print_history(history: History) -> None:
    present = "-" if history.present is EMPTY else repr(history.present)
    print(f"past:     {list(history.past)!r}")
    print(f"present:  {present}")
    print(f"future:   {list(history.future)!r}")
    print(f"can undo: {'yes' if history.can_undo else 'no'}")
    print(f"can redo: {'yes' if history.can_redo else 'no'}")


def register(app: typer.Typer) -> None:
    @app.command()
    def replay(
        steps: List[str] = typer.Argument(
            None, help="Steps: set:V, replace:V, reset:V, undo, redo"
        ),
        initial: Optional[str] = typer.Option(
            None, "--initial", "-i", help="Initial present value"
        ),
        config: Optional[Path] = typer.Option(
            None, "--config", "-c", help="Path to a rewind YAML config"
        ),
        trace: bool = typer.Option(False, "--trace", help="Print the timeline after every step"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    ) -> None:
        """Replay steps against a fresh history and print the result."""
        try:
            settings = load_settings(config)
            commands = [parse_step(token) for token in steps or []]
        except RewindError as e:
            print(f"Error: {e}")
            raise typer.Exit(1)

        logging.basicConfig(
            level=logging.DEBUG if verbose else settings.log_level_number,
            format=LOG_FORMAT,
        )

        store = HistoryStore.from_settings(
            settings, EMPTY if initial is None else initial
        )

        if trace:
            print(f"{'(initial)':<16} {format_timeline(store.history)}")

        for token, command in zip(steps or [], commands):
            store.dispatch(command)
            if trace:
                print(f"{token:<16} {format_timeline(store.history)}")

        if trace:
            print()
        _print_history(store.history)
