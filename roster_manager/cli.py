from __future__ import annotations

"""Command-line entry point: a terminal command bar over the roster."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .commands import help_text
from .config import DATA_PATH, LOAD_SAMPLE_DATA, LOG_LEVEL, LOG_PATH
from .errors import RosterError, StorageError
from .logic import LogicManager
from .model import Roster, RosterModel
from .person import Person
from .sample_data import sample_persons
from .schema import STATUS_FORMAT
from .storage import JsonRosterStorage

LOGGER = logging.getLogger(__name__)

PROMPT = "> "


def setup_logging(log_path: Path, level_name: str) -> None:
    """Configure logging to console and a single append-only file.

    The console only shows warnings and errors so that command feedback stays
    readable; the file receives everything at the configured level.
    """

    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(max(level, logging.WARNING))
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)


def load_initial_roster(storage: JsonRosterStorage, use_sample_data: bool) -> Roster:
    """Read the stored roster, falling back to sample data or an empty roster."""

    try:
        roster = storage.read_roster()
    except StorageError as exc:
        LOGGER.warning("Data file %s could not be loaded, starting with an empty roster: %s", storage.path, exc)
        return Roster()
    if roster is None:
        if use_sample_data:
            LOGGER.info("Data file not found, starting with sample roster")
            return Roster(sample_persons())
        return Roster()
    LOGGER.info("Loaded %d persons from %s", len(roster), storage.path)
    return roster


def render_person_list(persons: Iterable[Person]) -> str:
    lines: List[str] = []
    for index, person in enumerate(persons, start=1):
        details = [person.student_id]
        for value in (person.email, person.major, f"Year {person.year}" if person.year else "", person.group):
            if value:
                details.append(value)
        line = f"{index}. {person.name} ({', '.join(details)})"
        if person.comment:
            line += f"\n   Comment: {person.comment}"
        lines.append(line)
    return "\n".join(lines) if lines else "(no students to display)"


def status_text(model: RosterModel) -> str:
    return STATUS_FORMAT % (len(model.filtered_persons), len(model.roster))


class CommandBar:
    """Runs commands one at a time and prints the list, feedback and status."""

    def __init__(self, logic: LogicManager, out: TextIO = sys.stdout) -> None:
        self.logic = logic
        self.out = out
        self._list_changed = False
        logic.model.subscribe(self._on_model_changed)

    def _on_model_changed(self, _model: RosterModel) -> None:
        self._list_changed = True

    def _print(self, text: str) -> None:
        print(text, file=self.out, flush=True)

    def show_list(self) -> None:
        self._print(render_person_list(self.logic.model.filtered_persons))
        self._print(status_text(self.logic.model))

    def run_command(self, command_text: str) -> bool:
        """Execute *command_text*; return False once the user asked to exit."""

        if not command_text.strip():
            return True
        try:
            result = self.logic.execute(command_text)
        except RosterError as exc:
            LOGGER.info("Command failed: %s", exc)
            if self._list_changed:
                self._list_changed = False
                self.show_list()
            self._print(str(exc))
            return True

        if self._list_changed:
            self._list_changed = False
            self.show_list()
        self._print(result.feedback)
        if result.show_help:
            self._print(help_text())
        return not result.exit

    def run_interactive(self, stream: Optional[TextIO] = None) -> None:
        stream = stream or sys.stdin
        self.show_list()
        while True:
            print(PROMPT, end="", file=self.out, flush=True)
            line = stream.readline()
            if not line:
                break
            if not self.run_command(line.rstrip("\n")):
                break


def parse_cli_arguments(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the roster manager."""

    parser = argparse.ArgumentParser(description="Student roster manager")
    parser.add_argument(
        "--data",
        default=str(DATA_PATH),
        help="Roster JSON file; defaults to data_path in config.yml",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        dest="commands",
        help="Run the given command and exit; may be repeated",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level; defaults to log_level in config.yml",
    )
    return parser.parse_args(argv)


def run_cli(argv: List[str] | None = None, out: Optional[TextIO] = None, log_path: Path = LOG_PATH) -> int:
    """Start the roster manager using command-line style arguments."""

    args = parse_cli_arguments(argv)
    setup_logging(log_path=log_path, level_name=args.log_level)
    LOGGER.info("Starting roster manager with data file %s", args.data)

    storage = JsonRosterStorage(Path(args.data))
    try:
        model = RosterModel(load_initial_roster(storage, LOAD_SAMPLE_DATA))
    except RosterError as exc:  # pragma: no cover - sample data is always valid
        LOGGER.error("Failed to initialise roster: %s", exc)
        return 1

    bar = CommandBar(LogicManager(model, storage), out=out or sys.stdout)
    if args.commands:
        for command_text in args.commands:
            if not bar.run_command(command_text):
                break
    else:
        bar.run_interactive()

    LOGGER.info("Roster manager stopped")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run_cli())
