from __future__ import annotations

"""Glue between user input, the model and storage."""

import logging
from typing import Optional

from .commands import CommandResult
from .errors import StorageError
from .model import RosterModel
from .parsers import RosterParser
from .storage import JsonRosterStorage

LOGGER = logging.getLogger(__name__)


class LogicManager:
    """Parses and executes one command at a time, saving after each mutation.

    A failed save is raised to the caller but the in-memory change is kept.
    """

    def __init__(self, model: RosterModel, storage: Optional[JsonRosterStorage] = None) -> None:
        self.model = model
        self.storage = storage
        self.parser = RosterParser()

    def execute(self, command_text: str) -> CommandResult:
        LOGGER.info("----------------[USER COMMAND][%s]", command_text)
        command = self.parser.parse_command(command_text)
        result = command.execute(self.model)

        if command.MUTATES_ROSTER and self.storage is not None:
            try:
                self.storage.save_roster(self.model.roster)
            except StorageError as exc:
                LOGGER.error("Save failed after '%s': %s", command.COMMAND_WORD, exc)
                raise
        return result
