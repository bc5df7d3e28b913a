"""The ``purge`` command."""

import logging
from dataclasses import dataclass

from ..parser import ParsedCommand
from .base import ExecutableCommand, ExecutionContext

logger = logging.getLogger(__name__)


@dataclass
class PurgeCommand(ExecutableCommand):
    """Delete every completed todo after confirmation."""

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "PurgeCommand":
        return cls()

    def execute(self, context: ExecutionContext) -> int:
        """Returns the number of todos removed (0 when declined)."""
        todos = context.storage.read_all()
        active = [t for t in todos if not t.completed]
        to_remove = len(todos) - len(active)

        if not context.ask(f"Are you sure you want to delete {to_remove} completed todos?"):
            logger.debug("Purge declined")
            return 0

        context.storage.write_all(active)
        logger.info(f"Purged {to_remove} completed todo(s)")
        context.console.print(
            f"[success]The purge has removed {to_remove} completed todo(s)![/success]"
        )
        return to_remove
