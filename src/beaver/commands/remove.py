"""The ``remove`` command."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import NotFoundError
from ..parser import ParsedCommand
from ..todo import Todo
from .base import ExecutableCommand, ExecutionContext, find_active_todo, parse_todo_id

logger = logging.getLogger(__name__)


@dataclass
class RemoveCommand(ExecutableCommand):
    """Delete an active todo after confirmation."""
    id: int

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "RemoveCommand":
        return cls(id=parse_todo_id(parsed.value))

    def execute(self, context: ExecutionContext) -> Optional[Todo]:
        """Returns the removed todo, or None when the user declined."""
        todos = context.storage.read_all()
        todo = find_active_todo(todos, self.id)
        if todo is None:
            raise NotFoundError(self.id)

        if not context.ask(f"Are you sure you want to delete the todo with id {self.id}?"):
            logger.debug(f"Removal of todo {self.id} declined")
            return None

        # identity, not equality: a completed todo may carry an equal record
        remaining = [t for t in todos if t is not todo]
        context.storage.write_all(remaining)
        logger.info(f"Removed todo {self.id}")
        context.console.print(f"[success]The todo with id {self.id} has been removed![/success]")
        return todo
