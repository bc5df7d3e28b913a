"""The ``done`` command."""

import logging
from dataclasses import dataclass

from rich.markup import escape

from ..errors import AlreadyCompletedError, NotFoundError
from ..parser import ParsedCommand
from ..todo import Todo
from .base import ExecutableCommand, ExecutionContext, find_active_todo, parse_todo_id

logger = logging.getLogger(__name__)


@dataclass
class DoneCommand(ExecutableCommand):
    """Mark an active todo as completed."""
    id: int

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "DoneCommand":
        return cls(id=parse_todo_id(parsed.value))

    def execute(self, context: ExecutionContext) -> Todo:
        todos = context.storage.read_all()

        todo = find_active_todo(todos, self.id)
        if todo is None:
            if any(t.id == self.id for t in todos):
                raise AlreadyCompletedError(self.id)
            raise NotFoundError(self.id)

        todo.set_completed(True)
        context.storage.write_all(todos)
        logger.info(f"Completed todo {self.id}")
        context.console.print(
            f"[success]The todo {escape(todo.title)} has been completed![/success]"
        )
        return todo
