"""The ``fetch`` command."""

from dataclasses import dataclass

from ..errors import NotFoundError
from ..parser import ParsedCommand
from ..theme import print_todo_details
from ..todo import Todo
from .base import ExecutableCommand, ExecutionContext, find_todo, parse_todo_id


@dataclass
class FetchCommand(ExecutableCommand):
    """Show a single todo, completed or not."""
    id: int

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "FetchCommand":
        return cls(id=parse_todo_id(parsed.value))

    def execute(self, context: ExecutionContext) -> Todo:
        todo = find_todo(context.storage.read_all(), self.id)
        if todo is None:
            raise NotFoundError(self.id)
        print_todo_details(context.console, todo, context.config.date_format)
        return todo
