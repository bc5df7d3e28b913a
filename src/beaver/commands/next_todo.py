"""The ``next`` command."""

from dataclasses import dataclass
from typing import Optional

from ..parser import ParsedCommand
from ..theme import print_empty_list, print_todo_details
from ..todo import Todo
from .base import ExecutableCommand, ExecutionContext


@dataclass
class NextCommand(ExecutableCommand):
    """Show the most urgent active todo: highest priority, then oldest."""

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "NextCommand":
        return cls()

    def execute(self, context: ExecutionContext) -> Optional[Todo]:
        active = [t for t in context.storage.read_all() if not t.completed]
        if not active:
            print_empty_list(context.console)
            return None

        todo = min(active, key=lambda t: (t.priority, t.created_at_utc))
        print_todo_details(context.console, todo, context.config.date_format)
        return todo
