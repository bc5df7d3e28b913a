"""The ``add`` command."""

from dataclasses import dataclass
from typing import Optional

from rich.markup import escape

from ..errors import ValidationError
from ..parser import ParsedCommand
from ..todo import Todo, Priority
from ..utils.datetime import now_utc
from .base import ExecutableCommand, ExecutionContext


@dataclass
class AddCommand(ExecutableCommand):
    """Create a new todo.

    ``priority`` stays None when the option was not given, in which case the
    configured default priority is used.
    """
    title: str
    priority: Optional[Priority] = None

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "AddCommand":
        title = parsed.value.strip()
        if not title:
            raise ValidationError("Title is required")

        priority = None
        raw_priority = parsed.get_option("priority")
        if raw_priority is not None:
            priority = Priority.parse(raw_priority)
        return cls(title=title, priority=priority)

    def execute(self, context: ExecutionContext) -> Todo:
        priority = self.priority or context.config.default_priority
        todo = Todo(id=0, title=self.title, priority=priority, created_at_utc=now_utc())
        todo = context.storage.add_todo(todo)
        context.console.print(
            f"[success]The todo {escape(todo.title)} has been added with id {todo.id}![/success]"
        )
        return todo
