"""The ``edit`` command."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import NotFoundError, ValidationError
from ..parser import ParsedCommand
from ..todo import Todo, Priority
from .base import ExecutableCommand, ExecutionContext, find_active_todo, parse_todo_id

logger = logging.getLogger(__name__)


@dataclass
class EditCommand(ExecutableCommand):
    """Change the title and/or priority of an active todo."""
    id: int
    title: Optional[str] = None
    priority: Optional[Priority] = None

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "EditCommand":
        todo_id = parse_todo_id(parsed.value)

        priority = None
        raw_priority = parsed.get_option("priority")
        if raw_priority is not None:
            priority = Priority.parse(raw_priority)

        title = parsed.get_option("title")
        if title is not None and not title.strip():
            raise ValidationError("The title cannot be empty")

        if title is None and priority is None:
            raise ValidationError("At least one option must be supplied")
        return cls(id=todo_id, title=title, priority=priority)

    def execute(self, context: ExecutionContext) -> Todo:
        todos = context.storage.read_all()
        todo = find_active_todo(todos, self.id)
        if todo is None:
            raise NotFoundError(self.id)

        if self.title is not None:
            todo.set_title(self.title)
        if self.priority is not None:
            todo.set_priority(self.priority)

        context.storage.write_all(todos)
        logger.info(f"Updated todo {self.id}")
        context.console.print(f"[success]The todo {self.id} has been updated![/success]")
        return todo
