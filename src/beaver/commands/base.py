"""Shared plumbing for Beaver commands."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

import click
from rich.console import Console

from ..config import ConfigModel
from ..errors import ParseError, ValidationError
from ..parser import ParsedCommand
from ..storage import Storage
from ..todo import Todo


MAX_TODO_ID = 2**32 - 1


def _ask(question: str) -> bool:
    return click.confirm(question, default=False)


@dataclass
class ExecutionContext:
    """Everything a command needs to run."""
    storage: Storage
    console: Console
    config: ConfigModel = field(default_factory=ConfigModel)
    confirm: Callable[[str], bool] = _ask

    def ask(self, question: str) -> bool:
        """Ask for confirmation unless the configuration disables prompts."""
        if not self.config.confirm_deletion:
            return True
        return self.confirm(question)


class ExecutableCommand(ABC):
    """A validated command ready to run against the store."""

    @classmethod
    @abstractmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "ExecutableCommand":
        """Validate a parsed command line into a command object."""

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Any:
        """Run the command."""


def parse_todo_id(value: str) -> int:
    """Parse the value of an id-taking command (an unsigned 32-bit number)."""
    value = value.strip()
    if not value:
        raise ValidationError("Value cannot be empty")
    if not value.isascii() or not value.isdigit():
        raise ParseError(value)
    todo_id = int(value)
    if todo_id > MAX_TODO_ID:
        raise ParseError(value)
    return todo_id


def find_active_todo(todos: List[Todo], todo_id: int) -> Optional[Todo]:
    for todo in todos:
        if todo.id == todo_id and not todo.completed:
            return todo
    return None


def find_todo(todos: List[Todo], todo_id: int) -> Optional[Todo]:
    """Find a todo by id, preferring the active one when an id was reused."""
    active = find_active_todo(todos, todo_id)
    if active is not None:
        return active
    for todo in todos:
        if todo.id == todo_id:
            return todo
    return None
