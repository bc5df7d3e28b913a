"""Command objects for Beaver, one per subcommand."""

from typing import Dict, Optional, Type

from ..parser import CommandKind, ParsedCommand
from .base import ExecutableCommand, ExecutionContext
from .add import AddCommand
from .done import DoneCommand
from .edit import EditCommand
from .fetch import FetchCommand
from .listing import ListCommand, SortOrder
from .next_todo import NextCommand
from .purge import PurgeCommand
from .remove import RemoveCommand

COMMANDS: Dict[CommandKind, Type[ExecutableCommand]] = {
    CommandKind.ADD: AddCommand,
    CommandKind.DONE: DoneCommand,
    CommandKind.EDIT: EditCommand,
    CommandKind.FETCH: FetchCommand,
    CommandKind.LIST: ListCommand,
    CommandKind.NEXT: NextCommand,
    CommandKind.PURGE: PurgeCommand,
    CommandKind.REMOVE: RemoveCommand,
}


def build_command(parsed: ParsedCommand) -> Optional[ExecutableCommand]:
    """Validate ``parsed`` into a command object.

    Returns None for kinds without a command object (unknown words and the
    reserved ``delete``).
    """
    command_class = COMMANDS.get(parsed.command)
    if command_class is None:
        return None
    return command_class.from_parsed(parsed)


__all__ = [
    "COMMANDS",
    "build_command",
    "ExecutableCommand",
    "ExecutionContext",
    "AddCommand",
    "DoneCommand",
    "EditCommand",
    "FetchCommand",
    "ListCommand",
    "SortOrder",
    "NextCommand",
    "PurgeCommand",
    "RemoveCommand",
]
