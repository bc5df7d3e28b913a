"""The ``list`` command."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from rich import box
from rich.markup import escape
from rich.table import Table

from ..errors import ValidationError
from ..parser import ParsedCommand
from ..theme import format_local_time, get_priority_style, print_empty_list
from ..todo import Todo
from .base import ExecutableCommand, ExecutionContext


class SortOrder(Enum):
    """Sort orders accepted by ``--sort``.

    ``PRIORITY_DESC`` lists the most urgent todos first, ``PRIORITY_ASC``
    the least urgent first.
    """
    PRIORITY_DESC = "PriorityDESC"
    PRIORITY_ASC = "Priority"
    CREATION_TIME_DESC = "CreationTimeDESC"
    CREATION_TIME_ASC = "CreationTime"

    @property
    def by_creation_time(self) -> bool:
        return self in (SortOrder.CREATION_TIME_DESC, SortOrder.CREATION_TIME_ASC)

    @classmethod
    def parse(cls, text: str) -> "SortOrder":
        # Accepts the documented spelling or its all-lowercase form.
        for member in cls:
            if text in (member.value, member.value.lower()):
                return member
        raise ValidationError(
            "Invalid sort value. Must be PriorityDESC, Priority, CreationTimeDESC or CreationTime"
        )


def sort_todos(todos: List[Todo], order: SortOrder) -> List[Todo]:
    """Return ``todos`` sorted by ``order`` (stable)."""
    if order is SortOrder.PRIORITY_DESC:
        return sorted(todos, key=lambda t: t.priority)
    if order is SortOrder.PRIORITY_ASC:
        return sorted(todos, key=lambda t: t.priority, reverse=True)
    if order is SortOrder.CREATION_TIME_ASC:
        return sorted(todos, key=lambda t: t.created_at_utc)
    return sorted(todos, key=lambda t: t.created_at_utc, reverse=True)


@dataclass
class ListCommand(ExecutableCommand):
    """List todos, active ones only unless ``show_all`` is set."""
    sort_order: SortOrder = SortOrder.PRIORITY_DESC
    show_all: bool = False

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand) -> "ListCommand":
        sort_order = SortOrder.PRIORITY_DESC
        raw_sort = parsed.get_option("sort")
        if raw_sort is not None:
            sort_order = SortOrder.parse(raw_sort)
        return cls(sort_order=sort_order, show_all=parsed.has_option("all"))

    def execute(self, context: ExecutionContext) -> List[Todo]:
        todos = context.storage.read_all()
        if not self.show_all:
            todos = [t for t in todos if not t.completed]
        todos = sort_todos(todos, self.sort_order)

        if not todos:
            print_empty_list(context.console)
            return todos

        context.console.print(self.build_table(todos, context.config.date_format))
        return todos

    def build_table(self, todos: List[Todo], date_format: str) -> Table:
        table = Table(box=box.SIMPLE_HEAD, header_style="header", show_edge=False)
        table.add_column("ID", justify="left", no_wrap=True)
        table.add_column("Title", overflow="ellipsis", no_wrap=True)
        table.add_column("Priority", no_wrap=True)
        if self.sort_order.by_creation_time:
            table.add_column("Creation date", no_wrap=True)
        if self.show_all:
            table.add_column("Completed date", no_wrap=True)

        for todo in todos:
            row = [
                escape("[X]") if todo.completed else str(todo.id),
                escape(todo.title),
                str(todo.priority),
            ]
            if self.sort_order.by_creation_time:
                row.append(format_local_time(todo.created_at_utc, date_format))
            if self.show_all:
                row.append(
                    format_local_time(todo.completed_at_utc, date_format) if todo.completed else ""
                )
            table.add_row(*row, style=get_priority_style(todo.priority))
        return table
