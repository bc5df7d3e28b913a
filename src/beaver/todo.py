"""Todo data model for the Beaver application."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .errors import ValidationError
from .utils.datetime import (
    now_utc,
    epoch_utc,
    ensure_aware,
    to_store_string,
    from_store_string,
)


class Priority(Enum):
    """Task priority levels.

    Members compare in declaration order, so ``HIGH < MEDIUM < LOW`` and an
    ascending sort puts the most urgent todos first.
    """
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return list(Priority).index(self)

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Parse the short form typed on the command line (H, M or L)."""
        key = text.strip().lower()
        for member in cls:
            if member.value[0].lower() == key:
                return member
        raise ValidationError(f"Invalid priority '{text}'. Must be H, M or L")

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Look up a priority by the name stored on disk ("High", ...)."""
        return cls(name)


@dataclass
class Todo:
    """A single todo item.

    ``completed_at_utc`` only carries meaning while ``completed`` is True;
    otherwise it holds the epoch sentinel.
    """

    id: int
    title: str
    priority: Priority = Priority.LOW
    created_at_utc: datetime = field(default_factory=now_utc)
    completed: bool = False
    completed_at_utc: datetime = field(default_factory=epoch_utc)

    def __post_init__(self):
        if not self.title.strip():
            raise ValidationError("Title is required")
        self.created_at_utc = ensure_aware(self.created_at_utc)
        self.completed_at_utc = ensure_aware(self.completed_at_utc)

    def set_id(self, todo_id: int):
        self.id = todo_id

    def set_title(self, title: str):
        """Replace the title, leaving the todo untouched if it is blank."""
        if not title.strip():
            raise ValidationError("Title cannot be empty")
        self.title = title

    def set_priority(self, priority: Priority):
        self.priority = priority

    def set_completed(self, completed: bool, when: Optional[datetime] = None):
        """Set the completion flag.

        The completion timestamp is refreshed on every call, including when
        the flag is cleared.
        """
        self.completed = completed
        self.completed_at_utc = ensure_aware(when) if when is not None else now_utc()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Todo to the dictionary written to the store."""
        return {
            "id": self.id,
            "title": self.title,
            "priority": self.priority.value,
            "when_created_utc": to_store_string(self.created_at_utc),
            "completed": self.completed,
            "when_completed_utc": to_store_string(self.completed_at_utc),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """Create a Todo from a store dictionary.

        Raises:
            KeyError: If a field is missing
            ValueError: If the priority or a timestamp cannot be decoded
            ValidationError: If the stored title is blank
        """
        todo_id = data["id"]
        if isinstance(todo_id, bool) or not isinstance(todo_id, int) or todo_id < 0:
            raise ValueError(f"invalid id {todo_id!r}")
        title = data["title"]
        if not isinstance(title, str):
            raise ValueError(f"invalid title {title!r}")
        completed = data["completed"]
        if not isinstance(completed, bool):
            raise ValueError(f"invalid completed flag {completed!r}")

        return cls(
            id=todo_id,
            title=title,
            priority=Priority.from_name(data["priority"]),
            created_at_utc=from_store_string(data["when_created_utc"]),
            completed=completed,
            completed_at_utc=from_store_string(data["when_completed_utc"]),
        )
