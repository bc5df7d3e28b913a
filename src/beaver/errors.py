"""Error types raised by Beaver.

Every failure a command can produce derives from :class:`BeaverError`, so the
command-line shell only needs a single ``except`` clause to report it.
"""


class BeaverError(Exception):
    """Base class for all Beaver failures."""


class ValidationError(BeaverError):
    """A user supplied field is empty or invalid."""


class ParseError(BeaverError):
    """A todo id could not be parsed as a positive whole number."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid id '{value}'. It must be a positive whole number")


class NotFoundError(BeaverError):
    """No todo with the requested id exists in the expected state."""

    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__(f"Unable to find the todo with id {todo_id}")


class AlreadyCompletedError(BeaverError):
    """The todo is already marked as done."""

    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__(f"The todo with id {todo_id} is already completed")


class FormatError(BeaverError):
    """The store exists but its content cannot be decoded."""


class StorageIOError(BeaverError):
    """The store could not be read from or written to disk."""
