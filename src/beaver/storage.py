"""Storage layer for Beaver using a single JSON file.

The whole todo collection is read on every invocation and written back in
full after a change. There is no locking: two processes writing at the same
time race and the last writer wins.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import ConfigModel
from .errors import FormatError, StorageIOError, ValidationError
from .todo import Todo

logger = logging.getLogger(__name__)


def next_available_id(todos: Iterable[Todo]) -> int:
    """Return the lowest positive id not held by an active todo.

    Ids of completed todos are free for reuse, so the same number can refer
    to different todos over time.
    """
    taken = {todo.id for todo in todos if not todo.completed}
    candidate = 1
    while candidate in taken:
        candidate += 1
    return candidate


class Storage:
    """File-based storage for the todo collection."""

    def __init__(self, store_path: Path):
        self.store_path = Path(store_path)

    @classmethod
    def from_config(cls, config: ConfigModel) -> "Storage":
        return cls(config.store_path)

    def exists(self) -> bool:
        return self.store_path.exists()

    def read_all(self) -> List[Todo]:
        """Load every todo from the store.

        Returns:
            The stored todos in file order, or an empty list when the store
            does not exist yet

        Raises:
            FormatError: If the store content is not a valid todo collection
            StorageIOError: If the store cannot be read
        """
        if not self.store_path.exists():
            logger.debug(f"No store at {self.store_path}, starting empty")
            return []

        try:
            with open(self.store_path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise FormatError(f"The store {self.store_path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageIOError(f"Unable to read {self.store_path}: {e}") from e

        try:
            data = json.loads(content)
        except (json.JSONDecodeError, RecursionError) as e:
            raise FormatError(f"The store {self.store_path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise FormatError(f"The store {self.store_path} must contain a list of todos")

        todos = []
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise FormatError(f"Entry {index} of {self.store_path} is not an object")
            try:
                todos.append(Todo.from_dict(entry))
            except KeyError as e:
                raise FormatError(f"Entry {index} of {self.store_path} is missing field {e}") from e
            except (TypeError, ValueError, ValidationError) as e:
                raise FormatError(f"Entry {index} of {self.store_path} is invalid: {e}") from e

        logger.debug(f"Loaded {len(todos)} todo(s) from {self.store_path}")
        return todos

    def write_all(self, todos: Sequence[Todo]) -> None:
        """Replace the store content with ``todos`` (pretty-printed).

        Raises:
            StorageIOError: If the directory or file cannot be written
        """
        content = json.dumps([todo.to_dict() for todo in todos], indent=2, ensure_ascii=False)
        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.store_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StorageIOError(f"Unable to write {self.store_path}: {e}") from e

        logger.debug(f"Wrote {len(todos)} todo(s) to {self.store_path}")

    def add_todo(self, todo: Todo) -> Todo:
        """Append a todo under the next available id and save the collection.

        Returns:
            The stored todo, carrying its assigned id
        """
        todos = self.read_all()
        todo.set_id(next_available_id(todos))
        todos.append(todo)
        self.write_all(todos)
        logger.info(f"Added todo {todo.id}: {todo.title}")
        return todo
