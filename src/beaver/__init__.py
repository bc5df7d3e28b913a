"""Beaver - a small command-line todo list manager."""

__version__ = "0.1.0"

from .todo import Todo, Priority
from .parser import CommandKind, ParsedCommand, analyze, tokenize
from .storage import Storage, next_available_id

__all__ = [
    "Todo",
    "Priority",
    "CommandKind",
    "ParsedCommand",
    "analyze",
    "tokenize",
    "Storage",
    "next_available_id",
    "__version__",
]
