"""Command-line argument analysis for Beaver.

The argument list after the program name is split into three parts:

* the command word, classified into a :class:`CommandKind`;
* a free-text value made of the words that precede the first option;
* keyed options, collected from the recognized option spellings.

The analysis is loose. It is not a flag grammar: unknown flags
are plain words, every word after an option belongs to that option, and a
bare flag such as ``--all`` also collects the words that follow it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


class CommandKind(Enum):
    """Commands understood by Beaver."""
    UNKNOWN = "unknown"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"  # reserved, no command object
    DONE = "done"
    FETCH = "fetch"
    LIST = "list"
    NEXT = "next"
    PURGE = "purge"
    REMOVE = "remove"


@dataclass(frozen=True)
class OptionSpec:
    """One recognized option spelling.

    A pattern ending with ``=`` takes an inline value and matches any token
    starting with it. Any other pattern is a bare flag and only matches a
    token equal to it.
    """
    pattern: str
    name: str

    @property
    def takes_inline_value(self) -> bool:
        return self.pattern.endswith("=")

    def matches(self, token: str) -> bool:
        if self.takes_inline_value:
            return token.startswith(self.pattern)
        return token == self.pattern


OPTION_CATALOG: Tuple[OptionSpec, ...] = (
    OptionSpec("-p=", "priority"),
    OptionSpec("--priority=", "priority"),
    OptionSpec("-t=", "title"),
    OptionSpec("--title=", "title"),
    OptionSpec("-s=", "sort"),
    OptionSpec("--sort=", "sort"),
    OptionSpec("-a", "all"),
    OptionSpec("--all", "all"),
)


@dataclass(frozen=True)
class ParsedCommand:
    """Result of analyzing the command line."""
    command: CommandKind
    value: str = ""
    options: Mapping[str, str] = field(default_factory=dict)

    def get_option(self, name: str) -> Optional[str]:
        return self.options.get(name)

    def has_option(self, name: str) -> bool:
        return name in self.options


def get_option_name(token: str) -> Optional[str]:
    """Return the canonical option name for ``token``, or None."""
    for spec in OPTION_CATALOG:
        if spec.matches(token):
            return spec.name
    return None


def extract_option_value(token: str) -> str:
    """Return the inline value of an option token.

    Everything after the first ``=`` is kept, including further ``=``
    characters. A token without ``=`` has an empty value.
    """
    _, sep, value = token.partition("=")
    if not sep:
        return ""
    return value.rstrip()


def extract_value(words: Sequence[str]) -> str:
    """Join the words preceding the first recognized option."""
    value_words: List[str] = []
    for word in words:
        if get_option_name(word) is not None:
            break
        value_words.append(word)
    return " ".join(value_words).strip()


def extract_options(words: Sequence[str]) -> Dict[str, str]:
    """Collect options and the words that follow each of them."""
    options: Dict[str, str] = {}
    current_name: Optional[str] = None
    current_value = ""

    for word in words:
        name = get_option_name(word)
        if name is not None:
            if current_name is not None:
                options[current_name] = current_value.strip()
            current_name = name
            current_value = extract_option_value(word)
        elif current_name is not None:
            if current_value:
                current_value += " "
            current_value += word

    if current_name is not None:
        options[current_name] = current_value.strip()
    return options


def tokenize(words: Sequence[str]) -> Tuple[str, Dict[str, str]]:
    """Split the words following the command into a value and options."""
    return extract_value(words), extract_options(words)


_COMMAND_NAMES: Dict[str, CommandKind] = {
    kind.value: kind for kind in CommandKind if kind is not CommandKind.UNKNOWN
}


def classify(first_arg: str) -> Optional[CommandKind]:
    """Classify the command word; None when it is blank."""
    name = first_arg.strip().lower()
    if not name:
        return None
    return _COMMAND_NAMES.get(name, CommandKind.UNKNOWN)


def analyze(args: Sequence[str]) -> Optional[ParsedCommand]:
    """Analyze a full argument list (program name excluded).

    Returns None when no command was given, that is when ``args`` is empty
    or its first element is blank.
    """
    if not args:
        return None
    command = classify(args[0])
    if command is None:
        return None
    value, options = tokenize(args[1:])
    return ParsedCommand(command=command, value=value, options=options)
