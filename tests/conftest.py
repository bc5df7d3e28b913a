"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from beaver.commands import ExecutionContext  # noqa: E402
from beaver.config import ConfigModel  # noqa: E402
from beaver.storage import Storage  # noqa: E402
from beaver.theme import get_themed_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the data directory at a temporary location for every test."""
    data_dir = tmp_path / "beaver-home"
    monkeypatch.setenv("BEAVER_HOME", str(data_dir))
    return data_dir


@pytest.fixture
def config(isolated_home):
    return ConfigModel(data_dir=str(isolated_home))


@pytest.fixture
def storage(config):
    return Storage.from_config(config)


@pytest.fixture
def console():
    """A console that records output instead of writing to the terminal."""
    return get_themed_console(record=True, width=120, force_terminal=False, color_system=None)


class Answers:
    """Scripted confirmation answers that remember the questions asked."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, question):
        self.questions.append(question)
        return self.answers.pop(0)


@pytest.fixture
def make_context(storage, console, config):
    """Build an execution context, optionally with scripted confirmations."""
    def _make(*answers):
        return ExecutionContext(
            storage=storage,
            console=console,
            config=config,
            confirm=Answers(*answers),
        )
    return _make
