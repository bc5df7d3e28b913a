"""Tests for Todo model."""

import pytest
from datetime import datetime, timedelta, timezone

from beaver.errors import ValidationError
from beaver.todo import Todo, Priority
from beaver.utils.datetime import epoch_utc, now_utc


def make_todo(**kwargs):
    values = {"id": 1, "title": "Test", "priority": Priority.LOW}
    values.update(kwargs)
    return Todo(**values)


class TestPriority:
    """Test priority ordering and parsing."""

    def test_declaration_order(self):
        assert Priority.HIGH < Priority.MEDIUM < Priority.LOW
        assert Priority.LOW > Priority.HIGH
        assert Priority.MEDIUM <= Priority.MEDIUM
        assert sorted([Priority.LOW, Priority.HIGH, Priority.MEDIUM]) == [
            Priority.HIGH, Priority.MEDIUM, Priority.LOW,
        ]

    def test_display_names(self):
        assert str(Priority.HIGH) == "High"
        assert str(Priority.MEDIUM) == "Medium"
        assert str(Priority.LOW) == "Low"

    @pytest.mark.parametrize("text, expected", [
        ("H", Priority.HIGH),
        ("h", Priority.HIGH),
        ("m", Priority.MEDIUM),
        (" L ", Priority.LOW),
    ])
    def test_parse(self, text, expected):
        assert Priority.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "x", "high", "H and P"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValidationError):
            Priority.parse(text)

    def test_from_name(self):
        assert Priority.from_name("Medium") is Priority.MEDIUM
        with pytest.raises(ValueError):
            Priority.from_name("Urgent")


class TestTodo:
    """Test Todo model functionality."""

    def test_todo_creation(self):
        """Test basic todo creation."""
        created = now_utc()
        todo = Todo(id=1, title="Test", priority=Priority.LOW, created_at_utc=created)

        assert todo.id == 1
        assert todo.title == "Test"
        assert todo.priority == Priority.LOW
        assert todo.created_at_utc == created
        assert todo.completed is False
        assert todo.completed_at_utc == epoch_utc()

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError, match="^Title is required$"):
            make_todo(title=title)

    def test_naive_created_time_is_treated_as_utc(self):
        todo = make_todo(created_at_utc=datetime(2024, 1, 2, 3, 4, 5))
        assert todo.created_at_utc == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_set_id(self):
        todo = make_todo()
        todo.set_id(2)
        assert todo.id == 2

    def test_set_title(self):
        todo = make_todo()
        todo.set_title("Another value")
        assert todo.title == "Another value"

    @pytest.mark.parametrize("title", ["", "  "])
    def test_set_blank_title_leaves_todo_unchanged(self, title):
        todo = make_todo()
        with pytest.raises(ValidationError, match="^Title cannot be empty$"):
            todo.set_title(title)
        assert todo.title == "Test"

    def test_set_priority(self):
        todo = make_todo()
        todo.set_priority(Priority.MEDIUM)
        assert todo.priority == Priority.MEDIUM

    def test_set_completed_with_explicit_time(self):
        when = datetime(1970, 2, 2, 1, 1, 1, tzinfo=timezone.utc)
        todo = make_todo()
        todo.set_completed(True, when)
        assert todo.completed is True
        assert todo.completed_at_utc == when

    def test_set_completed_defaults_to_now(self):
        todo = make_todo()
        before = now_utc()
        todo.set_completed(True)
        assert before <= todo.completed_at_utc <= now_utc()

    def test_uncompleting_still_updates_timestamp(self):
        """Clearing the flag also refreshes the completion time."""
        todo = make_todo()
        todo.set_completed(True, datetime(2020, 1, 1, tzinfo=timezone.utc))
        todo.set_completed(False)
        assert todo.completed is False
        assert now_utc() - todo.completed_at_utc < timedelta(seconds=5)


class TestTodoSerialization:
    """Test the store representation."""

    def test_to_dict(self):
        todo = make_todo(
            id=3,
            title="Buy milk",
            priority=Priority.HIGH,
            created_at_utc=datetime(2023, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc),
        )
        assert todo.to_dict() == {
            "id": 3,
            "title": "Buy milk",
            "priority": "High",
            "when_created_utc": "2023-05-06 07:08:09",
            "completed": False,
            "when_completed_utc": "1970-01-01 00:00:00",
        }

    def test_from_dict(self):
        todo = Todo.from_dict({
            "id": 4,
            "title": "Call mom",
            "priority": "Medium",
            "when_created_utc": "2023-05-06 07:08:09",
            "completed": True,
            "when_completed_utc": "2023-05-07 10:00:00",
        })
        assert todo.id == 4
        assert todo.title == "Call mom"
        assert todo.priority is Priority.MEDIUM
        assert todo.created_at_utc == datetime(2023, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
        assert todo.completed is True
        assert todo.completed_at_utc == datetime(2023, 5, 7, 10, tzinfo=timezone.utc)

    def test_from_dict_rejects_bad_timestamp(self):
        data = make_todo().to_dict()
        data["when_created_utc"] = "2023-05-06T07:08:09Z"
        with pytest.raises(ValueError):
            Todo.from_dict(data)

    def test_from_dict_rejects_missing_field(self):
        data = make_todo().to_dict()
        del data["priority"]
        with pytest.raises(KeyError):
            Todo.from_dict(data)

    @pytest.mark.parametrize("title", [None, 42, ["a"]])
    def test_from_dict_rejects_non_string_title(self, title):
        data = make_todo().to_dict()
        data["title"] = title
        with pytest.raises(ValueError):
            Todo.from_dict(data)
