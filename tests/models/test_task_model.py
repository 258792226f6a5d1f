"""Tests for the Task model and its enumerations."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from taskpad.models import FilterKind, Priority, SortOrder, Task

CREATED = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def _task(**overrides) -> Task:
    data = {"id": 1, "text": "Write report", "created_at": CREATED}
    data.update(overrides)
    return Task(**data)


def test_defaults():
    task = _task()
    assert task.completed is False
    assert task.priority is Priority.MEDIUM
    assert task.due_date is None
    assert task.category == "other"


def test_text_is_trimmed():
    assert _task(text="  Buy milk \n").text == "Buy milk"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_text_rejected(text):
    with pytest.raises(ValidationError):
        _task(text=text)


def test_blank_text_rejected_on_assignment():
    task = _task()
    with pytest.raises(ValidationError):
        task.text = "  "
    assert task.text == "Write report"


def test_id_and_created_at_are_frozen():
    task = _task()
    with pytest.raises(ValidationError):
        task.id = 2
    with pytest.raises(ValidationError):
        task.created_at = datetime(2030, 1, 1, tzinfo=UTC)


def test_category_normalized():
    assert _task(category="  Work ").category == "work"
    assert _task(category="").category == "other"
    assert _task(category=None).category == "other"
    assert _task(category="Garden").category == "garden"


def test_empty_due_date_string_is_none():
    assert _task(due_date="").due_date is None


def test_due_date_parsed_from_string():
    assert _task(due_date="2024-02-29").due_date == date(2024, 2, 29)


def test_invalid_due_date_rejected():
    with pytest.raises(ValidationError):
        _task(due_date="2024-02-30")


def test_invalid_priority_rejected():
    with pytest.raises(ValidationError):
        _task(priority="urgent")


def test_dump_uses_camel_case_aliases():
    task = _task(due_date=date(2024, 5, 1), priority=Priority.HIGH)
    dumped = task.model_dump(mode="json", by_alias=True)
    assert dumped == {
        "id": 1,
        "text": "Write report",
        "completed": False,
        "priority": "high",
        "dueDate": "2024-05-01",
        "category": "other",
        "createdAt": dumped["createdAt"],
    }
    assert dumped["createdAt"].startswith("2024-01-01T12:00:00")


def test_accepts_aliases_on_input():
    task = Task.model_validate(
        {
            "id": 7,
            "text": "Call mum",
            "completed": True,
            "priority": "low",
            "dueDate": "2024-06-01",
            "category": "personal",
            "createdAt": "2024-01-01T12:00:00Z",
        }
    )
    assert task.due_date == date(2024, 6, 1)
    assert task.created_at == CREATED
    assert task.completed is True


def test_is_overdue():
    today = date(2024, 3, 15)
    assert _task(due_date=date(2024, 3, 14)).is_overdue(today)
    assert not _task(due_date=date(2024, 3, 15)).is_overdue(today)
    assert not _task(due_date=date(2024, 3, 16)).is_overdue(today)
    assert not _task().is_overdue(today)
    assert not _task(due_date=date(2020, 1, 1), completed=True).is_overdue(today)


def test_priority_rank():
    assert [p.rank for p in (Priority.HIGH, Priority.MEDIUM, Priority.LOW)] == [0, 1, 2]


def test_enum_values():
    assert FilterKind("high-priority") is FilterKind.HIGH_PRIORITY
    assert SortOrder("due-date") is SortOrder.DUE_DATE
