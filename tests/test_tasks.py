# tests/test_tasks.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import event
from sqlmodel import select

from organizer.core.errors import DanglingReferenceError, InvalidError, NotFoundError
from organizer.models import Tag, Task, TaskPriority, TaskTag
from organizer.schemas.area import AreaCreate
from organizer.schemas.project import ProjectCreate
from organizer.schemas.tag import TagCreate
from organizer.schemas.task import TaskCreate, TaskUpdate
from organizer.services import (
    create_area,
    create_project,
    create_tag,
    create_task,
    delete_task,
    get_task,
    update_task,
)


def _tag_names(task) -> set[str]:
    return {tag.name for tag in task.tags}


def _link_count(session) -> int:
    return len(session.exec(select(TaskTag)).all())


@pytest.fixture()
def tags(session):
    return {
        name: create_tag(session, TagCreate(name=name))
        for name in ("A", "B", "C")
    }


def test_create_task_with_everything(session, tags) -> None:
    area = create_area(session, AreaCreate(name="Work"))
    project = create_project(session, ProjectCreate(name="Launch", area_id=area.id))
    due = datetime(2026, 5, 1, 9, 0)

    task = create_task(
        session,
        TaskCreate(
            title="  Write brief ",
            notes="first draft",
            project_id=project.id,
            area_id=area.id,
            due_date=due,
            deadline_date=datetime(2026, 5, 3),
            scheduled_date=datetime(2026, 4, 30, 8, 30),
            priority=TaskPriority.high,
            tag_ids=[tags["B"].id, tags["A"].id],
        ),
    )

    assert task.title == "Write brief"
    assert task.notes == "first draft"
    assert task.project_id == project.id
    assert task.area_id == area.id
    assert task.due_date == due
    assert task.priority == TaskPriority.high
    assert task.is_completed is False
    assert task.completed_at is None
    assert [tag.name for tag in task.tags] == ["A", "B"]
    assert _link_count(session) == 2


def test_create_minimal_task_has_empty_tag_list(session) -> None:
    task = create_task(session, TaskCreate(title="Bare", notes=""))

    assert task.tags == []
    assert task.notes is None
    assert task.priority is None


def test_create_task_reports_every_missing_tag(session) -> None:
    with pytest.raises(DanglingReferenceError) as excinfo:
        create_task(session, TaskCreate(title="Ghost tags", tag_ids=[1000, 1001]))

    assert excinfo.value.entity == "tag"
    assert excinfo.value.missing_ids == [1000, 1001]
    assert "1000" in str(excinfo.value) and "1001" in str(excinfo.value)
    assert session.exec(select(Task)).all() == []
    assert _link_count(session) == 0


def test_create_task_with_some_missing_tags_writes_nothing(session, tags) -> None:
    with pytest.raises(DanglingReferenceError) as excinfo:
        create_task(session, TaskCreate(title="Mixed", tag_ids=[tags["A"].id, 555]))

    assert excinfo.value.missing_ids == [555]
    assert session.exec(select(Task)).all() == []
    assert _link_count(session) == 0


@pytest.mark.parametrize("field", ["project_id", "area_id"])
def test_create_task_with_dangling_reference_writes_nothing(session, field) -> None:
    with pytest.raises(DanglingReferenceError) as excinfo:
        create_task(session, TaskCreate(title="Orphan", **{field: 77}))

    assert excinfo.value.missing_ids == [77]
    assert session.exec(select(Task)).all() == []


def test_duplicate_tag_ids_collapse(session, tags) -> None:
    task = create_task(session, TaskCreate(title="Twice", tag_ids=[tags["A"].id, tags["A"].id]))

    assert [tag.name for tag in task.tags] == ["A"]
    assert _link_count(session) == 1


def test_create_task_normalizes_aware_dates_to_local_time(session) -> None:
    aware = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

    task = create_task(session, TaskCreate(title="Call", scheduled_date=aware))

    assert task.scheduled_date == aware.astimezone().replace(tzinfo=None)


def test_update_replaces_tag_set(session, tags) -> None:
    task = create_task(session, TaskCreate(title="Swap", tag_ids=[tags["A"].id, tags["B"].id]))

    updated = update_task(session, task.id, TaskUpdate(tag_ids=[tags["B"].id, tags["C"].id]))

    assert _tag_names(updated) == {"B", "C"}
    assert _tag_names(get_task(session, task.id)) == {"B", "C"}
    assert _link_count(session) == 2


def test_update_without_tag_ids_keeps_tags(session, tags) -> None:
    task = create_task(session, TaskCreate(title="Keep", tag_ids=[tags["A"].id]))

    updated = update_task(session, task.id, TaskUpdate(title="Keep it"))

    assert updated.title == "Keep it"
    assert _tag_names(updated) == {"A"}


def test_update_with_empty_tag_ids_clears_tags(session, tags) -> None:
    task = create_task(session, TaskCreate(title="Clear", tag_ids=[tags["A"].id, tags["C"].id]))

    updated = update_task(session, task.id, TaskUpdate(tag_ids=[]))

    assert updated.tags == []
    assert _link_count(session) == 0


def test_failed_update_leaves_task_untouched(session, tags) -> None:
    task = create_task(session, TaskCreate(title="Stable", tag_ids=[tags["A"].id]))

    with pytest.raises(DanglingReferenceError):
        update_task(session, task.id, TaskUpdate(title="Changed", tag_ids=[tags["B"].id, 999]))
    with pytest.raises(DanglingReferenceError):
        update_task(session, task.id, TaskUpdate(title="Changed", project_id=999))
    with pytest.raises(DanglingReferenceError):
        update_task(session, task.id, TaskUpdate(title="Changed", area_id=999))

    stored = get_task(session, task.id)
    assert stored.title == "Stable"
    assert stored.project_id is None
    assert _tag_names(stored) == {"A"}


def test_completion_round_trip(session) -> None:
    task = create_task(session, TaskCreate(title="Finish"))

    done = update_task(session, task.id, TaskUpdate(is_completed=True))
    assert done.is_completed is True
    assert done.completed_at is not None

    undone = update_task(session, task.id, TaskUpdate(is_completed=False))
    assert undone.is_completed is False
    assert undone.completed_at is None

    redone = update_task(session, task.id, TaskUpdate(is_completed=True))
    assert redone.completed_at is not None


def test_update_clears_nullable_fields_and_restamps(session) -> None:
    area = create_area(session, AreaCreate(name="Work"))
    task = create_task(
        session,
        TaskCreate(title="Dates", area_id=area.id, due_date=datetime(2026, 2, 1), priority=TaskPriority.low),
    )

    updated = update_task(session, task.id, TaskUpdate(due_date=None, area_id=None, priority=None))

    assert updated.due_date is None
    assert updated.area_id is None
    assert updated.priority is None
    assert updated.title == "Dates"
    assert updated.updated_at >= task.updated_at


def test_update_rejects_blank_title(session) -> None:
    task = create_task(session, TaskCreate(title="Named"))

    with pytest.raises(InvalidError):
        update_task(session, task.id, TaskUpdate(title="   "))
    assert get_task(session, task.id).title == "Named"


def test_update_missing_task_raises_not_found(session) -> None:
    with pytest.raises(NotFoundError):
        update_task(session, 404, TaskUpdate(title="Nope"))


def test_delete_task_removes_links_but_keeps_tags(session, tags) -> None:
    task = create_task(session, TaskCreate(title="Gone", tag_ids=[tags["A"].id, tags["B"].id]))

    delete_task(session, task.id)
    delete_task(session, task.id)

    assert session.get(Task, task.id) is None
    assert _link_count(session) == 0
    assert len(session.exec(select(Tag)).all()) == 3
    with pytest.raises(NotFoundError):
        get_task(session, task.id)


def test_stored_timestamps_read_back_as_naive_local_time(session) -> None:
    scheduled = datetime(2026, 6, 1, 9, 30)
    task = create_task(session, TaskCreate(title="Naive", scheduled_date=scheduled))
    session.expire_all()

    stored = session.get(Task, task.id)

    assert stored.scheduled_date == scheduled
    assert stored.scheduled_date.tzinfo is None
    assert stored.created_at.tzinfo is None
    assert stored.updated_at.tzinfo is None


def test_create_task_only_inserts_links(session, engine, tags) -> None:
    statements = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement.lstrip().upper())

    event.listen(engine, "before_cursor_execute", _record)
    try:
        create_task(session, TaskCreate(title="Fresh", tag_ids=[tags["A"].id]))
    finally:
        event.remove(engine, "before_cursor_execute", _record)

    assert any(s.startswith("INSERT INTO TASK_TAGS") for s in statements)
    assert not any(s.startswith("DELETE") for s in statements)
