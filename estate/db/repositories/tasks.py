"""
Task repository functions.

A task's assignment (users) is replaced wholesale when a non-empty id list
is supplied on update.
"""
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.orm import Session, selectinload

from estate.db import models
from estate.db.repositories.base import (
    append_missing,
    apply_patch,
    commit,
    get_row,
    list_rows,
    resolve_ids,
    save_new,
    soft_delete,
)

_DETAIL = (
    selectinload(models.Task.assignment),
    selectinload(models.Task.log).selectinload(models.TaskLog.user),
)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.Task, limit, offset, order, options=(selectinload(models.Task.assignment),))


def find_by_id(db: Session, task_id: int) -> models.Task:
    return get_row(db, models.Task, task_id, options=_DETAIL)


def create(db: Session, task: models.Task, assignment_ids: Sequence[int] = ()) -> models.Task:
    db_task = save_new(db, task, "task")
    if assignment_ids:
        append_missing(db_task.assignment, resolve_ids(db, models.User, assignment_ids))
        commit(db, "linking", f"task {db_task.id}")
    return find_by_id(db, db_task.id)


def update(
    db: Session,
    task_id: int,
    patch: dict,
    assignment_ids: Optional[Sequence[int]] = None,
) -> models.Task:
    db_task = find_by_id(db, task_id)
    apply_patch(db_task, patch)
    commit(db, "updating", f"task {task_id}")
    if assignment_ids:
        db_task.assignment = resolve_ids(db, models.User, assignment_ids)
        commit(db, "linking", f"task {task_id}")
    return find_by_id(db, task_id)


def delete(db: Session, task_id: int) -> None:
    soft_delete(db, models.Task, task_id, "task")
