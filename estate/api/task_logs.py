"""
Task log API endpoints.

Hand-written log entries are attributed to the proxy-resolved user unless
the body names one explicitly.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import get_current_user, list_params
from estate.api.errors import http_errors
from estate.db import models, schemas
from estate.db.database import get_db
from estate.services.task_log_service import TaskLogService

router = APIRouter(prefix="/api/task-logs", tags=["task-logs"])


@router.post("", response_model=schemas.TaskLog, status_code=status.HTTP_201_CREATED)
def create_task_log_endpoint(
    log: schemas.TaskLogCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    if log.user_id is None:
        log = log.model_copy(update={"user_id": current_user.id})
    with http_errors("task log"):
        return TaskLogService(db).create(log)


@router.get("", response_model=List[schemas.TaskLog])
def list_task_logs_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("task log"):
        return TaskLogService(db).find_all(**params)


@router.get("/{log_id}", response_model=schemas.TaskLog)
def get_task_log_endpoint(log_id: int, db: Session = Depends(get_db)):
    with http_errors("task log"):
        return TaskLogService(db).find_by_id(log_id)


@router.put("/{log_id}", response_model=schemas.TaskLog)
def update_task_log_endpoint(log_id: int, log: schemas.TaskLogUpdate, db: Session = Depends(get_db)):
    with http_errors("task log"):
        return TaskLogService(db).update(log_id, log)


@router.delete("/{log_id}")
def delete_task_log_endpoint(log_id: int, db: Session = Depends(get_db)):
    with http_errors("task log"):
        TaskLogService(db).delete(log_id)
    return {"message": "Task log deleted successfully"}
