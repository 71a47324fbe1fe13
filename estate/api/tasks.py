"""
Task API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(task: schemas.TaskCreate, db: Session = Depends(get_db)):
    with http_errors("task"):
        return TaskService(db).create(task)


@router.get("", response_model=List[schemas.Task])
def list_tasks_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("task"):
        return TaskService(db).find_all(**params)


@router.get("/{task_id}", response_model=schemas.Task)
def get_task_endpoint(task_id: int, db: Session = Depends(get_db)):
    with http_errors("task"):
        return TaskService(db).find_by_id(task_id)


@router.put("/{task_id}", response_model=schemas.Task)
def update_task_endpoint(task_id: int, task: schemas.TaskUpdate, db: Session = Depends(get_db)):
    with http_errors("task"):
        return TaskService(db).update(task_id, task)


@router.delete("/{task_id}")
def delete_task_endpoint(task_id: int, db: Session = Depends(get_db)):
    with http_errors("task"):
        TaskService(db).delete(task_id)
    return {"message": "Task deleted successfully"}
