from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, HTTPException, Query, status

from vinemanager.core.deps import CurrentStore
from vinemanager.models.task import Task
from vinemanager.schemas.display import DisplayRead
from vinemanager.schemas.task import TaskCreate, TaskRead, TaskStats, TaskView
from vinemanager.services.display import TASK_CATEGORY_DISPLAY, TASK_PRIORITY_DISPLAY, describe
from vinemanager.services.task_lifecycle import (
    add_task,
    filter_tasks,
    is_overdue,
    resolve_task,
    task_counts,
    toggle_task_complete,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _task_to_read(task: Task, today: date) -> TaskRead:
    return TaskRead(
        **asdict(task),
        overdue=is_overdue(task, today),
        priority_display=DisplayRead.model_validate(describe(TASK_PRIORITY_DISPLAY, task.priority)),
        category_display=DisplayRead.model_validate(describe(TASK_CATEGORY_DISPLAY, task.category)),
    )


@router.get("", response_model=list[TaskRead])
async def list_tasks(
    store: CurrentStore,
    view: TaskView = Query(TaskView.all, description="all, pending or completed"),
):
    today = date.today()
    return [_task_to_read(t, today) for t in filter_tasks(store.tasks, view)]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskCreate, store: CurrentStore):
    today = date.today()
    return _task_to_read(add_task(store, data, today), today)


@router.get("/stats", response_model=TaskStats)
async def get_task_stats(store: CurrentStore):
    return task_counts(store.tasks)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: str, store: CurrentStore):
    task = resolve_task(store.tasks, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return _task_to_read(task, date.today())


@router.post("/{task_id}/toggle", response_model=TaskRead)
async def toggle_task(task_id: str, store: CurrentStore):
    task = toggle_task_complete(store.tasks, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return _task_to_read(task, date.today())
