"""
Task lifecycle.

A task is either pending (completed = False) or completed. The only
transition is a toggle that flips the flag. "Overdue" is never stored; it is
re-derived from the due date and the evaluation day on every read.
"""
import logging
from datetime import date
from typing import Iterable, Optional

from vinemanager.db.store import VineyardStore
from vinemanager.models.task import Task, TaskPriority
from vinemanager.schemas.task import TaskCreate, TaskStats, TaskView

logger = logging.getLogger(__name__)


def resolve_task(tasks: Iterable[Task], task_id: str) -> Optional[Task]:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def add_task(store: VineyardStore, data: TaskCreate, today: Optional[date] = None) -> Task:
    task = Task(
        id=store.next_id("tasks"),
        created_at=today or date.today(),
        completed=False,
        **data.model_dump(),
    )
    # Newest first
    store.tasks.insert(0, task)
    logger.info("add_task: added task %s (%s)", task.id, task.title)
    return task


def toggle_task_complete(tasks: Iterable[Task], task_id: str) -> Optional[Task]:
    """Flip a task between pending and completed. Unknown ids are a no-op."""
    task = resolve_task(tasks, task_id)
    if task is None:
        logger.debug("toggle_task_complete: no task with id %s", task_id)
        return None
    task.completed = not task.completed
    logger.info("toggle_task_complete: task %s completed=%s", task.id, task.completed)
    return task


def is_overdue(task: Task, today: Optional[date] = None) -> bool:
    if task.completed:
        return False
    return task.due_date < (today or date.today())


def pending_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [t for t in tasks if not t.completed]


def completed_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [t for t in tasks if t.completed]


def filter_tasks(tasks: Iterable[Task], view: TaskView) -> list[Task]:
    if view == TaskView.pending:
        return pending_tasks(tasks)
    if view == TaskView.completed:
        return completed_tasks(tasks)
    return list(tasks)


def task_counts(tasks: Iterable[Task]) -> TaskStats:
    tasks = list(tasks)
    pending = pending_tasks(tasks)
    return TaskStats(
        pending=len(pending),
        completed=len(tasks) - len(pending),
        high_priority=sum(1 for t in pending if t.priority == TaskPriority.high),
        total=len(tasks),
    )


def overdue_tasks(tasks: Iterable[Task], today: Optional[date] = None) -> list[Task]:
    today = today or date.today()
    return [t for t in tasks if is_overdue(t, today)]
