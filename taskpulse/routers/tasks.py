from typing import List

from fastapi import APIRouter, Depends, status

from taskpulse.schemas import (
    AssignRequest, CommentCreate, EnhancedTaskOut, MessageOut, TaskCreate, TaskOut,
    TaskStatusUpdate, TaskUpdate, UserRecord,
)
from taskpulse.services.task_service import TaskService
from taskpulse.services.views import enhanced_tasks, task_out, users_by_id
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


def _render(store: Store, task) -> TaskOut:
    return task_out(task, users_by_id(store))


@router.get("/tasks", response_model=List[TaskOut])
def list_tasks(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    users = users_by_id(store)
    return [task_out(t, users) for t in TaskService(store).list_tasks()]


@router.post("/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskCreate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, TaskService(store).create_task(payload, current_user))


@router.put("/tasks/{task_id}", response_model=TaskOut)
def update_task(
    task_id: str,
    payload: TaskUpdate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, TaskService(store).update_task(task_id, payload, current_user))


@router.patch("/tasks/{task_id}/status", response_model=TaskOut)
def move_task(
    task_id: str,
    payload: TaskStatusUpdate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, TaskService(store).move_task(task_id, payload.status, current_user))


@router.delete("/tasks/{task_id}", response_model=MessageOut)
def delete_task(
    task_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    TaskService(store).delete_task(task_id, current_user)
    return MessageOut(message="Task deleted successfully")


@router.post("/tasks/{task_id}/assign", response_model=TaskOut)
def assign_task(
    task_id: str,
    payload: AssignRequest,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, TaskService(store).assign_users(task_id, payload.user_ids, current_user))


@router.post("/tasks/{task_id}/comments", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def add_comment(
    task_id: str,
    payload: CommentCreate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, TaskService(store).add_comment(task_id, payload.text, current_user))


@router.get("/enhanced-tasks", response_model=List[EnhancedTaskOut])
def list_enhanced_tasks(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return enhanced_tasks(store, TaskService(store).list_tasks())


@router.get("/my-tasks", response_model=List[EnhancedTaskOut])
def list_my_tasks(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return enhanced_tasks(store, TaskService(store).my_tasks(current_user))
