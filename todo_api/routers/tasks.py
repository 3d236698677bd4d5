from typing import List

from fastapi import APIRouter, Depends

from todo_api.dependencies import get_current_user, get_store
from todo_api.schemas.response import ApiResponse, ok
from todo_api.schemas.task import TaskCreate, TaskOut, TaskUpdate
from todo_api.services import tasks as task_service
from todo_api.utils.policy import can_view_all

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/", response_model=ApiResponse[List[TaskOut]])
def list_tasks(principal=Depends(get_current_user), store=Depends(get_store)):
    items = task_service.list_tasks(store, principal)
    message = "All users' tasks" if can_view_all(principal.role) else "Your tasks"
    return ok([TaskOut.model_validate(t) for t in items], message)


@router.post("/", response_model=ApiResponse[TaskOut])
def create_task(task: TaskCreate, principal=Depends(get_current_user), store=Depends(get_store)):
    new = task_service.create_task(store, principal, task.title)
    return ok(TaskOut.model_validate(new), "Task created")


@router.get("/{task_id}", response_model=ApiResponse[TaskOut])
def get_task(task_id: int, principal=Depends(get_current_user), store=Depends(get_store)):
    task = task_service.get_task(store, principal, task_id)
    return ok(TaskOut.model_validate(task), "Task found")


@router.put("/{task_id}", response_model=ApiResponse[TaskOut])
def update_task(task_id: int, changes: TaskUpdate, principal=Depends(get_current_user), store=Depends(get_store)):
    task = task_service.update_task(store, principal, task_id, changes.title, changes.is_completed)
    return ok(TaskOut.model_validate(task), "Task updated")


@router.delete("/{task_id}", response_model=ApiResponse[TaskOut])
def delete_task(task_id: int, principal=Depends(get_current_user), store=Depends(get_store)):
    removed = task_service.delete_task(store, principal, task_id)
    return ok(removed, "Task deleted")
