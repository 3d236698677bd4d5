from typing import List

from fastapi import APIRouter, Depends

from todo_api.dependencies import get_current_user, get_store
from todo_api.schemas.response import ApiResponse, ok
from todo_api.schemas.task import TaskOut
from todo_api.services import tasks as task_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/all-todos", response_model=ApiResponse[List[TaskOut]])
def all_todos(principal=Depends(get_current_user), store=Depends(get_store)):
    items = task_service.list_all_tasks(store, principal)
    return ok([TaskOut.model_validate(t) for t in items], "All users' tasks")
