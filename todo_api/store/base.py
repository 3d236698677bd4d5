from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol

from todo_api.models.task import Task
from todo_api.models.user import User


@dataclass(frozen=True)
class TaskWithOwner:
    """A task annotated with its owner's username, for privileged listings."""

    id: int
    title: str
    is_completed: bool
    created_at: datetime
    owner_id: int
    owner_username: str


class RecordStore(Protocol):
    """What the services need from persistence.

    Each call is expected to be atomic on its own; the services never span
    a transaction across calls.
    """

    def find_user_by_username(self, username: str) -> Optional[User]: ...

    def insert_user(self, user: User) -> User: ...

    def find_task_by_id(self, task_id: int) -> Optional[Task]: ...

    def list_tasks_by_owner(self, owner_id: int) -> List[Task]: ...

    def list_all_tasks(self) -> List[TaskWithOwner]: ...

    def insert_task(self, task: Task) -> Task: ...

    def update_task(self, task: Task) -> Task: ...

    def delete_task(self, task: Task) -> None: ...
