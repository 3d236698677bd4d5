from todo_api.errors import ValidationError
from todo_api.models.task import Task
from todo_api.schemas.task import TaskOut
from todo_api.utils.policy import authorize_record, can_view_all, require_admin


def _clean_title(title):
    if not title or not title.strip():
        raise ValidationError("title cannot be empty")
    return title.strip()


def list_tasks(store, principal):
    """Admins see every task (with owner names), everyone else only their own."""
    if can_view_all(principal.role):
        return store.list_all_tasks()
    return store.list_tasks_by_owner(principal.user_id)


def list_all_tasks(store, principal):
    require_admin(principal)
    return store.list_all_tasks()


def get_task(store, principal, task_id):
    return authorize_record(store.find_task_by_id(task_id), principal)


def create_task(store, principal, title):
    task = Task(title=_clean_title(title), is_completed=False, owner_id=principal.user_id)
    return store.insert_task(task)


def update_task(store, principal, task_id, title, is_completed):
    task = authorize_record(store.find_task_by_id(task_id), principal)
    task.title = _clean_title(title)
    task.is_completed = bool(is_completed)
    return store.update_task(task)


def delete_task(store, principal, task_id):
    """Delete a task and return a snapshot of what was removed."""
    task = authorize_record(store.find_task_by_id(task_id), principal)
    removed = TaskOut.model_validate(task)
    store.delete_task(task)
    return removed
