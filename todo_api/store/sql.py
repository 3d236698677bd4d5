import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todo_api.errors import Conflict, Unauthenticated
from todo_api.models.task import Task
from todo_api.models.user import User
from todo_api.store.base import TaskWithOwner

logger = logging.getLogger(__name__)


class SqlRecordStore:
    """RecordStore backed by a SQLAlchemy session; one commit per call."""

    def __init__(self, db: Session):
        self.db = db

    def find_user_by_username(self, username):
        return self.db.query(User).filter(User.username == username).first()

    def insert_user(self, user):
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration of the same name
            self.db.rollback()
            logger.info("duplicate username rejected by the database: %s", user.username)
            raise Conflict("Username already exists")
        self.db.refresh(user)
        return user

    def find_task_by_id(self, task_id):
        return self.db.get(Task, task_id)

    def list_tasks_by_owner(self, owner_id):
        return self.db.query(Task).filter(Task.owner_id == owner_id).order_by(Task.id).all()

    def list_all_tasks(self):
        rows = (
            self.db.query(Task, User.username)
            .join(User, Task.owner_id == User.id)
            .order_by(Task.id)
            .all()
        )
        return [
            TaskWithOwner(
                id=task.id,
                title=task.title,
                is_completed=task.is_completed,
                created_at=task.created_at,
                owner_id=task.owner_id,
                owner_username=username,
            )
            for task, username in rows
        ]

    def insert_task(self, task):
        self.db.add(task)
        try:
            self.db.commit()
        except IntegrityError:
            # owner_id comes from a token whose user is no longer in the table
            self.db.rollback()
            logger.info("task insert rejected: no user with id %s", task.owner_id)
            raise Unauthenticated()
        self.db.refresh(task)
        return task

    def update_task(self, task):
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def delete_task(self, task):
        self.db.delete(task)
        self.db.commit()
