from datetime import datetime, UTC
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class TaskCreate(BaseModel):
    title: str

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        if not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()


class TaskUpdate(TaskCreate):
    is_completed: bool = False


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    is_completed: bool
    created_at: datetime
    owner_id: int
    owner_username: Optional[str] = None

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, v):
        # SQLite drops the offset; stored values are always UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)
