from typing import Optional

from pydantic import BaseModel, ConfigDict

from todo_api.models.user import Role


class UserCreate(BaseModel):
    # Presence and length rules live in the account service so that the
    # same checks apply to the admin tool.
    username: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: Role
