from fastapi import APIRouter, Depends

from todo_api.dependencies import get_store, get_token_service
from todo_api.schemas.response import ApiResponse, ok
from todo_api.schemas.user import UserCreate, UserOut
from todo_api.services import accounts

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[UserOut])
def register(user: UserCreate, store=Depends(get_store)):
    new_user = accounts.register(store, user.username, user.password)
    return ok(UserOut.model_validate(new_user), "Registration successful")


@router.post("/login", response_model=ApiResponse[str])
def login(user: UserCreate, store=Depends(get_store), tokens=Depends(get_token_service)):
    token = accounts.login(store, tokens, user.username, user.password)
    return ok(token, "Login successful")
