from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope returned for every outcome, failures included."""

    success: bool
    data: Optional[T] = None
    message: str = ""


def ok(data=None, message=""):
    return ApiResponse(success=True, data=data, message=message)


def fail(message):
    return ApiResponse(success=False, data=None, message=message)
