from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticCustomError


def require(value: Any, message: str) -> Any:
    """Reject missing or blank values with a field-level message."""
    if value is None:
        raise PydanticCustomError("required", message)
    if isinstance(value, str) and not value.strip():
        raise PydanticCustomError("required", message)
    if isinstance(value, (list, tuple)) and len(value) == 0:
        raise PydanticCustomError("required", message)
    return value


class MessageResponse(BaseModel):
    msg: str
