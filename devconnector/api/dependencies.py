from typing import Callable, Optional, Type, TypeVar

from fastapi import Body, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from devconnector.core.errors import NotAuthorizedError
from devconnector.core.security import verify_token
from devconnector.db.database import get_db
from devconnector.models.user import User
from devconnector.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)
# Header used by the original web client
token_header = APIKeyHeader(name="x-auth-token", auto_error=False)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def get_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    header_token: Optional[str] = Depends(token_header),
) -> str:
    """Extract the access token from the Authorization or x-auth-token header."""
    token = credentials.credentials if credentials else header_token
    if not token:
        raise NotAuthorizedError("No token, authorization denied")
    return token


async def get_current_user(
    token: str = Depends(get_token),
    db: Session = Depends(get_db)
) -> User:
    """Get current user from access token."""
    try:
        user_id = verify_token(token)
    except ValueError as e:
        logger.warning(str(e))
        raise NotAuthorizedError("Token is not valid")

    user = await UserService.get_user(db, user_id)
    if not user:
        raise NotAuthorizedError("Token is not valid")
    return user


def body_or_defaults(model: Type[ModelT]) -> Callable:
    """
    Build a dependency that parses the request body into ``model``.

    A request sent without a body is validated as an empty object, so the
    client gets the model's own field messages instead of a generic
    "Field required" for the whole body.
    """
    async def parse_body(payload: Optional[model] = Body(default=None)) -> ModelT:
        if payload is not None:
            return payload
        try:
            return model()
        except ValidationError as e:
            raise RequestValidationError(
                [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
            )

    return parse_body
