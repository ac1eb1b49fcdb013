from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from devconnector.api.dependencies import get_current_user
from devconnector.core.security import create_access_token
from devconnector.db.database import get_db
from devconnector.models.user import User
from devconnector.schemas.token import TokenResponse
from devconnector.schemas.user import UserLogin, UserResponse
from devconnector.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserResponse)
async def read_current_user(
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get the user the token was issued for."""
    return current_user


@router.post("", response_model=TokenResponse)
async def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
) -> Any:
    """Exchange email and password for a token."""
    user = await UserService.authenticate(db, credentials.email, credentials.password)
    return TokenResponse(token=create_access_token(user.id))
