from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from devconnector.core.security import create_access_token
from devconnector.db.database import get_db
from devconnector.schemas.token import TokenResponse
from devconnector.schemas.user import UserCreate
from devconnector.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=TokenResponse)
async def register(
    user_in: UserCreate,
    db: Session = Depends(get_db)
) -> Any:
    """Register a user and return a token for the new account."""
    user = await UserService.create_user(db, user_in)
    return TokenResponse(token=create_access_token(user.id))
