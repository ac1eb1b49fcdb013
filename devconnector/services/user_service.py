import hashlib
from typing import Optional

from loguru import logger
from sqlalchemy.orm import Session

from devconnector.core.errors import BadRequestError
from devconnector.core.security import get_password_hash, verify_password
from devconnector.models.user import User
from devconnector.schemas.user import UserCreate


def gravatar_url(email: str, size: int = 200) -> str:
    """Build the gravatar URL used as the default avatar for an email."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


class UserService:
    @staticmethod
    async def get_user(db: Session, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    async def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email."""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    async def create_user(db: Session, user_in: UserCreate) -> User:
        """Register a new user, rejecting duplicate emails."""
        if await UserService.get_user_by_email(db, user_in.email):
            logger.warning(f"Registration rejected, email already in use: {user_in.email}")
            raise BadRequestError("User already exists", errors=[{"msg": "User already exists"}])

        db_user = User(
            name=user_in.name,
            email=user_in.email,
            avatar=gravatar_url(user_in.email),
            hashed_password=get_password_hash(user_in.password),
        )
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        logger.info(f"Registered user {db_user.id}")
        return db_user

    @staticmethod
    async def authenticate(db: Session, email: str, password: str) -> User:
        """Authenticate user by email and password."""
        user = await UserService.get_user_by_email(db, email)
        if not user or not verify_password(password, user.hashed_password):
            raise BadRequestError("Invalid Credentials", errors=[{"msg": "Invalid Credentials"}])
        return user

    @staticmethod
    async def delete_user(db: Session, user: User) -> None:
        """Delete a user together with their profile and posts."""
        user_id = user.id
        db.delete(user)
        db.commit()
        logger.info(f"Deleted user {user_id} with profile and posts")
