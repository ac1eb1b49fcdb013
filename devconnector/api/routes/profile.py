from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from devconnector.api.dependencies import body_or_defaults, get_current_user
from devconnector.clients.github_client import GitHubClient, get_github_client
from devconnector.core.errors import NotFoundError
from devconnector.db.database import get_db
from devconnector.models.user import User
from devconnector.schemas.base import MessageResponse
from devconnector.schemas.profile import EducationCreate, ExperienceCreate, ProfileResponse, ProfileUpsert
from devconnector.services.profile_service import ProfileService
from devconnector.services.user_service import UserService

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def read_my_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Get the current user's profile."""
    return await ProfileService.get_by_user(db, current_user.id)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    current_user: User = Depends(get_current_user),
    profile_in: ProfileUpsert = Depends(body_or_defaults(ProfileUpsert)),
    db: Session = Depends(get_db)
) -> Any:
    """Create or update the current user's profile."""
    return await ProfileService.upsert_profile(db, current_user, profile_in)


@router.get("", response_model=List[ProfileResponse])
async def read_profiles(db: Session = Depends(get_db)) -> Any:
    return await ProfileService.get_profiles(db)


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def read_profile_by_user(
    user_id: str,
    db: Session = Depends(get_db)
) -> Any:
    """Get a profile by the owning user's ID."""
    try:
        return await ProfileService.get_by_user(db, user_id)
    except NotFoundError:
        raise NotFoundError("Profile not found")


@router.delete("", response_model=MessageResponse)
async def delete_account(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Delete the current user's posts, profile and account."""
    await UserService.delete_user(db, current_user)
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    experience_in: ExperienceCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.add_experience(db, current_user, experience_in)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def delete_experience(
    exp_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.remove_experience(db, current_user, exp_id)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    education_in: EducationCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.add_education(db, current_user, education_in)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def delete_education(
    edu_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.remove_education(db, current_user, edu_id)


@router.get("/github/{username}", response_model=List[Dict[str, Any]])
async def read_github_repos(
    username: str,
    github: GitHubClient = Depends(get_github_client)
) -> Any:
    """Get the latest public repositories of a GitHub user."""
    return await github.get_repos(username)
