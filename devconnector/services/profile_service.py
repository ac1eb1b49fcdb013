from typing import Any, Dict, List

from loguru import logger
from sqlalchemy.orm import Session

from devconnector.core.errors import NotFoundError
from devconnector.db.database import generate_id
from devconnector.models.profile import Profile
from devconnector.models.user import User
from devconnector.schemas.profile import EducationCreate, ExperienceCreate, ProfileUpsert

NO_PROFILE = "There is no profile for this user"
PROFILE_FIELDS = {"company", "website", "location", "bio", "status", "githubusername", "skills"}


def _entry(entry_in) -> Dict[str, Any]:
    entry = entry_in.model_dump(mode="json", by_alias=True)
    entry["id"] = generate_id()
    return entry


def _without(entries: List[Dict[str, Any]], entry_id: str, missing: str) -> List[Dict[str, Any]]:
    remaining = [entry for entry in entries if entry.get("id") != entry_id]
    if len(remaining) == len(entries):
        raise NotFoundError(missing)
    return remaining


class ProfileService:
    @staticmethod
    async def get_by_user(db: Session, user_id: str) -> Profile:
        """Get a user's profile or raise NotFoundError."""
        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if not profile:
            raise NotFoundError(NO_PROFILE)
        return profile

    @staticmethod
    async def get_profiles(db: Session) -> List[Profile]:
        """Get all profiles."""
        return db.query(Profile).order_by(Profile.date.desc()).all()

    @staticmethod
    async def upsert_profile(db: Session, user: User, profile_in: ProfileUpsert) -> Profile:
        """
        Create the user's profile, or update it if one exists.

        An update only touches the fields present in the request. Social
        links are replaced as a whole when at least one handle is sent.
        """
        profile = db.query(Profile).filter(Profile.user_id == user.id).first()
        if profile:
            fields = profile_in.model_dump(include=PROFILE_FIELDS, exclude_unset=True)
            social = profile_in.social()
            if social:
                fields["social"] = social
            for field, value in fields.items():
                setattr(profile, field, value)
        else:
            fields = profile_in.model_dump(include=PROFILE_FIELDS)
            profile = Profile(user_id=user.id, social=profile_in.social(), **fields)
            db.add(profile)
            logger.info(f"Created profile for user {user.id}")

        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    async def add_experience(db: Session, user: User, experience_in: ExperienceCreate) -> Profile:
        """Add an experience entry at the front of the list."""
        profile = await ProfileService.get_by_user(db, user.id)
        profile.experience = [_entry(experience_in)] + list(profile.experience or [])
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    async def remove_experience(db: Session, user: User, exp_id: str) -> Profile:
        profile = await ProfileService.get_by_user(db, user.id)
        profile.experience = _without(profile.experience or [], exp_id, "Experience not found")
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    async def add_education(db: Session, user: User, education_in: EducationCreate) -> Profile:
        """Add an education entry at the front of the list."""
        profile = await ProfileService.get_by_user(db, user.id)
        profile.education = [_entry(education_in)] + list(profile.education or [])
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    async def remove_education(db: Session, user: User, edu_id: str) -> Profile:
        profile = await ProfileService.get_by_user(db, user.id)
        profile.education = _without(profile.education or [], edu_id, "Education not found")
        db.commit()
        db.refresh(profile)
        return profile
