from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from devconnector.schemas.base import require
from devconnector.schemas.user import UserSummary

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


class ProfileUpsert(BaseModel):
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: str = Field(default="", validate_default=True)
    githubusername: Optional[str] = None
    skills: List[str] = Field(default_factory=list, validate_default=True)

    # Social handles, folded into Profile.social
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return require(v, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, v):
        """Accept "python, sql" as well as ["python", "sql"]."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            v = [str(skill).strip() for skill in v if str(skill).strip()]
        return require(v, "Skills is required")

    def social(self) -> Dict[str, str]:
        return {
            network: getattr(self, network)
            for network in SOCIAL_NETWORKS
            if getattr(self, network)
        }


class _ProfileEntryCreate(BaseModel):
    from_: Optional[date] = Field(default=None, alias="from", validate_default=True)
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("from_", mode="before")
    @classmethod
    def check_from(cls, v):
        return require(v, "From date is required")

    @field_validator("to", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def drop_end_date_when_current(self):
        # An ongoing position or course has no end date
        if self.current:
            self.to = None
        return self


class ExperienceCreate(_ProfileEntryCreate):
    title: str = Field(default="", validate_default=True)
    company: str = Field(default="", validate_default=True)
    location: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v):
        return require(v, "Title is required")

    @field_validator("company", mode="before")
    @classmethod
    def check_company(cls, v):
        return require(v, "Company is required")


class EducationCreate(_ProfileEntryCreate):
    school: str = Field(default="", validate_default=True)
    degree: str = Field(default="", validate_default=True)
    fieldofstudy: str = Field(default="", validate_default=True)

    @field_validator("school", mode="before")
    @classmethod
    def check_school(cls, v):
        return require(v, "School is required")

    @field_validator("degree", mode="before")
    @classmethod
    def check_degree(cls, v):
        return require(v, "Degree is required")

    @field_validator("fieldofstudy", mode="before")
    @classmethod
    def check_fieldofstudy(cls, v):
        return require(v, "Field of study is required")


class ExperienceEntry(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class EducationEntry(BaseModel):
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class ProfileResponse(BaseModel):
    id: str
    user: UserSummary
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str
    skills: List[str] = []
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    experience: List[ExperienceEntry] = []
    education: List[EducationEntry] = []
    social: Dict[str, str] = {}
    date: datetime

    class Config:
        from_attributes = True
