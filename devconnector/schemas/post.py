from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from devconnector.schemas.base import require

TEXT_REQUIRED = "Text is require"


class PostCreate(BaseModel):
    text: str = Field(default="", validate_default=True)

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        return require(v, TEXT_REQUIRED)


class CommentCreate(PostCreate):
    pass


class LikeResponse(BaseModel):
    id: str
    user: str = Field(validation_alias="user_id")

    class Config:
        from_attributes = True


class CommentResponse(BaseModel):
    id: str
    user: str = Field(validation_alias="user_id")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[LikeResponse] = []
    date: datetime

    class Config:
        from_attributes = True


class PostResponse(BaseModel):
    id: str
    user: str = Field(validation_alias="user_id")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[LikeResponse] = []
    comments: List[CommentResponse] = []
    date: datetime

    class Config:
        from_attributes = True
