from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from devconnector.api.dependencies import body_or_defaults, get_current_user
from devconnector.db.database import get_db
from devconnector.models.user import User
from devconnector.schemas.base import MessageResponse
from devconnector.schemas.post import CommentCreate, CommentResponse, LikeResponse, PostCreate, PostResponse
from devconnector.services.post_service import PostService

router = APIRouter()


@router.post("", response_model=PostResponse)
async def create_post(
    current_user: User = Depends(get_current_user),
    post_in: PostCreate = Depends(body_or_defaults(PostCreate)),
    db: Session = Depends(get_db)
) -> Any:
    """Create a post."""
    return await PostService.create_post(db, current_user, post_in.text)


@router.get("", response_model=List[PostResponse])
async def read_posts(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Get all posts, newest first."""
    return await PostService.get_posts(db)


@router.get("/{post_id}", response_model=PostResponse)
async def read_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await PostService.get_post(db, post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Delete a post. Author only."""
    await PostService.delete_post(db, current_user, post_id)
    return MessageResponse(msg="Post was removed")


@router.put("/like/{post_id}", response_model=List[LikeResponse])
async def like_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await PostService.like_post(db, current_user, post_id)


@router.put("/unlike/{post_id}", response_model=List[LikeResponse])
async def unlike_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await PostService.unlike_post(db, current_user, post_id)


@router.post("/comment/{post_id}", response_model=List[CommentResponse])
async def create_comment(
    post_id: str,
    current_user: User = Depends(get_current_user),
    comment_in: CommentCreate = Depends(body_or_defaults(CommentCreate)),
    db: Session = Depends(get_db)
) -> Any:
    """Comment on a post."""
    return await PostService.add_comment(db, current_user, post_id, comment_in.text)


@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentResponse])
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Delete a comment. Comment author only."""
    return await PostService.remove_comment(db, current_user, post_id, comment_id)


@router.put("/comment/like/{post_id}/{comment_id}", response_model=List[LikeResponse])
async def like_comment(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await PostService.like_comment(db, current_user, post_id, comment_id)


@router.put("/comment/unlike/{post_id}/{comment_id}", response_model=List[LikeResponse])
async def unlike_comment(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await PostService.unlike_comment(db, current_user, post_id, comment_id)
