from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from devconnector.core.errors import BadRequestError, NotAuthorizedError, NotFoundError
from devconnector.models.post import Comment, CommentLike, Post, PostLike
from devconnector.models.user import User

POST_NOT_FOUND = "Post not found"
COMMENT_NOT_FOUND = "Comment does not exist"
NOT_AUTHORIZED = "User not authorized"


def add_like(likes: list, user_id: str, like_cls, already_liked: str) -> None:
    """Put a like by ``user_id`` at the front of ``likes`` unless one exists."""
    if any(like.user_id == user_id for like in likes):
        raise BadRequestError(already_liked)
    likes.insert(0, like_cls(user_id=user_id))


def remove_like(likes: list, user_id: str, not_liked: str) -> None:
    """Remove the first like by ``user_id`` from ``likes``."""
    for like in likes:
        if like.user_id == user_id:
            likes.remove(like)
            return
    raise BadRequestError(not_liked)


def ensure_author(author_id: str, user: User) -> None:
    if str(author_id) != str(user.id):
        logger.warning(f"User {user.id} tried to modify content owned by {author_id}")
        raise NotAuthorizedError(NOT_AUTHORIZED)


def _find_comment(post: Post, comment_id: str) -> Comment:
    comment: Optional[Comment] = next((c for c in post.comments if c.id == comment_id), None)
    if not comment:
        raise NotFoundError(COMMENT_NOT_FOUND)
    return comment


class PostService:
    @staticmethod
    async def create_post(db: Session, user: User, text: str) -> Post:
        """Create a post signed with the author's current name and avatar."""
        post = Post(text=text, name=user.name, avatar=user.avatar, user_id=user.id)
        db.add(post)
        db.commit()
        db.refresh(post)
        logger.info(f"User {user.id} created post {post.id}")
        return post

    @staticmethod
    async def get_posts(db: Session) -> List[Post]:
        """Get all posts, newest first."""
        return db.query(Post).order_by(Post.date.desc()).all()

    @staticmethod
    async def get_post(db: Session, post_id: str) -> Post:
        post = db.query(Post).filter(Post.id == post_id).first()
        if not post:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    @staticmethod
    async def delete_post(db: Session, user: User, post_id: str) -> None:
        """Delete a post. Only its author may do so."""
        post = await PostService.get_post(db, post_id)
        ensure_author(post.user_id, user)
        db.delete(post)
        db.commit()
        logger.info(f"User {user.id} removed post {post_id}")

    @staticmethod
    async def like_post(db: Session, user: User, post_id: str) -> List[PostLike]:
        post = await PostService.get_post(db, post_id)
        add_like(post.likes, user.id, PostLike, "Post already liked")
        db.commit()
        return post.likes

    @staticmethod
    async def unlike_post(db: Session, user: User, post_id: str) -> List[PostLike]:
        post = await PostService.get_post(db, post_id)
        remove_like(post.likes, user.id, "Post has not yet been liked")
        db.commit()
        return post.likes

    @staticmethod
    async def add_comment(db: Session, user: User, post_id: str, text: str) -> List[Comment]:
        """Add a comment at the front of the post's comment list."""
        post = await PostService.get_post(db, post_id)
        post.comments.insert(0, Comment(text=text, name=user.name, avatar=user.avatar, user_id=user.id))
        db.commit()
        return post.comments

    @staticmethod
    async def remove_comment(db: Session, user: User, post_id: str, comment_id: str) -> List[Comment]:
        """Remove a comment. Only its author may do so."""
        post = await PostService.get_post(db, post_id)
        comment = _find_comment(post, comment_id)
        ensure_author(comment.user_id, user)
        post.comments.remove(comment)
        db.commit()
        return post.comments

    @staticmethod
    async def like_comment(db: Session, user: User, post_id: str, comment_id: str) -> List[CommentLike]:
        post = await PostService.get_post(db, post_id)
        comment = _find_comment(post, comment_id)
        add_like(comment.likes, user.id, CommentLike, "Comment already liked")
        db.commit()
        return comment.likes

    @staticmethod
    async def unlike_comment(db: Session, user: User, post_id: str, comment_id: str) -> List[CommentLike]:
        post = await PostService.get_post(db, post_id)
        comment = _find_comment(post, comment_id)
        remove_like(comment.likes, user.id, "Comment has not yet been liked")
        db.commit()
        return comment.likes
