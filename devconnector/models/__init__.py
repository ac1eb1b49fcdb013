# Import every model so Base.metadata sees all tables
from .user import User
from .profile import Profile
from .post import Post, PostLike, Comment, CommentLike

__all__ = ["User", "Profile", "Post", "PostLike", "Comment", "CommentLike"]
