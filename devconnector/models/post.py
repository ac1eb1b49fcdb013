from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from devconnector.db.database import Base, generate_id, utcnow


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, index=True, default=generate_id)
    user_id = Column(String(32), ForeignKey("users.id"), index=True, nullable=False)
    text = Column(Text, nullable=False)
    name = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), default=utcnow, index=True)

    author = relationship("User", back_populates="posts")
    likes = relationship(
        "PostLike",
        order_by="PostLike.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    comments = relationship(
        "Comment",
        back_populates="post",
        order_by="Comment.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )


class PostLike(Base):
    __tablename__ = "post_likes"

    id = Column(String(32), primary_key=True, default=generate_id)
    post_id = Column(String(32), ForeignKey("posts.id", ondelete="CASCADE"), index=True, nullable=False)
    # Plain reference: likes outlive the account that made them
    user_id = Column(String(32), index=True, nullable=False)
    position = Column(Integer)


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(32), primary_key=True, index=True, default=generate_id)
    post_id = Column(String(32), ForeignKey("posts.id", ondelete="CASCADE"), index=True, nullable=False)
    user_id = Column(String(32), index=True, nullable=False)
    text = Column(Text, nullable=False)
    name = Column(String, nullable=True)
    avatar = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), default=utcnow)
    position = Column(Integer)

    post = relationship("Post", back_populates="comments")
    likes = relationship(
        "CommentLike",
        order_by="CommentLike.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )


class CommentLike(Base):
    __tablename__ = "comment_likes"

    id = Column(String(32), primary_key=True, default=generate_id)
    comment_id = Column(String(32), ForeignKey("comments.id", ondelete="CASCADE"), index=True, nullable=False)
    user_id = Column(String(32), index=True, nullable=False)
    position = Column(Integer)
