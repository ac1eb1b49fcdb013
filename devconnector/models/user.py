from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from devconnector.db.database import Base, generate_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, index=True, default=generate_id)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    avatar = Column(String, nullable=True)
    date = Column(DateTime(timezone=True), default=utcnow)

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")
