from sqlalchemy import Column, DateTime, ForeignKey, JSON, String, Text
from sqlalchemy.orm import relationship

from devconnector.db.database import Base, generate_id, utcnow


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(32), primary_key=True, index=True, default=generate_id)
    user_id = Column(String(32), ForeignKey("users.id"), unique=True, index=True, nullable=False)
    company = Column(String, nullable=True)
    website = Column(String, nullable=True)
    location = Column(String, nullable=True)
    status = Column(String, nullable=False)
    bio = Column(Text, nullable=True)
    githubusername = Column(String, nullable=True)

    skills = Column(JSON, default=list)  # List of skill names
    experience = Column(JSON, default=list)  # Newest first, each entry carries its own id
    education = Column(JSON, default=list)  # Newest first, each entry carries its own id
    social = Column(JSON, default=dict)  # Network name -> URL

    date = Column(DateTime(timezone=True), default=utcnow)

    user = relationship("User", back_populates="profile")
