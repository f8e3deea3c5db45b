from enum import Enum
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from taskboard.db.base import Base


class UserRelation(str, Enum):
    TEAMS = "teams"
    TASKS = "tasks"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String(50), unique=True, index=True, nullable=False)  # natural key used by every lookup
    name = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    version_id = Column(Integer, nullable=False)

    teams = relationship("Team", secondary="team_users", back_populates="users")
    # Tasks the user is responsible for
    tasks = relationship("Task", foreign_keys="[Task.responsible_id]", back_populates="responsible")
    created_tasks = relationship("Task", foreign_keys="[Task.creator_id]", back_populates="creator")
    comments = relationship("Comment", back_populates="author")

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<User(id={self.id}, user_name='{self.user_name}')>"
