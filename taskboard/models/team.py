from enum import Enum
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Table
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from taskboard.db.base import Base


class TeamRelation(str, Enum):
    USERS = "users"
    PROJECTS = "projects"


# Composite primary key: a user appears at most once per team
team_users = Table(
    "team_users",
    Base.metadata,
    Column("team_id", Integer, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Team(Base):
    __tablename__ = "teams"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    version_id = Column(Integer, nullable=False)

    users = relationship("User", secondary=team_users, back_populates="teams")
    projects = relationship("Project", back_populates="team")

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}')>"
