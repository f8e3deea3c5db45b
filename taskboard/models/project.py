from enum import Enum
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from taskboard.db.base import Base


class ProjectRelation(str, Enum):
    TEAM = "team"
    TASKS = "tasks"


class Project(Base):
    __tablename__ = "projects"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    version_id = Column(Integer, nullable=False)

    team = relationship("Team", back_populates="projects")
    tasks = relationship("Task", back_populates="project")

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Project(id={self.id}, name='{self.name}', team_id={self.team_id})>"
