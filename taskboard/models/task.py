import enum
from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, DateTime, Text, Enum
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from taskboard.db.base import Base


class TaskStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class TaskRelation(str, enum.Enum):
    PROJECT = "project"
    RESPONSIBLE = "responsible"
    CREATOR = "creator"
    COMMENTS = "comments"


class Task(Base):
    __tablename__ = "tasks"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(Enum(TaskStatus, name="task_status"), default=TaskStatus.PENDING, nullable=False, index=True)
    deleted = Column(Boolean, default=False, nullable=False)  # soft delete
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    responsible_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    version_id = Column(Integer, nullable=False)

    project = relationship("Project", back_populates="tasks")
    creator = relationship("User", foreign_keys=[creator_id], back_populates="created_tasks")
    responsible = relationship("User", foreign_keys=[responsible_id], back_populates="tasks")
    comments = relationship("Comment", back_populates="task")

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self):
        return f"<Task(id={self.id}, name='{self.name}', status='{self.status}', deleted={self.deleted})>"
