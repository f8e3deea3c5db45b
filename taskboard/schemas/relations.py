"""
Output schemas that embed related entities.

Each one matches the relations loaded by the service operation that
produces it, so serialization never triggers a lazy load.
"""

from typing import List, Optional

from taskboard.schemas.user import UserOut
from taskboard.schemas.team import TeamOut
from taskboard.schemas.project import ProjectOut
from taskboard.schemas.task import TaskOut
from taskboard.schemas.comment import CommentOut


class UserDetail(UserOut):
    """User with teams and the tasks it is responsible for"""
    teams: List[TeamOut] = []
    tasks: List[TaskOut] = []


class TeamDetail(TeamOut):
    """Team with members and projects"""
    users: List[UserOut] = []
    projects: List[ProjectOut] = []


class ProjectDetail(ProjectOut):
    team: TeamOut
    tasks: List[TaskOut] = []


class TaskDetail(TaskOut):
    project: ProjectOut
    creator: UserOut
    responsible: Optional[UserOut] = None
    comments: List[CommentOut] = []


class CommentDetail(CommentOut):
    author: UserOut
