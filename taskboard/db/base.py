from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import the models so they get registered with Base
from taskboard.models import user, team, project, task, comment
