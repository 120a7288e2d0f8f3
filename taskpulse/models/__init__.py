from .user import User
from .client import Client
from .project import Project, project_members
from .task import Task, task_assignees
from .notification import Notification
from .note import Note
