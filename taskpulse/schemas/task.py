# taskpulse/schemas/task.py
from pydantic import Field
from typing import Optional, List, Literal

from taskpulse.schemas.common import CamelModel, UpdateModel, UtcDateTime, new_id, utcnow
from taskpulse.schemas.user import UserSummary
from taskpulse.schemas.client import ClientOut
from taskpulse.schemas.project import ProjectRecord

TaskStatus = Literal["draft", "in-progress", "under-review", "completed", "canceled"]


class SubTask(CamelModel):
    id: str = Field(default_factory=new_id)
    title: str
    completed: bool = False


class Comment(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    text: str
    created_at: UtcDateTime = Field(default_factory=utcnow)


class EditHistoryEntry(CamelModel):
    user_id: str
    timestamp: UtcDateTime
    changes: str


class TaskRecord(CamelModel):
    id: str = Field(default_factory=new_id)
    title: str
    description: Optional[str] = None
    status: TaskStatus = "draft"
    due_date: Optional[UtcDateTime] = None
    created_by: str
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    assignee_ids: List[str] = []
    sub_tasks: List[SubTask] = []
    comments: List[Comment] = []
    attachments: List[str] = []
    edit_history: List[EditHistoryEntry] = []
    created_at: UtcDateTime = Field(default_factory=utcnow)
    updated_at: UtcDateTime = Field(default_factory=utcnow)


class TaskOut(TaskRecord):
    assignees: List[UserSummary] = []


class EnhancedTaskOut(TaskOut):
    client: Optional[ClientOut] = None
    project: Optional[ProjectRecord] = None


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: TaskStatus = "draft"
    due_date: Optional[UtcDateTime] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    assignee_ids: List[str] = []
    sub_tasks: List[SubTask] = []
    comments: List[Comment] = []
    attachments: List[str] = []


class TaskUpdate(UpdateModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[UtcDateTime] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    assignee_ids: Optional[List[str]] = None
    sub_tasks: Optional[List[SubTask]] = None
    comments: Optional[List[Comment]] = None
    attachments: Optional[List[str]] = None


class TaskStatusUpdate(CamelModel):
    status: TaskStatus


class CommentCreate(CamelModel):
    text: str = Field(..., min_length=1)
