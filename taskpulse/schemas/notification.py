# taskpulse/schemas/notification.py
from pydantic import Field
from typing import Optional, Literal

from taskpulse.schemas.common import CamelModel, UtcDateTime, new_id, utcnow

NotificationType = Literal[
    "task_assignment",
    "project_assignment",
    "task_status_change",
    "system",
]


class NotificationRecord(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    type: NotificationType = "system"
    title: str
    message: str
    timestamp: UtcDateTime = Field(default_factory=utcnow)
    read: bool = False

    # Related entity references (optional)
    task_id: Optional[str] = None
    project_id: Optional[str] = None
    entity_id: Optional[str] = None
    entity_type: Optional[str] = None


NotificationOut = NotificationRecord
