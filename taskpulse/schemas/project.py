# taskpulse/schemas/project.py
from pydantic import Field
from typing import Optional, List, Literal

from taskpulse.schemas.common import CamelModel, UpdateModel, UtcDateTime, new_id
from taskpulse.schemas.user import UserSummary

ProjectStatus = Literal["active", "completed", "on-hold"]


class ProjectRecord(CamelModel):
    id: str = Field(default_factory=new_id)
    name: str
    description: Optional[str] = None
    status: ProjectStatus = "active"
    start_date: Optional[UtcDateTime] = None
    end_date: Optional[UtcDateTime] = None
    client_id: Optional[str] = None
    created_by: Optional[str] = None
    assigned_user_ids: List[str] = []


class ProjectOut(ProjectRecord):
    assignees: List[UserSummary] = []


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: ProjectStatus = "active"
    start_date: Optional[UtcDateTime] = None
    end_date: Optional[UtcDateTime] = None
    client_id: Optional[str] = None
    assigned_user_ids: List[str] = []


class AdminProjectCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    start_date: UtcDateTime
    end_date: UtcDateTime


class ProjectUpdate(UpdateModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[UtcDateTime] = None
    end_date: Optional[UtcDateTime] = None
    client_id: Optional[str] = None
    assigned_user_ids: Optional[List[str]] = None


class AssignRequest(CamelModel):
    user_ids: List[str]
