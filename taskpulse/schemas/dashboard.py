# taskpulse/schemas/dashboard.py
from typing import Dict, List

from taskpulse.schemas.common import CamelModel, UtcDateTime
from taskpulse.schemas.client import ClientOut
from taskpulse.schemas.project import ProjectOut
from taskpulse.schemas.task import EnhancedTaskOut, TaskStatus


class Analytics(CamelModel):
    tasks_by_status: Dict[str, int]
    tasks_by_project: Dict[str, int]
    total_tasks: int
    total_projects: int
    total_clients: int
    completed_tasks: int
    active_projects: int
    overdue_tasks: int


class CalendarEvent(CamelModel):
    id: str
    title: str
    start: UtcDateTime
    end: UtcDateTime
    status: TaskStatus


class ClientDetails(CamelModel):
    client: ClientOut
    projects: List[ProjectOut]
    tasks: List[EnhancedTaskOut]
    tasks_by_project: Dict[str, List[EnhancedTaskOut]]
