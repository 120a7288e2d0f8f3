from collections import Counter, defaultdict
from datetime import datetime
from typing import List, Optional

from taskpulse.schemas import Analytics, CalendarEvent, ClientDetails, as_utc, utcnow
from taskpulse.services.views import enhanced_tasks, project_out, users_by_id
from taskpulse.storage import Store
from taskpulse.utils.errors import NotFound

CLOSED_STATUSES = ("completed", "canceled")
NO_PROJECT = "no-project"


def get_analytics(store: Store, now: Optional[datetime] = None) -> Analytics:
    """Counts recomputed from the full collections on every call"""
    now = as_utc(now or utcnow())
    tasks = store.tasks.list()
    projects = store.projects.list()

    by_status = Counter(t.status for t in tasks)
    by_project = Counter(t.project_id for t in tasks if t.project_id)
    overdue = sum(
        1 for t in tasks
        if t.due_date is not None and t.due_date < now and t.status not in CLOSED_STATUSES
    )

    return Analytics(
        tasks_by_status=dict(by_status),
        tasks_by_project=dict(by_project),
        total_tasks=len(tasks),
        total_projects=len(projects),
        total_clients=len(store.clients.list()),
        completed_tasks=by_status.get("completed", 0),
        active_projects=sum(1 for p in projects if p.status == "active"),
        overdue_tasks=overdue,
    )


def get_calendar_events(store: Store) -> List[CalendarEvent]:
    return [
        CalendarEvent(id=t.id, title=t.title, start=t.due_date, end=t.due_date, status=t.status)
        for t in store.tasks.list()
        if t.due_date is not None
    ]


def get_client_details(store: Store, client_id: str) -> ClientDetails:
    client = store.clients.get(client_id)
    if client is None:
        raise NotFound("Client not found")

    users = users_by_id(store)
    tasks = enhanced_tasks(store, [t for t in store.tasks.list() if t.client_id == client_id])
    projects = [project_out(p, users) for p in store.projects.list() if p.client_id == client_id]

    grouped = defaultdict(list)
    for task in tasks:
        grouped[task.project_id or NO_PROJECT].append(task)

    return ClientDetails(client=client, projects=projects, tasks=tasks, tasks_by_project=dict(grouped))
