# taskpulse/services/views.py
# Read-side rendering: assignee summaries and inlined relations are looked up
# at read time, never stored.
from typing import Dict, Iterable, List, Optional

from taskpulse.schemas import (
    ClientRecord, EnhancedTaskOut, ProjectOut, ProjectRecord, TaskOut, TaskRecord,
    UserRecord, UserSummary,
)
from taskpulse.storage import Store


def users_by_id(store: Store) -> Dict[str, UserRecord]:
    return {u.id: u for u in store.users.list()}


def user_summary(user: UserRecord) -> UserSummary:
    return UserSummary(id=user.id, name=user.display_name, email=user.email, role=user.role)


def summarize(user_ids: Iterable[str], users: Dict[str, UserRecord]) -> List[UserSummary]:
    return [user_summary(users[uid]) for uid in user_ids if uid in users]


def task_out(task: TaskRecord, users: Dict[str, UserRecord]) -> TaskOut:
    return TaskOut(**task.model_dump(), assignees=summarize(task.assignee_ids, users))


def project_out(project: ProjectRecord, users: Dict[str, UserRecord]) -> ProjectOut:
    return ProjectOut(**project.model_dump(), assignees=summarize(project.assigned_user_ids, users))


def enhanced_task(
    task: TaskRecord,
    users: Dict[str, UserRecord],
    clients: Dict[str, ClientRecord],
    projects: Dict[str, ProjectRecord],
) -> EnhancedTaskOut:
    client: Optional[ClientRecord] = clients.get(task.client_id) if task.client_id else None
    project: Optional[ProjectRecord] = projects.get(task.project_id) if task.project_id else None
    return EnhancedTaskOut(
        **task.model_dump(),
        assignees=summarize(task.assignee_ids, users),
        client=client,
        project=project,
    )


def enhanced_tasks(store: Store, tasks: Iterable[TaskRecord]) -> List[EnhancedTaskOut]:
    users = users_by_id(store)
    clients = {c.id: c for c in store.clients.list()}
    projects = {p.id: p for p in store.projects.list()}
    return [enhanced_task(t, users, clients, projects) for t in tasks]
