"""
Demo data seeding script
Prepares the configured store and populates it with demo users, clients,
projects and tasks. Safe to run repeatedly: existing users (by email) and
clients/projects/tasks (by name or title) are skipped.
"""

from datetime import timedelta

from taskpulse.schemas import (
    AdminUserCreate, ClientCreate, ProjectCreate, TaskCreate, utcnow,
)
from taskpulse.services.client_service import ClientService
from taskpulse.services.project_service import ProjectService
from taskpulse.services.task_service import TaskService
from taskpulse.services.user_service import UserService
from taskpulse.storage import ADMIN_USER_ID, init_storage, open_store

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    {"first_name": "Anna", "last_name": "Peterson", "email": "anna@taskpulse.com", "role": "team-lead"},
    {"first_name": "Ivan", "last_name": "Smith", "email": "ivan@taskpulse.com", "role": "employee"},
    {"first_name": "Elena", "last_name": "Kozlova", "email": "elena@taskpulse.com", "role": "employee"},
    {"first_name": "Dmitry", "last_name": "Ivanov", "email": "dmitry@taskpulse.com", "role": "employee"},
    {"first_name": "Maria", "last_name": "Sidorova", "email": "maria@taskpulse.com", "role": "employee"},
]

DEMO_CLIENTS = [
    {
        "name": "TechnoProm",
        "contact_info": "Alexey Vasiliev, +7 (900) 123-4567",
        "description": "Large technology company focused on software",
        "links": ["https://technoprom.example.com"],
        "status": "active",
    },
    {
        "name": "EcoFood",
        "contact_info": "Maria Romanova, maria@ecofood.example.com",
        "description": "Organic grocery store chain",
        "links": ["https://ecofood.example.com"],
        "status": "active",
    },
    {
        "name": "FitnessGuru",
        "contact_info": "Sergey Morozov, +7 (900) 765-4321",
        "description": "Premium fitness center chain",
        "links": [],
        "status": "inactive",
    },
]

# client: index into DEMO_CLIENTS, members: indexes into DEMO_USERS
DEMO_PROJECTS = [
    {"name": "TechnoProm summer campaign", "description": "Ad campaign for the new product line",
     "client": 0, "status": "active", "start_days_ago": 30, "members": [0, 1]},
    {"name": "EcoFood app launch", "description": "Marketing support for the mobile app launch",
     "client": 1, "status": "active", "start_days_ago": 15, "members": [2, 3]},
    {"name": "FitnessGuru rebrand", "description": "Complete visual identity refresh",
     "client": 2, "status": "on-hold", "start_days_ago": 60, "members": [4]},
]

# project: index into DEMO_PROJECTS, due: days from now
DEMO_TASKS = [
    {"title": "Prepare campaign brief", "project": 0, "status": "completed", "due": -10, "assignees": [0]},
    {"title": "Design banner set", "project": 0, "status": "in-progress", "due": 5, "assignees": [1]},
    {"title": "Approve media plan", "project": 0, "status": "under-review", "due": -2, "assignees": [0, 1]},
    {"title": "Write app store copy", "project": 1, "status": "draft", "due": 12, "assignees": [2]},
    {"title": "Launch social teaser", "project": 1, "status": "in-progress", "due": 3, "assignees": [3]},
    {"title": "Collect logo references", "project": 2, "status": "canceled", "due": -20, "assignees": [4]},
]


def seed_demo_users(store):
    print(f"\n{'='*60}")
    print("Creating Demo Users")
    print(f"{'='*60}")

    service = UserService(store)
    users = []
    for data in DEMO_USERS:
        existing = service.find_by_email(data["email"])
        if existing:
            print(f"[SKIP] User {data['email']} already exists, skipping...")
            users.append(existing)
            continue
        user = service.create_user(AdminUserCreate(password=DEMO_PASSWORD, **data))
        print(f"[SUCCESS] Created user: {user.display_name} ({user.role})")
        users.append(user)
    return users


def seed_demo_clients(store, admin):
    print(f"\n{'='*60}")
    print("Creating Demo Clients")
    print(f"{'='*60}")

    service = ClientService(store)
    by_name = {c.name: c for c in service.list_clients()}
    clients = []
    for data in DEMO_CLIENTS:
        if data["name"] in by_name:
            print(f"[SKIP] Client {data['name']} already exists, skipping...")
            clients.append(by_name[data["name"]])
            continue
        client = service.create_client(ClientCreate(**data), admin)
        print(f"[SUCCESS] Created client: {client.name}")
        clients.append(client)
    return clients


def seed_demo_projects(store, admin, users, clients):
    print(f"\n{'='*60}")
    print("Creating Demo Projects")
    print(f"{'='*60}")

    service = ProjectService(store)
    by_name = {p.name: p for p in service.list_projects()}
    projects = []
    now = utcnow()
    for data in DEMO_PROJECTS:
        if data["name"] in by_name:
            print(f"[SKIP] Project {data['name']} already exists, skipping...")
            projects.append(by_name[data["name"]])
            continue
        project = service.create_project(ProjectCreate(
            name=data["name"],
            description=data["description"],
            status=data["status"],
            start_date=now - timedelta(days=data["start_days_ago"]),
            client_id=clients[data["client"]].id,
            assigned_user_ids=[users[i].id for i in data["members"]],
        ), admin)
        print(f"[SUCCESS] Created project: {project.name}")
        projects.append(project)
    return projects


def seed_demo_tasks(store, admin, users, projects):
    print(f"\n{'='*60}")
    print("Creating Demo Tasks")
    print(f"{'='*60}")

    service = TaskService(store)
    titles = {t.title for t in service.list_tasks()}
    now = utcnow()
    created = 0
    for data in DEMO_TASKS:
        if data["title"] in titles:
            print(f"[SKIP] Task {data['title']} already exists, skipping...")
            continue
        project = projects[data["project"]]
        task = service.create_task(TaskCreate(
            title=data["title"],
            status=data["status"],
            due_date=now + timedelta(days=data["due"]),
            client_id=project.client_id,
            project_id=project.id,
            assignee_ids=[users[i].id for i in data["assignees"]],
        ), admin)
        print(f"[SUCCESS] Created task: {task.title} ({task.status})")
        created += 1
    return created


def main():
    init_storage()
    store = open_store()
    try:
        admin = store.users.get(ADMIN_USER_ID)
        if admin is None:
            print("[ERROR] Admin user not found; run against a store seeded by the API")
            return
        users = seed_demo_users(store)
        clients = seed_demo_clients(store, admin)
        projects = seed_demo_projects(store, admin, users, clients)
        created = seed_demo_tasks(store, admin, users, projects)
        print(f"\n[SUCCESS] Seeding finished, {created} new tasks. Demo password: {DEMO_PASSWORD}")
    finally:
        store.close()


if __name__ == "__main__":
    main()
