# Admin panel endpoints; every route requires the admin role
from typing import List

from fastapi import APIRouter, Depends, status

from taskpulse.schemas import (
    AdminClientCreate, AdminProjectCreate, AdminUserCreate, ClientOut, MessageOut,
    ProjectOut, UserOut, UserRecord,
)
from taskpulse.services.client_service import ClientService
from taskpulse.services.project_service import ProjectService
from taskpulse.services.user_service import UserService, user_out
from taskpulse.services.views import project_out, users_by_id
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import require_admin

router = APIRouter(prefix="/admin")


@router.get("/users", response_model=List[UserOut])
def admin_list_users(store: Store = Depends(get_store), admin: UserRecord = Depends(require_admin)):
    return [user_out(u) for u in UserService(store).list_users()]


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def admin_create_user(
    payload: AdminUserCreate,
    store: Store = Depends(get_store),
    admin: UserRecord = Depends(require_admin),
):
    return user_out(UserService(store).create_user(payload))


@router.delete("/users/{user_id}", response_model=MessageOut)
def admin_delete_user(user_id: str, store: Store = Depends(get_store), admin: UserRecord = Depends(require_admin)):
    UserService(store).delete_user(user_id)
    return MessageOut(message="User deleted successfully")


@router.get("/projects", response_model=List[ProjectOut])
def admin_list_projects(store: Store = Depends(get_store), admin: UserRecord = Depends(require_admin)):
    users = users_by_id(store)
    return [project_out(p, users) for p in ProjectService(store).list_projects()]


@router.post("/projects", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def admin_create_project(
    payload: AdminProjectCreate,
    store: Store = Depends(get_store),
    admin: UserRecord = Depends(require_admin),
):
    project = ProjectService(store).create_admin_project(payload, admin)
    return project_out(project, users_by_id(store))


@router.delete("/projects/{project_id}", response_model=MessageOut)
def admin_delete_project(
    project_id: str,
    store: Store = Depends(get_store),
    admin: UserRecord = Depends(require_admin),
):
    ProjectService(store).delete_project(project_id, admin)
    return MessageOut(message="Project deleted successfully")


@router.get("/clients", response_model=List[ClientOut])
def admin_list_clients(store: Store = Depends(get_store), admin: UserRecord = Depends(require_admin)):
    return ClientService(store).list_clients()


@router.post("/clients", response_model=ClientOut, status_code=status.HTTP_201_CREATED)
def admin_create_client(
    payload: AdminClientCreate,
    store: Store = Depends(get_store),
    admin: UserRecord = Depends(require_admin),
):
    return ClientService(store).create_admin_client(payload, admin)


@router.delete("/clients/{client_id}", response_model=MessageOut)
def admin_delete_client(
    client_id: str,
    store: Store = Depends(get_store),
    admin: UserRecord = Depends(require_admin),
):
    ClientService(store).delete_client(client_id, admin)
    return MessageOut(message="Client deleted successfully")
