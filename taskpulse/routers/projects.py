from typing import List

from fastapi import APIRouter, Depends, status

from taskpulse.schemas import (
    AssignRequest, MessageOut, ProjectCreate, ProjectOut, ProjectUpdate, UserRecord,
)
from taskpulse.services.project_service import ProjectService
from taskpulse.services.views import project_out, users_by_id
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


def _render(store: Store, project) -> ProjectOut:
    return project_out(project, users_by_id(store))


@router.get("/projects", response_model=List[ProjectOut])
def list_projects(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    users = users_by_id(store)
    return [project_out(p, users) for p in ProjectService(store).list_projects()]


@router.post("/projects", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, ProjectService(store).create_project(payload, current_user))


@router.get("/projects/{project_id}", response_model=ProjectOut)
def get_project(
    project_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, ProjectService(store).get_project(project_id))


@router.put("/projects/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: str,
    payload: ProjectUpdate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, ProjectService(store).update_project(project_id, payload, current_user))


@router.delete("/projects/{project_id}", response_model=MessageOut)
def delete_project(
    project_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    ProjectService(store).delete_project(project_id, current_user)
    return MessageOut(message="Project deleted successfully")


@router.post("/projects/{project_id}/assign", response_model=ProjectOut)
def assign_project(
    project_id: str,
    payload: AssignRequest,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return _render(store, ProjectService(store).assign_users(project_id, payload.user_ids, current_user))
