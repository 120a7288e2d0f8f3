from typing import List

from fastapi import APIRouter, Depends, status

from taskpulse.schemas import (
    ClientCreate, ClientDetails, ClientOut, ClientUpdate, MessageOut, UserRecord,
)
from taskpulse.services.client_service import ClientService
from taskpulse.services.dashboard_service import get_client_details
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


@router.get("/clients", response_model=List[ClientOut])
def list_clients(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return ClientService(store).list_clients()


@router.post("/clients", response_model=ClientOut, status_code=status.HTTP_201_CREATED)
def create_client(
    payload: ClientCreate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return ClientService(store).create_client(payload, current_user)


@router.get("/clients/{client_id}", response_model=ClientOut)
def get_client(
    client_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return ClientService(store).get_client(client_id)


@router.get("/clients/{client_id}/details", response_model=ClientDetails)
def client_details(
    client_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    """Client with its projects and tasks, tasks grouped by project"""
    return get_client_details(store, client_id)


@router.put("/clients/{client_id}", response_model=ClientOut)
def update_client(
    client_id: str,
    payload: ClientUpdate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return ClientService(store).update_client(client_id, payload, current_user)


@router.delete("/clients/{client_id}", response_model=MessageOut)
def delete_client(
    client_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    ClientService(store).delete_client(client_id, current_user)
    return MessageOut(message="Client deleted successfully")
