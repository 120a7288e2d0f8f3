import logging
from typing import List

from taskpulse.schemas import AdminClientCreate, ClientCreate, ClientRecord, ClientUpdate, UserRecord
from taskpulse.storage import Store
from taskpulse.utils.errors import NotFound, PermissionDenied
from taskpulse.utils.merge import shallow_merge

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, store: Store):
        self.store = store

    def list_clients(self) -> List[ClientRecord]:
        return self.store.clients.list()

    def get_client(self, client_id: str) -> ClientRecord:
        client = self.store.clients.get(client_id)
        if client is None:
            raise NotFound("Client not found")
        return client

    def create_client(self, payload: ClientCreate, actor: UserRecord) -> ClientRecord:
        client = ClientRecord(**payload.model_dump(), created_by=actor.id)
        self.store.clients.add(client)
        logger.info(f"Client {client.id} created by user {actor.id}")
        return client

    def create_admin_client(self, payload: AdminClientCreate, actor: UserRecord) -> ClientRecord:
        """Admin-panel clients always start out active"""
        client = ClientRecord(**payload.model_dump(), status="active", created_by=actor.id)
        self.store.clients.add(client)
        logger.info(f"Client {client.id} created from admin panel by user {actor.id}")
        return client

    def update_client(self, client_id: str, payload: ClientUpdate, actor: UserRecord) -> ClientRecord:
        client = self.get_client(client_id)
        merged, _ = shallow_merge(client, payload)
        self.store.clients.save(merged)
        logger.info(f"Client {client_id} updated by user {actor.id}")
        return merged

    def delete_client(self, client_id: str, actor: UserRecord) -> None:
        """Delete a client together with every task linked to it"""
        client = self.get_client(client_id)
        if not (actor.is_admin or client.created_by == actor.id):
            raise PermissionDenied("You do not have permission to delete this client")

        if not self.store.clients.delete(client_id):
            raise NotFound("Client not found")

        removed = self.store.tasks.delete_where(lambda t: t.client_id == client_id)
        logger.info(f"Client {client_id} deleted by user {actor.id}, {removed} tasks removed")
