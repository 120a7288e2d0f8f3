# taskpulse/storage/base.py
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from taskpulse.schemas import (
    UserRecord, ClientRecord, ProjectRecord, TaskRecord, NotificationRecord, NoteRecord,
)

R = TypeVar("R", bound=BaseModel)


class Repository(ABC, Generic[R]):
    """One collection of records addressed by their ``id``"""

    @abstractmethod
    def list(self) -> List[R]:
        ...

    def get(self, record_id: str) -> Optional[R]:
        return next((r for r in self.list() if r.id == record_id), None)

    @abstractmethod
    def add(self, record: R) -> R:
        ...

    @abstractmethod
    def save(self, record: R) -> R:
        """Replace the stored record with the same id, inserting it if missing"""

    def save_many(self, records: Iterable[R]) -> None:
        for record in records:
            self.save(record)

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove by id; False when nothing matched"""

    @abstractmethod
    def delete_where(self, predicate: Callable[[R], bool]) -> int:
        """Remove every record matching ``predicate``; returns the count removed"""


class Store(ABC):
    users: Repository[UserRecord]
    clients: Repository[ClientRecord]
    projects: Repository[ProjectRecord]
    tasks: Repository[TaskRecord]
    notifications: Repository[NotificationRecord]
    notes: Repository[NoteRecord]

    def close(self) -> None:
        pass
