# taskpulse/storage/sql_store.py
import logging
from abc import abstractmethod
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from taskpulse import models
from taskpulse.schemas import (
    UserRecord, ClientRecord, ProjectRecord, TaskRecord, NotificationRecord, NoteRecord,
)
from taskpulse.storage.base import R, Repository, Store

logger = logging.getLogger(__name__)


class SqlRepository(Repository[R]):
    orm_model = None

    def __init__(self, db: Session):
        self.db = db

    @abstractmethod
    def _to_record(self, row) -> R:
        ...

    @abstractmethod
    def _apply(self, row, record: R) -> None:
        ...

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _rows(self):
        return self.db.query(self.orm_model).all()

    def list(self) -> List[R]:
        return [self._to_record(row) for row in self._rows()]

    def get(self, record_id: str) -> Optional[R]:
        row = self.db.get(self.orm_model, record_id)
        return self._to_record(row) if row is not None else None

    def add(self, record: R) -> R:
        row = self.orm_model(id=record.id)
        self._apply(row, record)
        self.db.add(row)
        self._commit()
        return record

    def save(self, record: R) -> R:
        row = self.db.get(self.orm_model, record.id)
        if row is None:
            return self.add(record)
        self._apply(row, record)
        self._commit()
        return record

    def delete(self, record_id: str) -> bool:
        row = self.db.get(self.orm_model, record_id)
        if row is None:
            return False
        self._before_delete(record_id)
        self.db.delete(row)
        self._commit()
        return True

    def delete_where(self, predicate: Callable[[R], bool]) -> int:
        removed = 0
        for row in self._rows():
            if predicate(self._to_record(row)):
                self._before_delete(row.id)
                self.db.delete(row)
                removed += 1
        if removed:
            self._commit()
        return removed

    def _before_delete(self, record_id: str) -> None:
        pass

    def _users(self, user_ids: List[str]) -> List[models.User]:
        if not user_ids:
            return []
        found = {u.id: u for u in self.db.query(models.User).filter(models.User.id.in_(user_ids)).all()}
        return [found[uid] for uid in dict.fromkeys(user_ids) if uid in found]


class SqlUserRepository(SqlRepository[UserRecord]):
    orm_model = models.User

    def _to_record(self, row) -> UserRecord:
        return UserRecord(
            id=row.id,
            email=row.email,
            first_name=row.first_name,
            last_name=row.last_name,
            password_hash=row.password_hash,
            role=row.role,
            avatar=row.avatar,
            created_at=row.created_at,
        )

    def _apply(self, row, record: UserRecord) -> None:
        row.email = record.email
        row.first_name = record.first_name
        row.last_name = record.last_name
        row.password_hash = record.password_hash
        row.role = record.role
        row.avatar = record.avatar
        row.created_at = record.created_at

    def _before_delete(self, record_id: str) -> None:
        # Drop join rows; the task/project records keep no other trace of the user
        self.db.execute(models.task_assignees.delete().where(models.task_assignees.c.user_id == record_id))
        self.db.execute(models.project_members.delete().where(models.project_members.c.user_id == record_id))


class SqlClientRepository(SqlRepository[ClientRecord]):
    orm_model = models.Client

    def _to_record(self, row) -> ClientRecord:
        return ClientRecord(
            id=row.id,
            name=row.name,
            contact_info=row.contact_info,
            description=row.description,
            status=row.status,
            links=list(row.links or []),
            created_by=row.created_by,
        )

    def _apply(self, row, record: ClientRecord) -> None:
        row.name = record.name
        row.contact_info = record.contact_info
        row.description = record.description
        row.status = record.status
        row.links = list(record.links)
        row.created_by = record.created_by


class SqlProjectRepository(SqlRepository[ProjectRecord]):
    orm_model = models.Project

    def _to_record(self, row) -> ProjectRecord:
        return ProjectRecord(
            id=row.id,
            name=row.name,
            description=row.description,
            status=row.status,
            start_date=row.start_date,
            end_date=row.end_date,
            client_id=row.client_id,
            created_by=row.created_by,
            assigned_user_ids=[u.id for u in row.members],
        )

    def _apply(self, row, record: ProjectRecord) -> None:
        row.name = record.name
        row.description = record.description
        row.status = record.status
        row.start_date = record.start_date
        row.end_date = record.end_date
        row.client_id = record.client_id
        row.created_by = record.created_by
        row.members = self._users(record.assigned_user_ids)


class SqlTaskRepository(SqlRepository[TaskRecord]):
    orm_model = models.Task

    def _to_record(self, row) -> TaskRecord:
        return TaskRecord(
            id=row.id,
            title=row.title,
            description=row.description,
            status=row.status,
            due_date=row.due_date,
            created_by=row.created_by,
            client_id=row.client_id,
            project_id=row.project_id,
            assignee_ids=[u.id for u in row.assignees],
            sub_tasks=row.sub_tasks or [],
            comments=row.comments or [],
            attachments=row.attachments or [],
            edit_history=row.edit_history or [],
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row, record: TaskRecord) -> None:
        row.title = record.title
        row.description = record.description
        row.status = record.status
        row.due_date = record.due_date
        row.created_by = record.created_by
        row.client_id = record.client_id
        row.project_id = record.project_id
        row.sub_tasks = [s.model_dump(mode="json") for s in record.sub_tasks]
        row.comments = [c.model_dump(mode="json") for c in record.comments]
        row.attachments = list(record.attachments)
        row.edit_history = [e.model_dump(mode="json") for e in record.edit_history]
        row.created_at = record.created_at
        row.updated_at = record.updated_at
        row.assignees = self._users(record.assignee_ids)


class SqlNotificationRepository(SqlRepository[NotificationRecord]):
    orm_model = models.Notification

    def _rows(self):
        return self.db.query(models.Notification).order_by(models.Notification.timestamp).all()

    def _to_record(self, row) -> NotificationRecord:
        return NotificationRecord(
            id=row.id,
            user_id=row.user_id,
            type=row.type,
            title=row.title,
            message=row.message,
            timestamp=row.timestamp,
            read=row.read,
            task_id=row.task_id,
            project_id=row.project_id,
            entity_id=row.entity_id,
            entity_type=row.entity_type,
        )

    def _apply(self, row, record: NotificationRecord) -> None:
        row.user_id = record.user_id
        row.type = record.type
        row.title = record.title
        row.message = record.message
        row.timestamp = record.timestamp
        row.read = record.read
        row.task_id = record.task_id
        row.project_id = record.project_id
        row.entity_id = record.entity_id
        row.entity_type = record.entity_type


class SqlNoteRepository(SqlRepository[NoteRecord]):
    orm_model = models.Note

    def _to_record(self, row) -> NoteRecord:
        return NoteRecord(
            id=row.id,
            title=row.title,
            content=row.content,
            created_at=row.created_at,
            created_by=row.created_by,
            entity_type=row.entity_type,
            entity_id=row.entity_id,
        )

    def _apply(self, row, record: NoteRecord) -> None:
        row.title = record.title
        row.content = record.content
        row.created_at = record.created_at
        row.created_by = record.created_by
        row.entity_type = record.entity_type
        row.entity_id = record.entity_id


class SqlStore(Store):
    def __init__(self, db: Session):
        self.db = db
        self.users = SqlUserRepository(db)
        self.clients = SqlClientRepository(db)
        self.projects = SqlProjectRepository(db)
        self.tasks = SqlTaskRepository(db)
        self.notifications = SqlNotificationRepository(db)
        self.notes = SqlNoteRepository(db)

    def close(self) -> None:
        self.db.close()
