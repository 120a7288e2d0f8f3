import logging
from typing import List

from taskpulse.schemas import (
    Comment, EditHistoryEntry, TaskCreate, TaskRecord, TaskUpdate, UserRecord, utcnow,
)
from taskpulse.services.notification_service import NotificationService
from taskpulse.storage import Store
from taskpulse.utils.errors import NotFound, PermissionDenied
from taskpulse.utils.merge import shallow_merge

logger = logging.getLogger(__name__)

# Field -> label written to the edit history
TRACKED_FIELDS = {
    "client_id": "Client assignment",
    "project_id": "Project assignment",
    "title": "Title",
    "description": "Description",
    "status": "Status",
    "due_date": "Due date",
    "assignee_ids": "Assignees",
    "sub_tasks": "Subtasks",
    "comments": "Comments",
    "attachments": "Attachments",
}


def can_move_task(task: TaskRecord, user: UserRecord) -> bool:
    """Only the creator or an admin may change a task's status"""
    return user.is_admin or task.created_by == user.id


def _known_user_ids(store: Store, user_ids: List[str]) -> List[str]:
    known = {u.id for u in store.users.list()}
    return [uid for uid in dict.fromkeys(user_ids) if uid in known]


def _differs(field: str, old: TaskRecord, new: TaskRecord) -> bool:
    before, after = getattr(old, field), getattr(new, field)
    if field == "assignee_ids":
        return sorted(before) != sorted(after)
    return before != after


class TaskService:
    def __init__(self, store: Store):
        self.store = store

    def list_tasks(self) -> List[TaskRecord]:
        return self.store.tasks.list()

    def get_task(self, task_id: str) -> TaskRecord:
        task = self.store.tasks.get(task_id)
        if task is None:
            raise NotFound("Task not found")
        return task

    def my_tasks(self, user: UserRecord) -> List[TaskRecord]:
        return [
            t for t in self.store.tasks.list()
            if user.id in t.assignee_ids or t.created_by == user.id
        ]

    def create_task(self, payload: TaskCreate, actor: UserRecord) -> TaskRecord:
        now = utcnow()
        task = TaskRecord(
            **payload.model_dump(),
            created_by=actor.id,
            created_at=now,
            updated_at=now,
        )
        task.assignee_ids = _known_user_ids(self.store, task.assignee_ids)
        self.store.tasks.add(task)
        logger.info(f"Task {task.id} created by user {actor.id}")

        self._notify_new_assignees(task, task.assignee_ids, actor)
        return task

    def update_task(self, task_id: str, payload: TaskUpdate, actor: UserRecord) -> TaskRecord:
        task = self.get_task(task_id)
        merged, changes = shallow_merge(task, payload)

        if merged.status != task.status and not can_move_task(task, actor):
            raise PermissionDenied("Only the task creator or an admin can change its status")

        if "assignee_ids" in changes:
            merged.assignee_ids = _known_user_ids(self.store, merged.assignee_ids)

        changed = [
            label for field, label in TRACKED_FIELDS.items()
            if field in changes and _differs(field, task, merged)
        ]
        merged.updated_at = utcnow()
        if changed:
            merged.edit_history.append(EditHistoryEntry(
                user_id=actor.id,
                timestamp=merged.updated_at,
                changes=", ".join(changed),
            ))

        self.store.tasks.save(merged)
        logger.info(f"Task {task_id} updated by user {actor.id}: {changed or 'no changes'}")

        added = [uid for uid in merged.assignee_ids if uid not in task.assignee_ids]
        self._notify_new_assignees(merged, added, actor)
        if merged.status != task.status:
            self._notify_status_change(merged, task.status, actor)
        return merged

    def move_task(self, task_id: str, new_status: str, actor: UserRecord) -> TaskRecord:
        """Kanban drag: status change authorized on the server"""
        return self.update_task(task_id, TaskUpdate(status=new_status), actor)

    def delete_task(self, task_id: str, actor: UserRecord) -> None:
        task = self.get_task(task_id)
        if not (actor.is_admin or task.created_by == actor.id):
            raise PermissionDenied("You do not have permission to delete this task")
        if not self.store.tasks.delete(task_id):
            raise NotFound("Task not found")
        logger.info(f"Task {task_id} deleted by user {actor.id}")

    def add_comment(self, task_id: str, text: str, actor: UserRecord) -> TaskRecord:
        task = self.get_task(task_id)
        task.comments.append(Comment(user_id=actor.id, text=text))
        task.updated_at = utcnow()
        self.store.tasks.save(task)
        return task

    def assign_users(self, task_id: str, user_ids: List[str], actor: UserRecord) -> TaskRecord:
        """
        Add each known, not yet assigned user to the task and notify them.

        The task is written first; each notification is a separate write
        afterwards, so a failure part way leaves earlier notifications in place.
        """
        task = self.get_task(task_id)
        users = {u.id: u for u in self.store.users.list()}

        added = []
        for uid in user_ids:
            if uid in users and uid not in task.assignee_ids:
                task.assignee_ids.append(uid)
                added.append(users[uid])

        if not added:
            return task

        task.updated_at = utcnow()
        self.store.tasks.save(task)
        logger.info(f"Task {task_id}: assigned {[u.id for u in added]} by user {actor.id}")

        for user in added:
            NotificationService.create_task_assignment_notification(self.store, task, user)
        return task

    def _notify_new_assignees(self, task: TaskRecord, user_ids: List[str], actor: UserRecord) -> None:
        # The acting user is not notified about their own change
        for uid in user_ids:
            if uid == actor.id:
                continue
            user = self.store.users.get(uid)
            if user is not None:
                NotificationService.create_task_assignment_notification(self.store, task, user)

    def _notify_status_change(self, task: TaskRecord, old_status: str, actor: UserRecord) -> None:
        if task.created_by == actor.id:
            return
        if self.store.users.get(task.created_by) is None:
            logger.warning(f"Task creator {task.created_by} not found")
            return
        NotificationService.create_task_status_change_notification(
            self.store, task, old_status, task.status, actor
        )
