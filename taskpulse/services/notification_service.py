import logging
from typing import List, Optional

from taskpulse.schemas import NotificationRecord, ProjectRecord, TaskRecord, UserRecord
from taskpulse.storage import Store
from taskpulse.utils.errors import NotFound

logger = logging.getLogger(__name__)


class NotificationService:
    @staticmethod
    def create_notification(
        store: Store,
        user_id: str,
        notification_type: str,
        title: str,
        message: str,
        task_id: Optional[str] = None,
        project_id: Optional[str] = None,
        entity_id: Optional[str] = None,
        entity_type: Optional[str] = None,
    ) -> NotificationRecord:
        """Append a notification to a user's list; one write per call"""
        notification = NotificationRecord(
            user_id=user_id,
            type=notification_type,
            title=title,
            message=message,
            task_id=task_id,
            project_id=project_id,
            entity_id=entity_id,
            entity_type=entity_type,
        )
        store.notifications.add(notification)
        logger.info(f"Notification created for user {user_id}: {title}")
        return notification

    @staticmethod
    def create_task_assignment_notification(
        store: Store,
        task: TaskRecord,
        assigned_user: UserRecord,
    ) -> NotificationRecord:
        """Create a notification when a task is assigned to a user"""
        return NotificationService.create_notification(
            store=store,
            user_id=assigned_user.id,
            notification_type="task_assignment",
            title="New Task Assignment",
            message=f"You have been assigned to the task: {task.title}",
            task_id=task.id,
            entity_id=task.id,
            entity_type="task",
        )

    @staticmethod
    def create_project_assignment_notification(
        store: Store,
        project: ProjectRecord,
        assigned_user: UserRecord,
    ) -> NotificationRecord:
        """Create a notification when a user joins a project"""
        return NotificationService.create_notification(
            store=store,
            user_id=assigned_user.id,
            notification_type="project_assignment",
            title="New Project Assignment",
            message=f"You have been assigned to the project: {project.name}",
            project_id=project.id,
            entity_id=project.id,
            entity_type="project",
        )

    @staticmethod
    def create_task_status_change_notification(
        store: Store,
        task: TaskRecord,
        old_status: str,
        new_status: str,
        updated_by: UserRecord,
    ) -> NotificationRecord:
        """Create a notification for the task creator when the status changes"""
        return NotificationService.create_notification(
            store=store,
            user_id=task.created_by,
            notification_type="task_status_change",
            title="Task Status Updated",
            message=f"Task '{task.title}' status changed from {old_status} to {new_status} by {updated_by.display_name}",
            task_id=task.id,
            entity_id=task.id,
            entity_type="task",
        )

    @staticmethod
    def list_for_user(store: Store, user_id: str) -> List[NotificationRecord]:
        return [n for n in store.notifications.list() if n.user_id == user_id]

    @staticmethod
    def mark_read(store: Store, user_id: str, notification_id: str) -> List[NotificationRecord]:
        notification = store.notifications.get(notification_id)
        if notification is None or notification.user_id != user_id:
            raise NotFound("Notification not found")

        if not notification.read:
            notification.read = True
            store.notifications.save(notification)
        return NotificationService.list_for_user(store, user_id)

    @staticmethod
    def mark_all_read(store: Store, user_id: str) -> List[NotificationRecord]:
        unread = [n for n in NotificationService.list_for_user(store, user_id) if not n.read]
        for notification in unread:
            notification.read = True
        if unread:
            store.notifications.save_many(unread)
        return NotificationService.list_for_user(store, user_id)
