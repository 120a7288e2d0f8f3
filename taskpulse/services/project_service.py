import logging
from typing import List

from taskpulse.schemas import AdminProjectCreate, ProjectCreate, ProjectRecord, ProjectUpdate, UserRecord
from taskpulse.services.notification_service import NotificationService
from taskpulse.storage import Store
from taskpulse.utils.errors import NotFound, PermissionDenied
from taskpulse.utils.merge import shallow_merge

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, store: Store):
        self.store = store

    def list_projects(self) -> List[ProjectRecord]:
        return self.store.projects.list()

    def get_project(self, project_id: str) -> ProjectRecord:
        project = self.store.projects.get(project_id)
        if project is None:
            raise NotFound("Project not found")
        return project

    def create_project(self, payload: ProjectCreate, actor: UserRecord) -> ProjectRecord:
        project = ProjectRecord(**payload.model_dump(exclude={"assigned_user_ids"}), created_by=actor.id)
        self.store.projects.add(project)
        logger.info(f"Project {project.id} created by user {actor.id}")

        if payload.assigned_user_ids:
            project = self.assign_users(project.id, payload.assigned_user_ids, actor, notify_actor=False)
        return project

    def create_admin_project(self, payload: AdminProjectCreate, actor: UserRecord) -> ProjectRecord:
        project = ProjectRecord(**payload.model_dump(), status="active", created_by=actor.id)
        self.store.projects.add(project)
        logger.info(f"Project {project.id} created from admin panel by user {actor.id}")
        return project

    def update_project(self, project_id: str, payload: ProjectUpdate, actor: UserRecord) -> ProjectRecord:
        project = self.get_project(project_id)
        merged, changes = shallow_merge(project, payload)

        if "assigned_user_ids" in changes:
            known = {u.id for u in self.store.users.list()}
            merged.assigned_user_ids = [uid for uid in dict.fromkeys(merged.assigned_user_ids) if uid in known]

        self.store.projects.save(merged)
        logger.info(f"Project {project_id} updated by user {actor.id}")

        for uid in merged.assigned_user_ids:
            if uid not in project.assigned_user_ids and uid != actor.id:
                user = self.store.users.get(uid)
                if user is not None:
                    NotificationService.create_project_assignment_notification(self.store, merged, user)
        return merged

    def delete_project(self, project_id: str, actor: UserRecord) -> None:
        """Delete a project and clear the project reference on its tasks"""
        project = self.get_project(project_id)
        if not (actor.is_admin or project.created_by == actor.id):
            raise PermissionDenied("You do not have permission to delete this project")

        if not self.store.projects.delete(project_id):
            raise NotFound("Project not found")

        orphaned = [t for t in self.store.tasks.list() if t.project_id == project_id]
        for task in orphaned:
            task.project_id = None
        if orphaned:
            self.store.tasks.save_many(orphaned)
        logger.info(f"Project {project_id} deleted by user {actor.id}, {len(orphaned)} tasks unlinked")

    def assign_users(
        self,
        project_id: str,
        user_ids: List[str],
        actor: UserRecord,
        notify_actor: bool = True,
    ) -> ProjectRecord:
        """Add each known, not yet assigned user and notify them after the project is saved"""
        project = self.get_project(project_id)
        users = {u.id: u for u in self.store.users.list()}

        added = []
        for uid in user_ids:
            if uid in users and uid not in project.assigned_user_ids:
                project.assigned_user_ids.append(uid)
                added.append(users[uid])

        if not added:
            return project

        self.store.projects.save(project)
        logger.info(f"Project {project_id}: assigned {[u.id for u in added]} by user {actor.id}")

        for user in added:
            if user.id == actor.id and not notify_actor:
                continue
            NotificationService.create_project_assignment_notification(self.store, project, user)
        return project
