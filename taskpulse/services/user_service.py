import logging
from typing import List

from taskpulse.schemas import (
    AdminUserCreate, AuthResponse, LoginRequest, ProfileOut, ProfileUpdate, RegisterRequest,
    UserOut, UserRecord, new_id, utcnow,
)
from taskpulse.services.notification_service import NotificationService
from taskpulse.storage import Store, avatar_url
from taskpulse.utils.errors import AuthFailed, NotFound, ValidationFailed
from taskpulse.utils.merge import shallow_merge
from taskpulse.utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def user_out(user: UserRecord) -> UserOut:
    return UserOut.model_validate(user.model_dump())


class UserService:
    def __init__(self, store: Store):
        self.store = store

    def find_by_email(self, email: str):
        wanted = email.strip().lower()
        return next((u for u in self.store.users.list() if u.email.lower() == wanted), None)

    def auth_response(self, user: UserRecord) -> AuthResponse:
        token = create_access_token(data={"sub": user.id})
        return AuthResponse(user=user_out(user), token=token, user_email=user.email)

    def login(self, credentials: LoginRequest) -> AuthResponse:
        user = self.find_by_email(credentials.email)
        # Same error for unknown email and wrong password
        if user is None or not verify_password(credentials.password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthFailed(INVALID_CREDENTIALS)
        return self.auth_response(user)

    def _new_user(self, first_name: str, last_name: str, email: str, password: str, role: str) -> UserRecord:
        if self.find_by_email(email) is not None:
            raise ValidationFailed("Email already in use")

        user = UserRecord(
            id=new_id(),
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=hash_password(password),
            role=role,
            avatar=avatar_url(first_name, last_name),
            created_at=utcnow(),
        )
        self.store.users.add(user)
        logger.info(f"User {user.id} created with role {role}")
        return user

    def register(self, payload: RegisterRequest) -> AuthResponse:
        user = self._new_user(payload.first_name, payload.last_name, payload.email, payload.password, "employee")
        return self.auth_response(user)

    def create_user(self, payload: AdminUserCreate) -> UserRecord:
        return self._new_user(payload.first_name, payload.last_name, payload.email, payload.password, payload.role)

    def list_users(self) -> List[UserRecord]:
        return self.store.users.list()

    def profile(self, user: UserRecord) -> ProfileOut:
        notifications = NotificationService.list_for_user(self.store, user.id)
        return ProfileOut(**user_out(user).model_dump(), notifications=notifications)

    def update_profile(self, user: UserRecord, payload: ProfileUpdate) -> ProfileOut:
        merged, _ = shallow_merge(user, payload)
        self.store.users.save(merged)
        return self.profile(merged)

    def delete_user(self, user_id: str) -> None:
        if not self.store.users.delete(user_id):
            raise NotFound("User not found")
        self.store.notifications.delete_where(lambda n: n.user_id == user_id)
        self.store.notes.delete_where(lambda n: n.created_by == user_id)

        tasks = [
            t.model_copy(update={"assignee_ids": [uid for uid in t.assignee_ids if uid != user_id]})
            for t in self.store.tasks.list() if user_id in t.assignee_ids
        ]
        if tasks:
            self.store.tasks.save_many(tasks)
        projects = [
            p.model_copy(update={"assigned_user_ids": [uid for uid in p.assigned_user_ids if uid != user_id]})
            for p in self.store.projects.list() if user_id in p.assigned_user_ids
        ]
        if projects:
            self.store.projects.save_many(projects)
        logger.info(f"User {user_id} deleted")
