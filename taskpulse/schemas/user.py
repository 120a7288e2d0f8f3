# taskpulse/schemas/user.py
from pydantic import EmailStr, Field
from typing import Optional, List, Literal

from taskpulse.schemas.common import CamelModel, UpdateModel, UtcDateTime
from taskpulse.schemas.notification import NotificationOut

Role = Literal["admin", "team-lead", "employee"]


class UserRecord(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    password_hash: str
    role: Role = "employee"
    avatar: Optional[str] = None
    created_at: Optional[UtcDateTime] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class UserOut(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    role: Role
    avatar: Optional[str] = None
    created_at: Optional[UtcDateTime] = None


class ProfileOut(UserOut):
    notifications: List[NotificationOut] = []


class UserSummary(CamelModel):
    id: str
    name: str
    email: str
    role: Role


class RegisterRequest(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminUserCreate(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Role


class ProfileUpdate(UpdateModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    avatar: Optional[str] = None


class AuthResponse(CamelModel):
    user: UserOut
    token: str
    user_email: str


class CurrentUserResponse(CamelModel):
    user: UserOut
