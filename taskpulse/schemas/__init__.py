from .common import CamelModel, UpdateModel, MessageOut, UtcDateTime, as_utc, utcnow, new_id
from .notification import NotificationRecord, NotificationOut, NotificationType
from .user import (
    UserRecord, UserOut, ProfileOut, UserSummary, RegisterRequest, LoginRequest,
    AdminUserCreate, ProfileUpdate, AuthResponse, CurrentUserResponse, Role,
)
from .client import ClientRecord, ClientOut, ClientCreate, AdminClientCreate, ClientUpdate
from .project import (
    ProjectRecord, ProjectOut, ProjectCreate, AdminProjectCreate, ProjectUpdate, AssignRequest,
)
from .task import (
    TaskRecord, TaskOut, EnhancedTaskOut, TaskCreate, TaskUpdate, TaskStatusUpdate,
    CommentCreate, SubTask, Comment, EditHistoryEntry, TaskStatus,
)
from .dashboard import Analytics, CalendarEvent, ClientDetails
from .note import NoteRecord, NoteOut, NoteCreate
from .upload import UploadOut
