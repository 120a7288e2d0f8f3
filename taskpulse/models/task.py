# taskpulse/models/task.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Table, JSON
from sqlalchemy.orm import relationship
from taskpulse.database import Base

# Association table for many-to-many relationship between tasks and assignees
task_assignees = Table(
    "task_assignees",
    Base.metadata,
    Column("task_id", String(64), ForeignKey("tasks.id"), primary_key=True),
    Column("user_id", String(64), ForeignKey("users.id"), primary_key=True),
)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="draft")
    due_date = Column(DateTime(timezone=True), nullable=True)

    created_by = Column(String(64), nullable=False)
    # weak references, not foreign keys
    client_id = Column(String(64), nullable=True, index=True)
    project_id = Column(String(64), nullable=True, index=True)

    # Embedded sub-collections
    sub_tasks = Column(JSON, nullable=False, default=list)
    comments = Column(JSON, nullable=False, default=list)
    attachments = Column(JSON, nullable=False, default=list)
    edit_history = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    assignees = relationship("User", secondary=task_assignees)
