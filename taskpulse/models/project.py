# taskpulse/models/project.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from taskpulse.database import Base

# Association table for many-to-many relationship between projects and users
project_members = Table(
    "project_members",
    Base.metadata,
    Column("project_id", String(64), ForeignKey("projects.id"), primary_key=True),
    Column("user_id", String(64), ForeignKey("users.id"), primary_key=True),
)


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="active")  # active, completed, on-hold
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    # weak reference, not a foreign key
    client_id = Column(String(64), nullable=True, index=True)
    created_by = Column(String(64), nullable=True)

    # Relationships
    members = relationship("User", secondary=project_members)
