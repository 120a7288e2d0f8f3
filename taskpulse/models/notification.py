# taskpulse/models/notification.py
from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from taskpulse.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(64), primary_key=True, index=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False, default="system")
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    read = Column(Boolean, default=False, nullable=False)

    # Related entity references (optional)
    task_id = Column(String(64), nullable=True)
    project_id = Column(String(64), nullable=True)
    entity_id = Column(String(64), nullable=True)
    entity_type = Column(String(50), nullable=True)  # 'task', 'project', 'client'

    user = relationship("User", back_populates="notifications")

    def __repr__(self):
        return f"<Notification(id={self.id}, user_id={self.user_id}, title='{self.title}', type='{self.type}')>"
