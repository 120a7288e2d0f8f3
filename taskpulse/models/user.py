# taskpulse/models/user.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from taskpulse.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="employee")  # admin, team-lead, employee
    avatar = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)

    notifications = relationship(
        "Notification",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Notification.timestamp",
    )
