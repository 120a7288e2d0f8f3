# taskpulse/models/client.py
from sqlalchemy import Column, String, Text, JSON
from taskpulse.database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    contact_info = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="active")  # active or inactive
    links = Column(JSON, nullable=False, default=list)
    created_by = Column(String(64), nullable=True)
