# taskpulse/models/note.py
from sqlalchemy import Column, String, Text, DateTime
from taskpulse.database import Base


class Note(Base):
    __tablename__ = "notes"

    id = Column(String(64), primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(64), nullable=False, index=True)
    entity_type = Column(String(20), nullable=True)  # client, project, task
    entity_id = Column(String(64), nullable=True)
