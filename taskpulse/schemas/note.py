# taskpulse/schemas/note.py
from pydantic import Field
from typing import Optional, Literal

from taskpulse.schemas.common import CamelModel, UtcDateTime, new_id, utcnow

NoteEntityType = Literal["client", "project", "task"]


class NoteRecord(CamelModel):
    id: str = Field(default_factory=new_id)
    title: str
    content: str
    created_at: UtcDateTime = Field(default_factory=utcnow)
    created_by: str
    entity_type: Optional[NoteEntityType] = None
    entity_id: Optional[str] = None


NoteOut = NoteRecord


class NoteCreate(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    entity_type: Optional[NoteEntityType] = None
    entity_id: Optional[str] = None
