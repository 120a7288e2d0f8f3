import logging
from typing import List

from taskpulse.schemas import NoteCreate, NoteRecord, UserRecord
from taskpulse.storage import Store
from taskpulse.utils.errors import NotFound

logger = logging.getLogger(__name__)


class NoteService:
    def __init__(self, store: Store):
        self.store = store

    def list_notes(self, user: UserRecord) -> List[NoteRecord]:
        return [n for n in self.store.notes.list() if n.created_by == user.id]

    def create_note(self, payload: NoteCreate, user: UserRecord) -> NoteRecord:
        note = NoteRecord(**payload.model_dump(), created_by=user.id)
        self.store.notes.add(note)
        return note

    def delete_note(self, note_id: str, user: UserRecord) -> None:
        note = self.store.notes.get(note_id)
        # Other users' notes are reported as missing
        if note is None or note.created_by != user.id:
            raise NotFound("Note not found")
        self.store.notes.delete(note_id)
        logger.info(f"Note {note_id} deleted by user {user.id}")
