from typing import List

from fastapi import APIRouter, Depends, status

from taskpulse.schemas import MessageOut, NoteCreate, NoteOut, UserRecord
from taskpulse.services.note_service import NoteService
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


@router.get("/notes", response_model=List[NoteOut])
def list_notes(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return NoteService(store).list_notes(current_user)


@router.post("/notes", response_model=NoteOut, status_code=status.HTTP_201_CREATED)
def create_note(
    payload: NoteCreate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return NoteService(store).create_note(payload, current_user)


@router.delete("/notes/{note_id}", response_model=MessageOut)
def delete_note(
    note_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    NoteService(store).delete_note(note_id, current_user)
    return MessageOut(message="Note deleted successfully")
