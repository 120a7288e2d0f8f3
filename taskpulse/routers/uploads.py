from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from taskpulse.schemas import UploadOut, UserRecord
from taskpulse.services.file_storage import FileStorageService, get_file_storage
from taskpulse.utils.auth import get_current_user
from taskpulse.utils.errors import ValidationFailed

router = APIRouter()


@router.post("/upload", response_model=UploadOut)
def upload_file(
    file: Optional[UploadFile] = File(None),
    storage: FileStorageService = Depends(get_file_storage),
    current_user: UserRecord = Depends(get_current_user),
):
    """Store one file; it is then served under /uploads"""
    if file is None:
        raise ValidationFailed("No file provided")
    return storage.save_file(file)
