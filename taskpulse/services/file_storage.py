# taskpulse/services/file_storage.py
import logging
import shutil
import time
import uuid
from pathlib import Path
from typing import Optional, Tuple

from fastapi import UploadFile

from taskpulse.config.settings import get_settings
from taskpulse.schemas import UploadOut
from taskpulse.utils.errors import TaskPulseError, ValidationFailed

logger = logging.getLogger(__name__)

DANGEROUS_PATTERNS = ['..', '/', '\\', '<', '>', ':', '"', '|', '?', '*']


class FileStorageService:
    """Service for storing uploaded files under the upload directory"""

    def __init__(self, upload_dir: str = "uploads", max_file_size: int = 10 * 1024 * 1024,
                 allowed_extensions: Optional[set] = None):
        self.upload_dir = Path(upload_dir)
        self.max_file_size = max_file_size
        self.allowed_extensions = allowed_extensions or set()

    def _too_large_message(self) -> str:
        return f"File size exceeds maximum allowed size of {self.max_file_size / (1024*1024):.1f}MB"

    def validate_file(self, file: UploadFile) -> Tuple[bool, str]:
        """
        Validate uploaded file for name, type and size constraints

        Returns:
            Tuple of (is_valid, error_message)
        """
        if file.size and file.size > self.max_file_size:
            return False, self._too_large_message()

        if not file.filename:
            return False, "No file provided"

        if any(pattern in file.filename for pattern in DANGEROUS_PATTERNS):
            return False, "Filename contains invalid characters"

        file_ext = Path(file.filename).suffix.lower()
        if file_ext not in self.allowed_extensions:
            return False, f"File type '{file_ext}' is not allowed"

        return True, ""

    def generate_unique_filename(self, original_filename: str) -> str:
        """Stored names are `<epoch-ms>-<uuid><ext>`"""
        file_ext = Path(original_filename).suffix.lower()
        return f"{int(time.time() * 1000)}-{uuid.uuid4()}{file_ext}"

    def save_file(self, file: UploadFile) -> UploadOut:
        is_valid, error_msg = self.validate_file(file)
        if not is_valid:
            raise ValidationFailed(error_msg)

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        unique_filename = self.generate_unique_filename(file.filename)
        file_path = self.upload_dir / unique_filename

        try:
            with open(file_path, "wb") as buffer:
                shutil.copyfileobj(file.file, buffer)
        except OSError as e:
            logger.error(f"Error saving file {file.filename}: {str(e)}")
            file_path.unlink(missing_ok=True)
            raise TaskPulseError("Error uploading file")

        file_size = file_path.stat().st_size
        # Size is not always known before the body is read
        if file_size > self.max_file_size:
            file_path.unlink()
            raise ValidationFailed(self._too_large_message())

        logger.info(f"File saved successfully: {file_path}")
        return UploadOut(
            filename=unique_filename,
            originalname=file.filename,
            path=f"/uploads/{unique_filename}",
            size=file_size,
        )


def get_file_storage() -> FileStorageService:
    settings = get_settings()
    return FileStorageService(
        upload_dir=settings.FILE_UPLOAD["upload_dir"],
        max_file_size=settings.FILE_UPLOAD["max_file_size"],
        allowed_extensions=settings.FILE_UPLOAD["allowed_extensions"],
    )
