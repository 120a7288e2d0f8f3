# taskpulse/schemas/upload.py
from pydantic import BaseModel


class UploadOut(BaseModel):
    filename: str
    originalname: str
    path: str
    size: int
