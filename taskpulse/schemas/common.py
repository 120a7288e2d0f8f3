# taskpulse/schemas/common.py
import uuid
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Datetimes without an offset are taken as UTC"""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


# Every stored timestamp is timezone-aware UTC
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


def new_id() -> str:
    return uuid.uuid4().hex


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UpdateModel(CamelModel):
    """Partial update payload; unknown fields are rejected"""

    model_config = ConfigDict(extra="forbid")


class MessageOut(BaseModel):
    message: str
