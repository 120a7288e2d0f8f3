# taskpulse/utils/merge.py
from typing import Tuple, TypeVar

from pydantic import BaseModel, ValidationError

from taskpulse.utils.errors import ValidationFailed

R = TypeVar("R", bound=BaseModel)


def shallow_merge(record: R, update: BaseModel) -> Tuple[R, dict]:
    """
    Overlay the fields present in ``update`` on ``record``.

    Top-level fields only: lists such as sub tasks are replaced wholesale.
    Returns the merged record and the dict of applied fields.
    """
    changes = update.model_dump(exclude_unset=True)
    try:
        merged = type(record).model_validate({**record.model_dump(), **changes})
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ValidationFailed(f"Invalid value for: {fields}") from e
    return merged, changes
