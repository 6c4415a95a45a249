from typing import Any, Dict

from pydantic import BaseModel

from ..errors import ValidationError
from .types import ResourceName, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGES


def require_fields(resource: ResourceName, payload: BaseModel) -> Dict[str, Any]:
    """
    Returns the payload as a dict once every required field of the resource is present.
    Falsy values (None, "", 0) count as missing.
    """
    values = payload.model_dump()
    if not all(values.get(field) for field in REQUIRED_FIELDS[resource]):
        raise ValidationError(MISSING_FIELDS_MESSAGES[resource])
    return values
