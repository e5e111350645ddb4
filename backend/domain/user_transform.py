"""
Mapping between the external user representation and stored rows.
"""

from datetime import date
from typing import Optional

from dtos.internal.user_dto import UserRecordArgs
from dtos.request.user_request import UserRequest
from dtos.response.user_response import UserResponse
from exceptions import ValidationError
from models import User
from .value_objects.birth_date import BirthDate


def to_storage_args(request: UserRequest) -> UserRecordArgs:
    """
    Convert a request into validated storage values.

    The date is parsed again here rather than trusted from the DTO, so a
    request built without validation still cannot reach storage with a bad
    date.

    Raises:
        ValidationError: If name is empty or dob does not parse
    """
    if not request.name or not request.name.strip():
        raise ValidationError("name must not be empty", {"name": request.name})
    return UserRecordArgs(name=request.name, dob=BirthDate.parse(request.dob).value)


def to_response(user: User, include_age: bool = False, today: Optional[date] = None) -> UserResponse:
    """
    Build the outbound representation of a stored user.

    Args:
        user: Stored row
        include_age: Derive age from dob (read paths)
        today: Reference date for age; defaults to date.today()
    """
    dob = BirthDate(user.date_of_birth)
    age = dob.age_on(today or date.today()) if include_age else None
    return UserResponse(
        id=user.id,
        name=user.name,
        dob=str(dob),
        age=age,
    )
