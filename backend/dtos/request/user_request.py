"""
User Request DTOs

DTOs for user create/update API requests.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants import UserLimits
from domain.value_objects.birth_date import BirthDate
from exceptions import DateParseError


class UserRequest(BaseModel):
    """
    Request DTO for creating or fully replacing a user.

    Both fields are required; update is a wholesale replace, not a patch.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Ada",
                "dob": "1990-01-01"
            }
        },
    )

    name: str = Field(
        min_length=1,
        max_length=UserLimits.NAME_MAX_LENGTH,
        description="Display name",
    )
    dob: str = Field(description="Date of birth, YYYY-MM-DD")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, v: str) -> str:
        """Ensure dob is a real calendar date that is not in the future."""
        try:
            birth_date = BirthDate.parse(v)
        except DateParseError as e:
            raise ValueError(e.message)
        if birth_date.is_after(date.today()):
            raise ValueError("dob must not be in the future")
        return v
