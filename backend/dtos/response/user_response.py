"""
User Response DTOs

DTOs for user-related API responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """
    Response DTO for a single user.

    age is only derived on read paths. It stays None on create/update
    responses and is dropped from the JSON body there.
    """

    id: int = Field(description="User ID")
    name: str = Field(description="Display name")
    dob: str = Field(description="Date of birth, YYYY-MM-DD")
    age: Optional[int] = Field(None, description="Age in completed years (read paths only)")

