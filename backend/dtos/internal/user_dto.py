"""
Internal User DTOs

DTOs passed between the service layer and the repository.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UserRecordArgs:
    """
    Validated values for an insert or full-replace update.

    Produced by domain.user_transform.to_storage_args; never built from
    unvalidated input.
    """

    name: str
    dob: date
