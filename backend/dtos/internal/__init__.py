"""
Internal DTOs

DTOs for service-to-repository communication within the backend.
These are not exposed to external APIs.
"""

from .user_dto import UserRecordArgs

__all__ = ["UserRecordArgs"]
