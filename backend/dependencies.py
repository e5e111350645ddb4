"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import IUserService
from services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)

    Returns:
        IUserService: User service implementation

    Note: Tests override get_db (or this provider) to swap in an
    in-memory database or a stub service.
    """
    return UserService(db)
