"""
User repository for user-specific data access operations.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from models import User
from .base_repository import BaseRepository, storage_operation


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def insert(self, name: str, dob: date) -> User:
        """
        Insert a new user; the store assigns the id.

        Raises:
            StorageError: If the insert fails
        """
        return self.create(User(name=name, date_of_birth=dob))

    def fetch_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by id.

        Returns:
            User or None if no row has that id
        """
        return self.get_by_id(user_id)

    def fetch_all(self) -> List[User]:
        """Fetch every user, oldest id first. Never None."""
        return self.get_all()

    @storage_operation("update")
    def update(self, user_id: int, name: str, dob: date) -> Optional[User]:
        """
        Replace name and dob of an existing user.

        Returns:
            Updated user, or None if no row has that id
        """
        user = self.db.get(User, user_id)
        if user is None:
            return None
        user.name = name
        user.date_of_birth = dob
        self.db.flush()
        return user

    def delete(self, user_id: int) -> bool:
        """
        Hard-delete a user.

        Returns:
            True if a row was removed, False if the id was absent
        """
        return self.delete_by_id(user_id)
