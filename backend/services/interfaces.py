"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.request.user_request import UserRequest
from dtos.response.user_response import UserResponse


class IUserService(ABC):
    """
    Abstract interface for user management services.
    """

    @abstractmethod
    def create_user(self, request: UserRequest) -> UserResponse:
        """
        Create a user.

        Returns:
            UserResponse without age

        Raises:
            ValidationError: If the request does not validate
            StorageError: If the insert fails
        """
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> UserResponse:
        """
        Fetch a user with age derived from today's date.

        Raises:
            NotFoundError: If no user has that id
            StorageError: If the query fails
        """
        pass

    @abstractmethod
    def list_users(self) -> List[UserResponse]:
        """
        List all users with age derived from today's date.

        Returns:
            List of users, empty when none exist
        """
        pass

    @abstractmethod
    def update_user(self, user_id: int, request: UserRequest) -> UserResponse:
        """
        Replace a user's name and dob.

        Returns:
            UserResponse without age

        Raises:
            ValidationError: If the request does not validate
            NotFoundError: If no user has that id
            StorageError: If the update fails
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """
        Delete a user. Deleting an absent id succeeds.

        Raises:
            StorageError: If the delete fails
        """
        pass
