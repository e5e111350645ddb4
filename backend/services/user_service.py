"""
User Service

Orchestrates validation, the domain transform and the user repository for
each use case. Owns the transaction boundary: commits on success, rolls back
and re-raises on storage failure.
"""

from datetime import date
from typing import Callable, List
from contextlib import contextmanager
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.user_transform import to_response, to_storage_args
from dtos.request.user_request import UserRequest
from dtos.response.user_response import UserResponse
from constants import ErrorMessages
from exceptions import NotFoundError, StorageError
from repositories.user_repository import UserRepository
from utils.logging_utils import log_operation
from .interfaces import IUserService

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, db: Session, today: Callable[[], date] = date.today):
        """
        Initialize UserService.

        Args:
            db: Database session
            today: Clock used for age derivation
        """
        self.db = db
        self.user_repo = UserRepository(db)
        self.today = today

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("commit", str(e)) from e
        except Exception:
            self.db.rollback()
            raise

    @log_operation("create_user")
    def create_user(self, request: UserRequest) -> UserResponse:
        args = to_storage_args(request)
        with self._transaction():
            user = self.user_repo.insert(args.name, args.dob)
        logger.info(f"Created user {user.id}")
        return to_response(user)

    @log_operation("get_user")
    def get_user(self, user_id: int) -> UserResponse:
        user = self.user_repo.fetch_by_id(user_id)
        if user is None:
            raise NotFoundError("user", user_id, ErrorMessages.USER_NOT_FOUND)
        return to_response(user, include_age=True, today=self.today())

    @log_operation("list_users")
    def list_users(self) -> List[UserResponse]:
        today = self.today()
        return [
            to_response(user, include_age=True, today=today)
            for user in self.user_repo.fetch_all()
        ]

    @log_operation("update_user")
    def update_user(self, user_id: int, request: UserRequest) -> UserResponse:
        args = to_storage_args(request)
        with self._transaction():
            user = self.user_repo.update(user_id, args.name, args.dob)
            if user is None:
                raise NotFoundError("user", user_id, ErrorMessages.USER_NOT_FOUND)
        return to_response(user)

    @log_operation("delete_user")
    def delete_user(self, user_id: int) -> None:
        with self._transaction():
            deleted = self.user_repo.delete(user_id)
        if not deleted:
            logger.debug(f"Delete of absent user {user_id} treated as success")
