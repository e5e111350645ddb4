"""
Base repository providing common CRUD operations.
"""

from functools import wraps
from typing import Callable, Generic, TypeVar, List, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import StorageError

T = TypeVar('T')


def storage_operation(operation: str):
    """
    Decorator converting SQLAlchemy failures into StorageError.

    Args:
        operation: Name of the repository operation (e.g. "insert")
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as e:
                raise StorageError(operation, str(e)) from e
        return wrapper
    return decorator


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Repositories flush but never commit; the calling service owns the
    transaction boundary.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @storage_operation("create")
    def create(self, obj: T) -> T:
        """
        Create a new record in the database.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance with its primary key populated
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    @storage_operation("get_by_id")
    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    @storage_operation("get_all")
    def get_all(self) -> List[T]:
        """
        Retrieve all records ordered by primary key.

        Returns:
            List of model instances (empty when the table is empty)
        """
        return self.db.query(self.model).order_by(self.model.id).all()

    @storage_operation("delete_by_id")
    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by its ID with a single DELETE statement.

        Args:
            id: Primary key value

        Returns:
            True if a row was deleted, False if none matched
        """
        deleted = self.db.query(self.model).filter(
            self.model.id == id
        ).delete(synchronize_session="fetch")
        self.db.flush()
        return deleted > 0

