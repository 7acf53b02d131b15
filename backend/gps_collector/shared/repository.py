"""
Base repository with common CRUD operations.

Provides generic database operations for all feature repositories.
Uses a synchronous SQLAlchemy session; transaction boundaries (commit,
rollback) belong to the caller.

Usage:
    class GpsPointRepository(BaseRepository[GpsPoint]):
        def __init__(self, db: Session):
            super().__init__(db, GpsPoint)
"""

from typing import TypeVar, Generic, Type
from sqlalchemy import select, func
from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository for database operations.

    Provides common CRUD methods that can be inherited by feature repositories.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize repository.

        Args:
            db: Database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value

        Returns:
            Entity if found, None otherwise
        """
        return self.db.get(self.model, id)

    def add(self, entity: T) -> T:
        """
        Stage entity and flush so the database assigns its ID.

        Args:
            entity: Unsaved entity

        Returns:
            The same entity with generated ID
        """
        self.db.add(entity)
        self.db.flush()
        return entity

    def count(self, **kwargs) -> int:
        """
        Count entities matching criteria.

        Args:
            **kwargs: Field name-value pairs to filter by

        Returns:
            Number of matching entities
        """
        query = select(func.count()).select_from(self.model)
        for key, value in kwargs.items():
            query = query.where(getattr(self.model, key) == value)
        return self.db.execute(query).scalar() or 0
