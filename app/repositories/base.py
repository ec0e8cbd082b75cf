"""기본 CRUD 리포지토리: 모든 도메인 리포지토리의 부모 클래스.

Base CRUD Repository: parent class for all domain repositories.

Provides generic Create, Read, Update, Delete operations keyed by the
integer primary key.

Usage:
    class ProductRepository(BaseRepository[Product]):
        def __init__(self) -> None:
            super().__init__(Product)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic CRUD repository providing common database operations.

    Attributes:
        model: The SQLAlchemy model class
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """Retrieve a single record by its primary key.

        Args:
            db: Async database session
            record_id: Primary key of the record

        Returns:
            ModelType | None: Found record or None
        """
        return await db.get(self.model, record_id)

    async def get_all(
        self,
        db: AsyncSession,
    ) -> Sequence[ModelType]:
        """Retrieve every record in primary key order (persistence order).

        Args:
            db: Async database session

        Returns:
            Sequence[ModelType]: All records of the model
        """
        query: Select = select(self.model).order_by(self.model.id)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """Create a new record in the database.

        Args:
            db: Async database session
            obj_data: Column values for the new record

        Returns:
            ModelType: The created record, refreshed with generated values
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """Update an existing record by its primary key.

        Args:
            db: Async database session
            record_id: Primary key of the record to update
            update_data: Fields and values to set (None values are applied too)

        Returns:
            ModelType | None: Updated record or None if it does not exist
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """Delete a record by its primary key.

        Returns:
            bool: False when no such record exists
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
        exclude_id: int | None = None,
    ) -> bool:
        """Check if a record matching the given filters exists.

        Args:
            db: Async database session
            filters: Filter criteria dictionary
            exclude_id: Primary key to ignore (the record being updated)

        Returns:
            bool: Whether a matching record exists
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
