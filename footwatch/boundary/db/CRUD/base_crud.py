"""
Base CRUD operations for SQLAlchemy models.

Provides generic create/read/count/list operations that can be inherited
and extended by model-specific CRUD classes. Each CRUD instance is bound
to one request-scoped AsyncSession.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from footwatch.boundary.db.base import Base
from footwatch.core.exceptions import NotFoundError
from footwatch.core.pagination import Page, PageRequest

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses specify the model class and extend these methods for
    model-specific behavior. No generic update/delete is offered: samples
    and reports are immutable and sessions change only through a
    version-checked update.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
        db: Request-scoped async database session
        resource: Name used in NotFoundError messages
    """

    resource = "record"

    def __init__(self, model: type[ModelT], db: AsyncSession) -> None:
        """
        Initialize CRUD with target model and database session.

        Args:
            model: SQLAlchemy model class for database operations
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def get_by_id(self, id: UUID, refresh: bool = False) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            id: UUID primary key
            refresh: Overwrite any copy already loaded in this session

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, id: UUID, refresh: bool = False) -> ModelT:
        """
        Retrieve a single record by primary key or raise.

        Args:
            id: UUID primary key
            refresh: Overwrite any copy already loaded in this session

        Returns:
            Model instance

        Raises:
            NotFoundError: If no record has this ID
        """
        instance = await self.get_by_id(id, refresh=refresh)
        if instance is None:
            raise self._not_found(id)
        return instance

    async def count_where(self, *criteria: Any) -> int:
        """Count records matching all ``criteria``."""
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def page_where(
        self,
        *criteria: Any,
        order_by: Sequence[Any],
        page: PageRequest,
    ) -> Page[ModelT]:
        """
        Retrieve one page of records matching ``criteria``.

        Args:
            *criteria: WHERE clauses
            order_by: ORDER BY clauses; include a unique column for stable paging
            page: Clamped limit/offset

        Returns:
            Page of model instances with the unpaged total
        """
        stmt = (
            select(self.model)
            .where(*criteria)
            .order_by(*order_by)
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self.db.execute(stmt)
        items = result.scalars().all()
        total = await self.count_where(*criteria)
        return Page(items=items, total=total, limit=page.limit, offset=page.offset)

    async def commit(self) -> None:
        """Commit the request transaction."""
        await self.db.commit()

    def _not_found(self, id: UUID) -> NotFoundError:
        return NotFoundError(self.resource, str(id))
