"""Base repository with common statement helpers."""

from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row

from showcase.db.base import Base
from showcase.db.engine import ConnectionManager


class BaseRepository:
    """Runs single Core statements for one table on the shared connection."""

    def __init__(self, manager: ConnectionManager, model_class: type[Base], pk_field: str = "id"):
        self.manager = manager
        self.model_class = model_class
        self.table = model_class.__table__
        self.pk = self.table.c[pk_field]

    async def insert(self, **values: Any) -> int:
        """Insert one record and return its store-assigned primary key."""
        stmt = insert(self.table).values(**values)
        async with self.manager.statement() as conn:
            result = await conn.execute(stmt)
        return result.inserted_primary_key[0]

    async def list_where(self, *conditions) -> list[Row]:
        """List records matching all conditions, in the store's natural order."""
        stmt = select(self.table).where(*conditions)
        async with self.manager.statement() as conn:
            result = await conn.execute(stmt)
            return list(result.all())

    async def update_by_id(self, pk_value: Any, **values: Any) -> int:
        """Overwrite columns on the record with this key; return the affected-row count."""
        stmt = update(self.table).where(self.pk == pk_value).values(**values)
        async with self.manager.statement() as conn:
            result = await conn.execute(stmt)
        return result.rowcount

    async def delete_by_id(self, pk_value: Any) -> int:
        """Delete the record with this key; return the affected-row count."""
        stmt = delete(self.table).where(self.pk == pk_value)
        async with self.manager.statement() as conn:
            result = await conn.execute(stmt)
        return result.rowcount
