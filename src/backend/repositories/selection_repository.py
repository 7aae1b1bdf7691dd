"""
Selection history repository.

Append-only log of strategy picks, read most-recent-first.
"""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.emotion import SelectionStrategy
from models.selection import Selection


class SelectionRepository:
    """Repository for the selection history log."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append(self, *selections: Selection) -> None:
        """
        Append selections in the given order.

        All rows are flushed together so callers running inside one
        transaction commit them as a unit.
        """
        self.db.add_all(selections)
        await self.db.flush()

    async def recent(
        self,
        strategy: Optional[SelectionStrategy],
        limit: int,
    ) -> Sequence[Selection]:
        """Most-recent-first selections, optionally filtered by strategy."""
        query = select(Selection)
        if strategy is not None:
            query = query.where(Selection.strategy == strategy)
        query = query.order_by(Selection.selected_at.desc(), Selection.id.desc()).limit(limit)

        result = await self.db.execute(query)
        return result.scalars().all()

    async def all(self, limit: int) -> Sequence[Selection]:
        """Most-recent-first selections across both strategies."""
        return await self.recent(None, limit)

    async def latest_timestamp(self) -> Optional[datetime]:
        """Timestamp of the newest selection, or None when the log is empty."""
        result = await self.db.execute(select(func.max(Selection.selected_at)))
        return result.scalar()

    async def clear(self) -> int:
        """Delete the entire log; returns the number of rows removed."""
        result = await self.db.execute(delete(Selection))
        return result.rowcount or 0
