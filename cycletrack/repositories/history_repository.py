from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from cycletrack.models.history import CompletionRecord


class HistoryRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_user(self, user_id: int) -> List[CompletionRecord]:
        """Вся история пользователя, новые записи первыми"""
        result = await self.db.execute(
            select(CompletionRecord)
            .where(CompletionRecord.user_id == user_id)
            .order_by(CompletionRecord.completed_at.desc())
        )
        return list(result.scalars().all())

    async def list_between(self, user_id: int, start: datetime, end: datetime) -> List[CompletionRecord]:
        """Записи в полуинтервале [start, end)"""
        result = await self.db.execute(
            select(CompletionRecord).where(
                CompletionRecord.user_id == user_id,
                CompletionRecord.completed_at >= start,
                CompletionRecord.completed_at < end,
            )
        )
        return list(result.scalars().all())

    def add(self, record: CompletionRecord) -> None:
        # История только дополняется; коммит делает вызывающий вместе с обновлением упражнения
        self.db.add(record)
