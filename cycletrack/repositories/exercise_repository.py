from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from cycletrack.models.exercise import ExerciseDefinition


class ExerciseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_user(self, user_id: int) -> List[ExerciseDefinition]:
        result = await self.db.execute(
            select(ExerciseDefinition)
            .where(ExerciseDefinition.user_id == user_id)
            .order_by(ExerciseDefinition.name.asc())
        )
        return list(result.scalars().all())

    async def get_by_name(
            self,
            user_id: int,
            name: str,
            for_update: bool = False,
    ) -> Optional[ExerciseDefinition]:
        """for_update=True блокирует строку до коммита (SELECT ... FOR UPDATE)"""
        query = select(ExerciseDefinition).where(
            ExerciseDefinition.user_id == user_id,
            ExerciseDefinition.name == name,
        )
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def save(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        """Вставить или заменить определение упражнения (ключ — user_id + name)"""
        exercise = await self.db.merge(exercise)
        await self.db.commit()
        return exercise
