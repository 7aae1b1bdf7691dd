"""
Vote repository for database operations.

Holds the one current vote per participant.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.emotion import Emotion
from models.vote import EmotionVote


class VoteRepository:
    """Repository for emotion vote database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_participant(self, participant_id: str) -> Optional[EmotionVote]:
        """Get the current vote of a participant."""
        result = await self.db.execute(
            select(EmotionVote).where(EmotionVote.participant_id == participant_id)
        )
        return result.scalar_one_or_none()

    async def upsert(
        self,
        participant_id: str,
        emotion: Emotion,
        recorded_at: datetime,
    ) -> EmotionVote:
        """
        Insert or overwrite the participant's vote.

        The timestamp is always reset, even when the emotion is unchanged.
        """
        vote = await self.get_by_participant(participant_id)
        if vote is None:
            vote = EmotionVote(
                participant_id=participant_id,
                emotion=emotion,
                recorded_at=recorded_at,
            )
            self.db.add(vote)
        else:
            vote.emotion = emotion
            vote.recorded_at = recorded_at

        await self.db.flush()
        return vote

    async def count_by_emotion_since(self, cutoff: datetime) -> dict[Emotion, int]:
        """
        Count votes per emotion recorded strictly after ``cutoff``.

        Emotions without votes are absent from the result.
        """
        result = await self.db.execute(
            select(EmotionVote.emotion, func.count(EmotionVote.id).label("vote_count"))
            .where(EmotionVote.recorded_at > cutoff)
            .group_by(EmotionVote.emotion)
        )
        return {row.emotion: row.vote_count for row in result.all()}

    async def clear(self) -> int:
        """Delete every vote; returns the number of rows removed."""
        result = await self.db.execute(delete(EmotionVote))
        return result.rowcount or 0
