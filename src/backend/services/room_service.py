"""
Listening room service.

Owns the room's shared state (votes and selection history) and exposes
the operations the API layer calls. Writers (vote submission, selection,
reset) are serialized by an asyncio lock, and every operation runs in a
single database transaction so a selection's baseline/fairness pair is
committed together.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.config import Settings, settings
from core.exceptions import InvalidEmotionError, InvalidParticipantError
from db.types import as_utc, utc_now
from models.emotion import Emotion, SelectionStrategy
from models.selection import Selection
from models.vote import PARTICIPANT_ID_MAX_LENGTH, EmotionVote
from repositories.selection_repository import SelectionRepository
from repositories.vote_repository import VoteRepository
from services.aggregation import Distribution, VoteAggregator
from services.satisfaction import SatisfactionEvaluator, SatisfactionReport
from services.selection_engine import SelectionEngine, SelectionResult

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


@dataclass
class RoomStats:
    """Selection history plus the distribution it is judged against."""

    history: Sequence[Selection]
    current_emotions: Distribution


class RoomService:
    """
    The single global listening room.

    Usage:
        room = RoomService(get_session_factory())
        await room.submit_vote("session-token", "Calm")
        result = await room.select_next()
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        vote_window: timedelta = timedelta(minutes=30),
        fairness_lookback: int = 20,
        unseen_distance: int = 100,
        coverage_lookback: int = 10,
        stats_limit: int = 100,
        clock: Clock = utc_now,
    ):
        self._session_factory = session_factory
        self._write_lock = asyncio.Lock()
        self._clock = clock
        self.aggregator = VoteAggregator(vote_window)
        self.engine = SelectionEngine(lookback=fairness_lookback, unseen_distance=unseen_distance)
        self.evaluator = SatisfactionEvaluator(lookback=coverage_lookback)
        self.stats_limit = stats_limit

    @classmethod
    def from_settings(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        config: Settings = settings,
        clock: Clock = utc_now,
    ) -> "RoomService":
        """Build a room using the tuning values from application settings."""
        return cls(
            session_factory,
            vote_window=timedelta(minutes=config.VOTE_WINDOW_MINUTES),
            fairness_lookback=config.FAIRNESS_LOOKBACK,
            unseen_distance=config.FAIRNESS_UNSEEN_DISTANCE,
            coverage_lookback=config.COVERAGE_LOOKBACK,
            stats_limit=config.STATS_HISTORY_LIMIT,
            clock=clock,
        )

    def now(self) -> datetime:
        return self._clock()

    def _resolve_now(self, now: Optional[datetime]) -> datetime:
        return as_utc(now) if now is not None else self.now()

    # =========================================================================
    # Votes
    # =========================================================================

    @staticmethod
    def _validate_participant(participant_id: object) -> str:
        if not isinstance(participant_id, str) or not participant_id.strip():
            raise InvalidParticipantError("Participant id must be a non-empty string")
        if len(participant_id) > PARTICIPANT_ID_MAX_LENGTH:
            raise InvalidParticipantError(
                f"Participant id must be at most {PARTICIPANT_ID_MAX_LENGTH} characters"
            )
        return participant_id

    async def submit_vote(self, participant_id: str, emotion: Emotion | str) -> EmotionVote:
        """
        Record or overwrite a participant's current emotion.

        Raises:
            InvalidEmotionError: emotion is not in the closed set (no state change)
            InvalidParticipantError: participant id is empty or too long
        """
        try:
            parsed = Emotion.parse(emotion)
        except ValueError:
            raise InvalidEmotionError(emotion) from None
        participant_id = self._validate_participant(participant_id)

        async with self._write_lock:
            async with self._session_factory() as session, session.begin():
                vote = await VoteRepository(session).upsert(participant_id, parsed, self.now())

        logger.info("Vote recorded", participant_id=participant_id, emotion=parsed.value)
        return vote

    async def get_distribution(self, now: Optional[datetime] = None) -> Distribution:
        """Active emotion counts, sparse and in canonical emotion order."""
        async with self._session_factory() as session, session.begin():
            return await self.aggregator.current_distribution(
                VoteRepository(session), self._resolve_now(now)
            )

    # =========================================================================
    # Selection
    # =========================================================================

    async def select_next(self, now: Optional[datetime] = None) -> SelectionResult:
        """
        Choose the next emotion under both strategies and log the play.

        Returns an empty result without writing anything when there are no
        active votes.
        """
        async with self._write_lock:
            async with self._session_factory() as session, session.begin():
                moment = self._resolve_now(now)
                distribution = await self.aggregator.current_distribution(VoteRepository(session), moment)
                result = await self.engine.select_next(distribution, SelectionRepository(session), moment)

        if result.is_empty:
            logger.debug("Selection skipped, no active votes")
        return result

    # =========================================================================
    # Stats
    # =========================================================================

    async def get_stats(
        self,
        limit: Optional[int] = None,
        strategy: Optional[SelectionStrategy] = None,
    ) -> RoomStats:
        """Most-recent-first history (optionally one strategy) and current distribution."""
        async with self._session_factory() as session, session.begin():
            history = await SelectionRepository(session).recent(
                strategy, limit if limit is not None else self.stats_limit
            )
            distribution = await self.aggregator.current_distribution(VoteRepository(session), self.now())
        return RoomStats(history=history, current_emotions=distribution)

    async def evaluate(self, now: Optional[datetime] = None) -> SatisfactionReport:
        """Coverage of current demand by each strategy's recent picks."""
        async with self._session_factory() as session, session.begin():
            distribution = await self.aggregator.current_distribution(
                VoteRepository(session), self._resolve_now(now)
            )
            return await self.evaluator.evaluate(distribution, SelectionRepository(session))

    # =========================================================================
    # Reset
    # =========================================================================

    async def reset(self) -> None:
        """Clear all votes and the entire selection history atomically."""
        async with self._write_lock:
            async with self._session_factory() as session, session.begin():
                votes_removed = await VoteRepository(session).clear()
                selections_removed = await SelectionRepository(session).clear()

        logger.info("Room reset", votes_removed=votes_removed, selections_removed=selections_removed)
