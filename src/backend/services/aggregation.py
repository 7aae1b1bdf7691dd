"""
Vote aggregation.

The distribution is recomputed from raw vote rows on every read; nothing
is cached between submissions.
"""

from datetime import datetime, timedelta
from typing import Mapping

from models.emotion import Emotion
from repositories.vote_repository import VoteRepository

Distribution = dict[Emotion, int]


def order_distribution(counts: Mapping[Emotion, int]) -> Distribution:
    """
    Return ``counts`` keyed in canonical emotion order, dropping zero entries.

    Tie-breaking in both selection strategies depends on this order.
    """
    return {emotion: counts[emotion] for emotion in Emotion if counts.get(emotion, 0) > 0}


class VoteAggregator:
    """Computes the active emotion distribution within a trailing window."""

    def __init__(self, window: timedelta = timedelta(minutes=30)):
        if window <= timedelta(0):
            raise ValueError("Vote window must be positive")
        self.window = window

    def cutoff(self, now: datetime) -> datetime:
        """Votes at or before this instant are expired."""
        return now - self.window

    async def current_distribution(self, votes: VoteRepository, now: datetime) -> Distribution:
        """Sparse emotion -> count map of votes newer than ``now - window``."""
        counts = await votes.count_by_emotion_since(self.cutoff(now))
        return order_distribution(counts)
