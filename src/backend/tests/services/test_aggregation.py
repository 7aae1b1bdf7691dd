"""
Tests for vote aggregation.
"""

from datetime import timedelta

import pytest

from models.emotion import Emotion
from repositories.vote_repository import VoteRepository
from services.aggregation import VoteAggregator, order_distribution


@pytest.mark.unit
class TestOrderDistribution:
    """Canonical ordering of counts."""

    def test_orders_by_emotion_declaration(self) -> None:
        counts = {Emotion.MELANCHOLIC: 1, Emotion.HAPPY: 2, Emotion.FOCUSED: 3}
        assert list(order_distribution(counts)) == [
            Emotion.HAPPY,
            Emotion.FOCUSED,
            Emotion.MELANCHOLIC,
        ]

    def test_drops_zero_counts(self) -> None:
        assert order_distribution({Emotion.CALM: 0, Emotion.HAPPY: 1}) == {Emotion.HAPPY: 1}


@pytest.mark.unit
class TestVoteAggregator:
    """Windowed distribution."""

    def test_rejects_non_positive_window(self) -> None:
        with pytest.raises(ValueError):
            VoteAggregator(timedelta(0))

    async def test_window_boundary(self, session, clock) -> None:
        """A vote exactly window-old is expired; one second younger is active."""
        repo = VoteRepository(session)
        aggregator = VoteAggregator(timedelta(minutes=30))
        voted_at = clock()
        await repo.upsert("p1", Emotion.CALM, voted_at)

        inside = voted_at + timedelta(minutes=30) - timedelta(seconds=1)
        edge = voted_at + timedelta(minutes=30)

        assert await aggregator.current_distribution(repo, inside) == {Emotion.CALM: 1}
        assert await aggregator.current_distribution(repo, edge) == {}

    async def test_counts_latest_vote_per_participant(self, session, clock) -> None:
        repo = VoteRepository(session)
        aggregator = VoteAggregator()
        await repo.upsert("p1", Emotion.CALM, clock())
        await repo.upsert("p2", Emotion.CALM, clock())
        await repo.upsert("p1", Emotion.HAPPY, clock.advance(seconds=1))

        distribution = await aggregator.current_distribution(repo, clock())

        assert distribution == {Emotion.HAPPY: 1, Emotion.CALM: 1}
        assert list(distribution) == [Emotion.HAPPY, Emotion.CALM]
