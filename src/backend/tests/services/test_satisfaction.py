"""
Tests for the coverage metric.
"""

import pytest

from models.emotion import Emotion, SelectionStrategy
from models.selection import Selection
from repositories.selection_repository import SelectionRepository
from services.satisfaction import SatisfactionEvaluator, coverage


@pytest.mark.unit
class TestCoverage:
    """Pure coverage computation."""

    def test_nothing_requested_is_fully_covered(self) -> None:
        assert coverage([], [Emotion.HAPPY]) == 100.0
        assert coverage([], []) == 100.0

    def test_partial_coverage(self) -> None:
        requested = [Emotion.HAPPY, Emotion.CALM]
        assert coverage(requested, [Emotion.HAPPY, Emotion.HAPPY]) == 50.0

    def test_no_plays(self) -> None:
        assert coverage([Emotion.CALM], []) == 0.0

    def test_unrequested_plays_do_not_count(self) -> None:
        requested = [Emotion.HAPPY, Emotion.CALM, Emotion.FOCUSED]
        played = [Emotion.CALM, Emotion.MELANCHOLIC]
        assert coverage(requested, played) == pytest.approx(100 / 3)


@pytest.mark.unit
class TestSatisfactionEvaluator:
    """Per-strategy evaluation against the selection history."""

    async def test_empty_distribution_is_100_regardless_of_history(self, session, clock) -> None:
        repo = SelectionRepository(session)
        await repo.append(
            Selection(strategy=SelectionStrategy.BASELINE, emotion=Emotion.HAPPY, selected_at=clock()),
        )

        report = await SatisfactionEvaluator().evaluate({}, repo)

        assert report.baseline == 100.0
        assert report.fairness == 100.0
        assert report.requested_emotions == []

    async def test_lookback_limits_played_set(self, session, clock) -> None:
        """Only the last N picks of each strategy count as played."""
        repo = SelectionRepository(session)
        await repo.append(
            Selection(
                strategy=SelectionStrategy.FAIRNESS,
                emotion=Emotion.CALM,
                selected_at=clock.advance(seconds=1),
            )
        )
        for _ in range(2):
            await repo.append(
                Selection(
                    strategy=SelectionStrategy.FAIRNESS,
                    emotion=Emotion.HAPPY,
                    selected_at=clock.advance(seconds=1),
                )
            )

        distribution = {Emotion.HAPPY: 3, Emotion.CALM: 1}

        assert (await SatisfactionEvaluator(lookback=2).evaluate(distribution, repo)).fairness == 50.0
        assert (await SatisfactionEvaluator(lookback=3).evaluate(distribution, repo)).fairness == 100.0
        assert (await SatisfactionEvaluator(lookback=3).evaluate(distribution, repo)).baseline == 0.0
