"""
Strategy satisfaction metric.

Coverage is a proxy: the share of currently requested emotions that
appeared among a strategy's most recent picks. It says nothing about how
long each group waited or how many people each pick pleased.
"""

from dataclasses import dataclass, field
from typing import Collection, Iterable, Mapping

from models.emotion import Emotion, SelectionStrategy
from repositories.selection_repository import SelectionRepository

DEFAULT_COVERAGE_LOOKBACK = 10


def coverage(requested: Collection[Emotion], played: Iterable[Emotion]) -> float:
    """Percentage of ``requested`` found in ``played``; 100 when nothing is requested."""
    if not requested:
        return 100.0
    played_set = set(played)
    covered = sum(1 for emotion in set(requested) if emotion in played_set)
    return covered / len(set(requested)) * 100


@dataclass
class SatisfactionReport:
    """Coverage percentage per strategy."""

    baseline: float
    fairness: float
    requested_emotions: list[Emotion] = field(default_factory=list)


class SatisfactionEvaluator:
    """Compares the two strategies' recent picks against current demand."""

    def __init__(self, lookback: int = DEFAULT_COVERAGE_LOOKBACK):
        self.lookback = lookback

    async def strategy_coverage(
        self,
        strategy: SelectionStrategy,
        requested: Collection[Emotion],
        history: SelectionRepository,
    ) -> float:
        if not requested:
            return 100.0
        rows = await history.recent(strategy, self.lookback)
        return coverage(requested, (row.emotion for row in rows))

    async def evaluate(
        self,
        distribution: Mapping[Emotion, int],
        history: SelectionRepository,
    ) -> SatisfactionReport:
        requested = list(distribution.keys())
        return SatisfactionReport(
            baseline=await self.strategy_coverage(SelectionStrategy.BASELINE, requested, history),
            fairness=await self.strategy_coverage(SelectionStrategy.FAIRNESS, requested, history),
            requested_emotions=requested,
        )
