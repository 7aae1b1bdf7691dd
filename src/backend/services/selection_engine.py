"""
Now-playing selection.

Two strategies run side by side on every request:

- Baseline: the emotion with the most active votes.
- Fairness: the emotion with the highest starvation score, where
  ``score = distance * count`` and ``distance`` is how many fairness picks
  ago the emotion was last chosen (0 = the latest pick). Emotions absent
  from the lookback window get a fixed ceiling distance.

Both strategies iterate the distribution in canonical emotion order and
keep the first maximum, so ties go to the earlier-declared emotion.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Sequence

import structlog

from db.types import as_utc
from models.emotion import Emotion, SelectionStrategy
from models.selection import Selection
from repositories.selection_repository import SelectionRepository

logger = structlog.get_logger(__name__)

DEFAULT_FAIRNESS_LOOKBACK = 20
DEFAULT_UNSEEN_DISTANCE = 100


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of one selection request; both fields are None when nobody voted."""

    baseline: Optional[Emotion]
    fairness: Optional[Emotion]

    @property
    def is_empty(self) -> bool:
        return self.baseline is None and self.fairness is None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "baseline": self.baseline.value if self.baseline else None,
            "fairness": self.fairness.value if self.fairness else None,
        }


def select_baseline(distribution: Mapping[Emotion, int]) -> Optional[Emotion]:
    """Majority pick; first maximum in iteration order wins."""
    best: Optional[Emotion] = None
    best_count = -1
    for emotion, count in distribution.items():
        if count > best_count:
            best, best_count = emotion, count
    return best


def starvation_distance(
    emotion: Emotion,
    history: Sequence[Emotion],
    unseen_distance: int = DEFAULT_UNSEEN_DISTANCE,
) -> int:
    """Index of the most recent occurrence in ``history`` (most-recent-first)."""
    try:
        return history.index(emotion)
    except ValueError:
        return unseen_distance


def starvation_scores(
    distribution: Mapping[Emotion, int],
    history: Sequence[Emotion],
    unseen_distance: int = DEFAULT_UNSEEN_DISTANCE,
) -> dict[Emotion, int]:
    """Starvation score for every emotion in the distribution."""
    return {
        emotion: starvation_distance(emotion, history, unseen_distance) * count
        for emotion, count in distribution.items()
    }


def select_fairness(
    distribution: Mapping[Emotion, int],
    history: Sequence[Emotion],
    unseen_distance: int = DEFAULT_UNSEEN_DISTANCE,
) -> Optional[Emotion]:
    """Starvation-aware pick; first maximum score in iteration order wins."""
    best: Optional[Emotion] = None
    best_score = -1
    for emotion, score in starvation_scores(distribution, history, unseen_distance).items():
        if score > best_score:
            best, best_score = emotion, score
    return best


class SelectionEngine:
    """Runs both strategies and records their picks in the selection history."""

    def __init__(
        self,
        lookback: int = DEFAULT_FAIRNESS_LOOKBACK,
        unseen_distance: int = DEFAULT_UNSEEN_DISTANCE,
    ):
        self.lookback = lookback
        self.unseen_distance = unseen_distance

    async def fairness_history(self, history: SelectionRepository) -> list[Emotion]:
        """Emotions of the last ``lookback`` fairness picks, most-recent-first."""
        rows = await history.recent(SelectionStrategy.FAIRNESS, self.lookback)
        return [row.emotion for row in rows]

    async def select_next(
        self,
        distribution: Mapping[Emotion, int],
        history: SelectionRepository,
        now: datetime,
    ) -> SelectionResult:
        """
        Pick one emotion per strategy and append both picks to the history.

        An empty distribution is a no-op: nothing is written. The caller is
        responsible for running this inside a single transaction.
        """
        if not distribution:
            return SelectionResult(baseline=None, fairness=None)

        now = as_utc(now)
        baseline = select_baseline(distribution)
        recent = await self.fairness_history(history)
        fairness = select_fairness(distribution, recent, self.unseen_distance)

        # Keep the log non-decreasing even if the caller's clock went backwards
        latest = await history.latest_timestamp()
        selected_at = max(now, latest) if latest is not None else now

        await history.append(
            Selection(strategy=SelectionStrategy.BASELINE, emotion=baseline, selected_at=selected_at),
            Selection(strategy=SelectionStrategy.FAIRNESS, emotion=fairness, selected_at=selected_at),
        )

        logger.info(
            "Selection recorded",
            baseline=baseline.value,
            fairness=fairness.value,
            distribution={e.value: c for e, c in distribution.items()},
            fairness_history_size=len(recent),
        )
        return SelectionResult(baseline=baseline, fairness=fairness)
