"""
Emotion categories and selection strategies.

The declaration order of ``Emotion`` is the room's canonical iteration
order; both selection strategies break ties by it.
"""

from dataclasses import dataclass
from enum import Enum


class Emotion(str, Enum):
    """Closed set of emotional states a participant can report."""

    HAPPY = "Happy"
    CALM = "Calm"
    FOCUSED = "Focused"
    ENERGETIC = "Energetic"
    MELANCHOLIC = "Melancholic"

    @classmethod
    def parse(cls, value: object) -> "Emotion":
        """Look up an emotion by its exact name; raises ValueError otherwise."""
        if isinstance(value, cls):
            return value
        return cls(value)


class SelectionStrategy(str, Enum):
    """Algorithm that produced a selection."""

    BASELINE = "baseline"  # Majority wins
    FAIRNESS = "fairness"  # Starvation-aware


@dataclass(frozen=True)
class EmotionInfo:
    """Display metadata for an emotion."""

    emotion: Emotion
    color: str
    description: str


EMOTION_CATALOG: tuple[EmotionInfo, ...] = (
    EmotionInfo(Emotion.HAPPY, "#FBBF24", "Upbeat, joyful tunes"),
    EmotionInfo(Emotion.CALM, "#60A5FA", "Ambient, soothing sounds"),
    EmotionInfo(Emotion.FOCUSED, "#34D399", "Lo-fi, deep work beats"),
    EmotionInfo(Emotion.ENERGETIC, "#F87171", "High-tempo, motivating tracks"),
    EmotionInfo(Emotion.MELANCHOLIC, "#A78BFA", "Soulful, reflective melodies"),
)
