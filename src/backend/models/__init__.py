"""Database models module."""

from models.emotion import EMOTION_CATALOG, Emotion, EmotionInfo, SelectionStrategy
from models.selection import Selection
from models.vote import EmotionVote

__all__ = [
    "Emotion",
    "EmotionInfo",
    "EMOTION_CATALOG",
    "SelectionStrategy",
    "EmotionVote",
    "Selection",
]
