"""Schemas module initialization."""

from schemas.emotion import (
    EmotionCount,
    EmotionInfoResponse,
    EmotionSubmit,
    NextSelectionResponse,
    SatisfactionResponse,
    SelectionRecord,
    StatsResponse,
    SuccessResponse,
)

__all__ = [
    "EmotionSubmit",
    "EmotionCount",
    "EmotionInfoResponse",
    "NextSelectionResponse",
    "SatisfactionResponse",
    "SelectionRecord",
    "StatsResponse",
    "SuccessResponse",
]
