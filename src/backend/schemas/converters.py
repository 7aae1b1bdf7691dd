"""Conversions from core results to API schemas."""

from typing import Mapping

from models.emotion import EMOTION_CATALOG, Emotion
from schemas.emotion import (
    EmotionCount,
    EmotionInfoResponse,
    SatisfactionResponse,
    SelectionRecord,
    StatsResponse,
)
from services.room_service import RoomStats
from services.satisfaction import SatisfactionReport


def distribution_to_counts(distribution: Mapping[Emotion, int]) -> list[EmotionCount]:
    return [EmotionCount(emotion=emotion, count=count) for emotion, count in distribution.items()]


def stats_to_response(stats: RoomStats) -> StatsResponse:
    return StatsResponse(
        history=[SelectionRecord.model_validate(row) for row in stats.history],
        current_emotions=distribution_to_counts(stats.current_emotions),
    )


def report_to_response(report: SatisfactionReport) -> SatisfactionResponse:
    return SatisfactionResponse(
        baseline=round(report.baseline, 2),
        fairness=round(report.fairness, 2),
        requested_emotions=report.requested_emotions,
    )


def emotion_catalog() -> list[EmotionInfoResponse]:
    return [
        EmotionInfoResponse(name=info.emotion, color=info.color, description=info.description)
        for info in EMOTION_CATALOG
    ]
