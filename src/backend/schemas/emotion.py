"""
Emotion room Pydantic schemas.

Field names follow the wire format the listening-room frontend already
speaks (``user_id``, ``system_type``, ``timestamp``).
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from models.emotion import Emotion, SelectionStrategy
from models.vote import PARTICIPANT_ID_MAX_LENGTH


class EmotionSubmit(BaseModel):
    """Schema for reporting a participant's emotion."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(
        ...,
        alias="userId",
        min_length=1,
        max_length=PARTICIPANT_ID_MAX_LENGTH,
        description="Opaque per-session participant token",
    )
    # Validated by the room so unknown names map to the "Invalid emotion" error
    emotion: str


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = True


class EmotionInfoResponse(BaseModel):
    """Display metadata for one emotion."""

    name: Emotion
    color: str
    description: str


class EmotionCount(BaseModel):
    """Active vote count for one emotion."""

    emotion: Emotion
    count: int


class NextSelectionResponse(BaseModel):
    """Picks of both strategies; null when nobody has voted recently."""

    baseline: Optional[Emotion] = None
    fairness: Optional[Emotion] = None


class SelectionRecord(BaseModel):
    """One row of the selection history."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    system_type: SelectionStrategy = Field(validation_alias=AliasChoices("system_type", "strategy"))
    emotion: Emotion
    timestamp: datetime = Field(validation_alias=AliasChoices("timestamp", "selected_at"))


class StatsResponse(BaseModel):
    """Selection history (most recent first) and the current distribution."""

    model_config = ConfigDict(populate_by_name=True)

    history: list[SelectionRecord]
    current_emotions: list[EmotionCount] = Field(alias="currentEmotions")


class SatisfactionResponse(BaseModel):
    """
    Coverage per strategy, in percent.

    Coverage is the share of currently requested emotions that appeared in
    the strategy's recent picks. It is a proxy, not a measure of utility.
    """

    baseline: float
    fairness: float
    requested_emotions: list[Emotion]
