"""
Emotion vote model.

One row per participant; a new submission overwrites the emotion and
refreshes the timestamp.
"""

from datetime import datetime

from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base
from db.types import UTCDateTime, utc_now
from models.emotion import Emotion

PARTICIPANT_ID_MAX_LENGTH = 128


class EmotionVote(Base):
    """
    A participant's current emotional state.

    The participant id is an opaque per-session token supplied by the
    client; no other identity is stored.
    """

    __tablename__ = "user_emotions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    participant_id: Mapped[str] = mapped_column(
        "user_id",
        String(PARTICIPANT_ID_MAX_LENGTH),
        unique=True,
        index=True,
        nullable=False,
    )

    emotion: Mapped[Emotion] = mapped_column(
        SAEnum(Emotion, values_callable=lambda e: [m.value for m in e], native_enum=False, length=32),
        nullable=False,
    )

    recorded_at: Mapped[datetime] = mapped_column(
        "timestamp",
        UTCDateTime(),
        default=utc_now,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<EmotionVote {self.participant_id}={self.emotion.value}>"
