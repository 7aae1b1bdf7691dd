"""
Selection log model.

Append-only record of every emotion chosen by either strategy.
"""

from datetime import datetime

from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base
from db.types import UTCDateTime
from models.emotion import Emotion, SelectionStrategy


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Selection(Base):
    """
    A single "now playing" pick.

    Rows are never updated; the only deletion path is a full room reset.
    Ordering is (selected_at, id), so two rows written with the same
    timestamp keep their insertion order.
    """

    __tablename__ = "playlist_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    strategy: Mapped[SelectionStrategy] = mapped_column(
        "system_type",
        SAEnum(SelectionStrategy, values_callable=_enum_values, native_enum=False, length=16),
        nullable=False,
    )

    emotion: Mapped[Emotion] = mapped_column(
        SAEnum(Emotion, values_callable=_enum_values, native_enum=False, length=32),
        nullable=False,
    )

    selected_at: Mapped[datetime] = mapped_column(
        "timestamp",
        UTCDateTime(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Selection {self.strategy.value}:{self.emotion.value} @ {self.selected_at.isoformat()}>"
