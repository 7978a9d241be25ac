from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import BigInteger, Boolean, Enum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.base.models import BaseDbModel, UTCDateTime
from src.transformer.models import Transformer


class InspectionStatus(enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Inspection(BaseDbModel):
    __tablename__ = "inspections"

    transformer_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("transformers.id"), nullable=False, index=True
    )
    inspected_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    maintenance_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(), nullable=True
    )
    status: Mapped[InspectionStatus] = mapped_column(
        Enum(InspectionStatus),
        nullable=False,
        default=InspectionStatus.IN_PROGRESS,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    starred: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    transformer: Mapped[Transformer] = relationship(back_populates="inspections")
