from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.base.models import BaseDbModel

if TYPE_CHECKING:
    from src.inspection.models import Inspection


class Transformer(BaseDbModel):
    __tablename__ = "transformers"

    transformer_no: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    region: Mapped[str | None] = mapped_column(String, nullable=True)
    pole_no: Mapped[str | None] = mapped_column(String, nullable=True)
    transformer_type: Mapped[str | None] = mapped_column(String, nullable=True)
    location: Mapped[str | None] = mapped_column(String, nullable=True)

    inspections: Mapped[list[Inspection]] = relationship(back_populates="transformer")
