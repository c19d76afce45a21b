from __future__ import annotations
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class ProductionObservation(RecordMixin, Base):
    __tablename__ = 'production_observations'
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    product: Mapped[str] = mapped_column(String(100), nullable=False)
    observation_type: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    had_impact: Mapped[bool] = mapped_column(Boolean, nullable=False)


__all__ = ['ProductionObservation']
