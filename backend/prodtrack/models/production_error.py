from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class ProductionError(RecordMixin, Base):
    """Production error (rework, scrap, quality escape). Removed with a physical delete."""
    __tablename__ = 'production_errors'
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    product: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    action: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    cost: Mapped[float] = mapped_column(Float, nullable=False)
    wasted_qty: Mapped[Optional[float]] = mapped_column(Float, nullable=True)


__all__ = ['ProductionError']
