from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Maintenance(RecordMixin, Base):
    __tablename__ = 'maintenance'
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    machine: Mapped[str] = mapped_column(String(100), nullable=False)
    requester: Mapped[str] = mapped_column(String(100), nullable=False)
    technician: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    problem: Mapped[str] = mapped_column(String(500), nullable=False)
    solution: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    duration_hours: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, index=True)


__all__ = ['Maintenance']
