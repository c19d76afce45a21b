from __future__ import annotations
from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Absenteeism(RecordMixin, Base):
    __tablename__ = 'absenteeism'
    employee_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    absence_type: Mapped[str] = mapped_column(String(32), nullable=False)
    days_absent: Mapped[int] = mapped_column(Integer, nullable=False)


__all__ = ['Absenteeism']
