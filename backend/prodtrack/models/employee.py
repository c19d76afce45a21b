from __future__ import annotations
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Employee(RecordMixin, Base):
    __tablename__ = 'employees'
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    role: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)


__all__ = ['Employee']
