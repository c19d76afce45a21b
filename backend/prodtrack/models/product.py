from __future__ import annotations
from typing import Optional

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Product(RecordMixin, Base):
    __tablename__ = 'products'
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    unit: Mapped[str] = mapped_column(String(8), nullable=False)
    yield_: Mapped[Optional[float]] = mapped_column('yield', Float, nullable=True)
    unit_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)


__all__ = ['Product']
