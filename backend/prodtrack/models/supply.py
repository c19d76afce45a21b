from __future__ import annotations
from typing import Optional

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Supply(RecordMixin, Base):
    """Raw material (insumo) with the unit cost used to price losses."""
    __tablename__ = 'supplies'
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    unit: Mapped[str] = mapped_column(String(8), nullable=False)
    unit_cost: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)


__all__ = ['Supply']
