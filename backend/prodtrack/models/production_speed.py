from __future__ import annotations
from typing import Any, Dict, List

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class ProductionSpeed(RecordMixin, Base):
    """Monthly production plan vs. actual for one product of a sector."""
    __tablename__ = 'production_speed'
    mes_ano: Mapped[str] = mapped_column(String(7), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    produto: Mapped[str] = mapped_column(String(100), nullable=False)
    meta_mes: Mapped[float] = mapped_column(Float, nullable=False)
    daily_production: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    total_programado: Mapped[float] = mapped_column(Float, nullable=False)
    total_realizado: Mapped[float] = mapped_column(Float, nullable=False)
    velocidade: Mapped[float] = mapped_column(Float, nullable=False)


__all__ = ['ProductionSpeed']
