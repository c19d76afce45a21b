from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, RecordMixin


class Machine(RecordMixin, Base):
    __tablename__ = 'machines'
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # uniqueness among active machines is checked by the service; soft-deleted codes may be reused
    code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(32), nullable=False, index=True)


__all__ = ['Machine']
