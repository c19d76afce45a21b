"""Canonical enumerations shared by every module.

Each concept has exactly one table: canonical code -> Portuguese display label.
Lookups go through ``normalize_label`` (diacritics stripped, upper-cased, spaces
and hyphens folded into ``_``) so "Pães", "PÃES", "paes" and "PAES" all resolve to
the same code without per-module copies of the mapping.
"""
from __future__ import annotations
import re
import unicodedata
from typing import Dict, Optional

SECTORS: Dict[str, str] = {
    'CONFEITARIA': 'Confeitaria',
    'PAES': 'Pães',
    'SALGADO': 'Salgado',
    'PAO_DE_QUEIJO': 'Pão de Queijo',
    'EMBALADORA': 'Embaladora',
    'MANUTENCAO': 'Manutenção',
}

ABSENCE_TYPES: Dict[str, str] = {
    'ATESTADO': 'Atestado',
    'FALTA_INJUSTIFICADA': 'Falta Injustificada',
    'BANCO_DE_HORAS': 'Banco de Horas',
}

LOSS_TYPES: Dict[str, str] = {
    'MASSA': 'Massa',
    'EMBALAGEM': 'Embalagem',
    'INSUMO': 'Insumo',
}

ERROR_CATEGORIES: Dict[str, str] = {
    'OPERACIONAL': 'Operacional',
    'EQUIPAMENTO': 'Equipamento',
    'MATERIAL': 'Material',
    'QUALIDADE': 'Qualidade',
}

MAINTENANCE_STATUSES: Dict[str, str] = {
    'EM_ABERTO': 'Em Aberto',
    'FECHADO': 'Fechado',
}

UNITS: Dict[str, str] = {
    'KG': 'Quilograma',
    'UND': 'Unidade',
}

# Legacy spellings whose normalized form differs from the code
ALIASES: Dict[str, Dict[str, str]] = {
    'unit': {'UN': 'UND', 'UNIDADE': 'UND', 'QUILOGRAMA': 'KG'},
}

CONCEPTS: Dict[str, Dict[str, str]] = {
    'sector': SECTORS,
    'absenceType': ABSENCE_TYPES,
    'lossType': LOSS_TYPES,
    'category': ERROR_CATEGORIES,
    'status': MAINTENANCE_STATUSES,
    'unit': UNITS,
}

_SEPARATORS = re.compile(r'[\s\-]+')


def normalize_label(raw: str) -> str:
    decomposed = unicodedata.normalize('NFKD', raw.strip())
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _SEPARATORS.sub('_', stripped.upper())


def canonicalize(concept: str, raw) -> Optional[str]:
    """Return the canonical code for ``raw`` or None when it is not accepted."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    table = CONCEPTS[concept]
    key = normalize_label(raw)
    if key in table:
        return key
    return ALIASES.get(concept, {}).get(key)


def label_for(concept: str, code: str) -> str:
    return CONCEPTS[concept].get(code, code)


__all__ = [
    'SECTORS', 'ABSENCE_TYPES', 'LOSS_TYPES', 'ERROR_CATEGORIES', 'MAINTENANCE_STATUSES', 'UNITS',
    'CONCEPTS', 'normalize_label', 'canonicalize', 'label_for',
]
