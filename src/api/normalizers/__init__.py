"""Normalizers — conversão de respostas do backend para estruturas internas.

Estrutura:
- payload/: extração da lista de registros de envelopes heterogêneos
"""

from .payload import normalize, normalize_records

__all__ = [
    "normalize",
    "normalize_records",
]
