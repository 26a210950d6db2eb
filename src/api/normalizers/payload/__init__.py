"""Normalizer de envelopes de resposta do backend do CRM.

Responsabilidades:
- Localizar a lista de registros dentro de respostas com envelope variável
  (`[...]`, `{data: [...]}`, `{rows: [...]}`, `{data: {rows: [...]}}`
  ou campo nomeado como `{agendas: [...]}`)
- Nunca falhar: envelope desconhecido vira lista vazia
"""

from .extractor import normalize, normalize_records

__all__ = [
    "normalize",
    "normalize_records",
]
