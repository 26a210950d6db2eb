"""API — borda com o backend REST do CRM.

Responsabilidades:
- Normalizar respostas do backend (envelopes variáveis) para listas canônicas

Subpastas:
- normalizers/: extração da lista de registros de payloads brutos

NÃO PODE conter: derivação de status, regras de agenda, montagem de telas.
"""
