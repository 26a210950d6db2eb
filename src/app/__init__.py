"""App — núcleo de leitura do CRM jurídico.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- domain/: modelos de exibição (agenda, tarefas)
- services/: rotinas puras (horários, status, recorrência)
- use_cases/: montagem das listas exibidas pelas telas
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; fsm define os status; config configura.
"""
