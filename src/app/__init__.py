"""App — orquestração, casos de uso e wiring do serviço.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, dependências)
- use_cases/: caso de uso de inscrição (sem IO direto)
- domain/: modelos da requisição e do resultado
- protocols/: contratos entre app e conectores
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
