"""API — camada de borda e adapters externos.

Responsabilidades:
- Receber o POST do formulário de inscrição
- Validar o payload
- Construir payloads e chamar a API de contatos Systeme.io

Subpastas:
- connectors/: cliente HTTP e parsing de erros do upstream
- payload_builders/: construção de payloads para APIs externas
- validators/: validação de payloads de entrada
- routes/: endpoints HTTP (inscrição, health)

NÃO PODE conter: regras de mapeamento de resultado (ficam em app/use_cases).
"""
