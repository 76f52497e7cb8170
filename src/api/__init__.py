"""API: camada de borda HTTP.

Responsabilidades:
- Endpoints HTTP (apontamentos, health)
- Checagem de permissão por rota (papel do usuário autenticado)
- Tradução de erros tipados do núcleo em status HTTP
- Propagação de correlation_id

Subpastas:
- routes/: endpoints HTTP por recurso
- middleware/: middlewares ASGI

NÃO PODE conter: regras de status do apontamento, cálculo de valores,
acesso direto a stores.
"""
