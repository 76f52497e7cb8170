"""App: núcleo de apontamentos, orquestração e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: agregado Apontamento, eventos, paginação, comandos
- authz/: papéis e permissões
- services/: serviços de aplicação
- use_cases/: casos de uso em lote
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
