"""App — inicialização, persistência e observabilidade.

Subpastas:
- bootstrap/: composition root (settings, logging)
- infra/: implementações concretas de IO (stores)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config parametriza; utils apoia.
"""
