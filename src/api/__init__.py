"""API — camada de borda HTTP.

Responsabilidades:
- Receber o handshake e as entregas do webhook
- Validar assinatura HMAC e JSON do corpo
- Converter cada erro no status HTTP correspondente

Subpastas:
- connectors/: regras do protocolo hub (assinatura, challenge, parse)
- routes/: endpoints HTTP (health, webhook)

NÃO PODE conter: IO de arquivos ou leitura de ambiente.
"""
