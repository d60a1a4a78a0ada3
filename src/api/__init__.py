"""API: camada de borda e adapters de canais.

Responsabilidades:
- Receber webhooks dos provedores
- Validar e normalizar payloads para eventos canônicos
- Construir payloads de envio e classificar respostas
- Transporte HTTP e relay de mídia

Subpastas:
- connectors/: transporte, relay de mídia, classificador, parsing de webhook
- handlers/: um handler por tipo de canal + registry
- normalizers/: payload externo → eventos canônicos
- payload_builders/: eventos canônicos → payload do provedor
- routes/: endpoints HTTP
"""
