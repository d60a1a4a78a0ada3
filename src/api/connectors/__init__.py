"""Connectors: adapters de borda para APIs dos provedores.

Estrutura:
- http_transport.py: transporte httpx sem retry
- media_relay.py: fetch + upload de anexos
- response_classifier.py: resposta de envio -> sucesso ou falha tipada
- endpoints.py: resolução de URLs a partir da config do canal
- webhook/: parsing e validação do corpo recebido
"""

__all__: list[str] = []
