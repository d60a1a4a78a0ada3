"""App: núcleo do adapter com casos de uso, serviços e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: recebimento de eventos e envio outbound
- services/: dispatcher outbound genérico por canal
- infra/: stores em memória/YAML
- protocols/: contratos e modelos canônicos
- observability/: correlation_id para logs

Padrão: app executa; api adapta; utils apoia.
"""
