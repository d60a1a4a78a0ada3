"""Exceções de domínio do adapter de canais.

Hierarquia:
- ChannelAdapterError: base
  - RequestValidationError: payload inbound rejeitado (HTTP 400)
    - InvalidJsonError, PayloadSchemaError, IdentityError, TimestampError
  - ConfigurationError: credenciais/URLs ausentes no canal
  - HandlerNotFoundError / ChannelNotFoundError: roteamento (HTTP 404)
  - MessageNotFoundError: status para external_id desconhecido
"""

from __future__ import annotations


class ChannelAdapterError(Exception):
    """Base para erros do adapter."""


class RequestValidationError(ChannelAdapterError):
    """Payload inbound inválido; a requisição inteira é abortada."""


class InvalidJsonError(RequestValidationError):
    """Corpo da requisição não é um objeto JSON."""


class PayloadSchemaError(RequestValidationError):
    """Campo obrigatório ausente ou com tipo inválido."""


class IdentityError(RequestValidationError):
    """Endereço do remetente não pode ser convertido em URN."""


class TimestampError(RequestValidationError):
    """Timestamp em formato não suportado."""


class ConfigurationError(ChannelAdapterError):
    """Configuração obrigatória do canal ausente ou inválida."""


class HandlerNotFoundError(ChannelAdapterError):
    """Nenhum handler registrado para o tipo de canal."""


class ChannelNotFoundError(ChannelAdapterError):
    """Canal desconhecido para o tipo/uuid informado."""


class MessageNotFoundError(ChannelAdapterError):
    """Persistência não conhece o external_id referenciado."""
