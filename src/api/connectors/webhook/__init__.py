"""Webhook: parsing seguro e validação de schema do corpo recebido."""

from .receive import parse_json_body, validate_payload

__all__ = [
    "parse_json_body",
    "validate_payload",
]
