"""Builders de payload para a API RBM (agentMessages)."""

from api.payload_builders.rbm.text import build_text_payload

__all__ = ["build_text_payload"]
