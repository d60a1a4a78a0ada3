"""Protocolos HTTP usados pelo app.

O transporte nunca levanta exceção por falha de rede: o erro é
reportado em HttpResult.error para ser classificado pelo chamador.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """Requisição HTTP montada pelo adapter."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True, slots=True)
class HttpResult:
    """Resposta (ou falha de transporte) de uma chamada HTTP."""

    status_code: int | None = None
    body: bytes = b""
    error: str | None = None
    elapsed_ms: float = 0.0

    @property
    def is_success_status(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class HttpTransportProtocol(Protocol):
    """Contrato mínimo para execução de chamadas HTTP."""

    async def perform(self, request: HttpRequest) -> HttpResult: ...
