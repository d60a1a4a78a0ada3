"""Transporte HTTP base (httpx) para chamadas ao provedor.

Sem retries: cada chamada é uma única tentativa. Falhas de rede são
devolvidas em HttpResult.error para o classificador decidir.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from app.protocols.http_transport import HttpResult

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpRequest

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpxTransport:
    """Executa HttpRequest via httpx.AsyncClient."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def perform(self, request: HttpRequest) -> HttpResult:
        headers = {**self._config.default_headers, **request.headers}
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    request.method,
                    request.url,
                    headers=headers,
                    content=request.body,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            elapsed_ms = _elapsed_ms(started)
            logger.warning(
                "http_transport_error",
                extra={
                    "method": request.method,
                    "error_type": type(exc).__name__,
                    "elapsed_ms": elapsed_ms,
                },
            )
            return HttpResult(error=f"{type(exc).__name__}: {exc}", elapsed_ms=elapsed_ms)

        return HttpResult(
            status_code=response.status_code,
            body=response.content,
            elapsed_ms=_elapsed_ms(started),
        )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
