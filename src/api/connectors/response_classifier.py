"""Classificação de respostas do provedor após um envio.

Ordem de prioridade:
1. Falha de transporte (rede/timeout), independente do corpo
2. Campo de erro não vazio no corpo -> provider_rejected
3. Extração do id por estratégia do canal
4. Sem id extraível -> malformed_response

O status HTTP não participa da decisão.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from app.protocols.models import FailureKind, SendFailure, SendResult

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpResult

logger = logging.getLogger(__name__)

# Segmentos de caminho JSON: chave (str) ou índice de lista (int)
JsonPath = tuple[str | int, ...]


def get_json_string(data: Any, path: JsonPath) -> str | None:
    """Retorna a string no caminho informado, ou None se ausente/não-string."""
    current = data
    for part in path:
        if isinstance(part, int):
            if not isinstance(current, list) or not -len(current) <= part < len(current):
                return None
            current = current[part]
        else:
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]
    return current if isinstance(current, str) else None


class IdExtractor(Protocol):
    """Estratégia de extração do external id a partir do corpo JSON."""

    def extract(self, data: Any) -> str | None: ...


@dataclass(frozen=True, slots=True)
class FlatFieldIdExtractor:
    """Id presente diretamente em um campo (ex: messages[0].id)."""

    path: JsonPath

    def extract(self, data: Any) -> str | None:
        value = get_json_string(data, self.path)
        return value or None


@dataclass(frozen=True, slots=True)
class ResourceNameIdExtractor:
    """Id é o último segmento de um resource name (ex: phones/X/agentMessages/ID)."""

    path: JsonPath

    def extract(self, data: Any) -> str | None:
        name = get_json_string(data, self.path)
        if name is None:
            return None
        last_segment = name.split("/")[-1]
        return last_segment or None


@dataclass(frozen=True, slots=True)
class ProviderResponseClassifier:
    """Classifica HttpResult em SendResult (sucesso ou falha tipada)."""

    error_path: JsonPath
    id_extractor: IdExtractor

    def classify(self, result: HttpResult) -> SendResult:
        if result.error is not None:
            return _failure(FailureKind.TRANSPORT, f"transport error: {result.error}")

        data = _decode_json(result.body)

        error_title = get_json_string(data, self.error_path)
        if error_title and error_title.strip():
            return _failure(
                FailureKind.PROVIDER_REJECTED,
                f"received error from send endpoint: {error_title}",
            )

        external_id = self.id_extractor.extract(data)
        if not external_id:
            return _failure(
                FailureKind.MALFORMED_RESPONSE,
                "unable to get message id from response body",
            )

        return SendResult(external_id=external_id)


def _decode_json(body: bytes) -> Any:
    try:
        return json.loads(body) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("provider_response_not_json", extra={"body_size": len(body)})
        return None


def _failure(kind: FailureKind, message: str) -> SendResult:
    return SendResult(failure=SendFailure(kind=kind, message=message))
