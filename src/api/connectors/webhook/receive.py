"""Parse e validação inicial do corpo de webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from utils.errors import InvalidJsonError, PayloadSchemaError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_body(raw_body: bytes) -> dict[str, object]:
    """Parseia o corpo bruto como objeto JSON.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body or b"")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("unable to parse request JSON") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("unable to parse request JSON: payload is not an object")

    return payload


def validate_payload(model: type[ModelT], payload: dict[str, object]) -> ModelT:
    """Valida campos obrigatórios do payload contra o schema do canal.

    Raises:
        PayloadSchemaError: Com a lista de campos inválidos
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise PayloadSchemaError(f"request JSON doesn't match required schema: {problems}") from exc
