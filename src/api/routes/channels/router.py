"""Endpoint de recebimento de webhooks dos provedores.

Endpoint:
- POST /c/{channel_type}/{channel_uuid}/receive

Respostas (sempre no envelope {"message", "data"}):
- 200 "Events Handled": um ack por evento, na ordem do payload
- 400 "Error": JSON inválido, schema, identidade ou timestamp
- 404 "Error": tipo de canal ou canal desconhecido
- 500 "Error": falha de persistência
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.webhook import parse_json_body
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from utils.errors import ChannelNotFoundError, HandlerNotFoundError, RequestValidationError

if TYPE_CHECKING:
    from app.use_cases.channels import ReceiveEventsUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

MESSAGE_HANDLED = "Events Handled"
MESSAGE_ERROR = "Error"


def build_envelope(message: str, data: list[dict[str, Any]], status_code: int) -> JSONResponse:
    """Envelope padrão; ecoa o correlation_id da requisição em qualquer status."""
    return JSONResponse(
        content={"message": message, "data": data},
        status_code=status_code,
        headers={"x-correlation-id": get_correlation_id()},
    )


def build_error_response(error: str, status_code: int) -> JSONResponse:
    return build_envelope(MESSAGE_ERROR, [{"type": "error", "error": error}], status_code)


def _get_receive_use_case(request: Request) -> ReceiveEventsUseCase:
    return request.app.state.receive_use_case


@router.post("/{channel_type}/{channel_uuid}/receive")
async def receive_events(channel_type: str, channel_uuid: str, request: Request) -> JSONResponse:
    """Recebe webhook do provedor, normaliza e persiste os eventos."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    log_extra = {"channel_type": channel_type.upper(), "channel_uuid": channel_uuid}

    try:
        raw_body = await request.body()
        logger.info("webhook_received", extra={**log_extra, "payload_size": len(raw_body)})

        use_case = _get_receive_use_case(request)
        try:
            use_case.resolve_channel(channel_type, channel_uuid)
            payload = parse_json_body(raw_body)
            acks = await use_case.execute(channel_type, channel_uuid, payload)
        except (HandlerNotFoundError, ChannelNotFoundError) as exc:
            logger.warning("channel_not_found", extra={**log_extra, "error": str(exc)})
            return build_error_response(str(exc), status.HTTP_404_NOT_FOUND)
        except RequestValidationError as exc:
            logger.warning(
                "webhook_rejected",
                extra={**log_extra, "error_type": type(exc).__name__, "error": str(exc)},
            )
            return build_error_response(str(exc), status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("webhook_processing_failed", extra=log_extra)
            return build_error_response("unable to handle events", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return build_envelope(MESSAGE_HANDLED, acks, status.HTTP_200_OK)
    finally:
        reset_correlation_id(token)
