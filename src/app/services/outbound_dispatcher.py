"""Dispatcher outbound: mensagem canônica -> requisições ao provedor.

Fluxo:
1. Valida configuração do canal (sem rede em caso de falha)
2. Com um anexo: relay de mídia + um envio com a variante por MIME
3. Sem anexo: segmenta o texto e envia em ordem, sequencialmente
4. A primeira falha interrompe o loop; o id reportado é o do primeiro envio

Nunca levanta exceção por falha de envio: o resultado é sempre um
SendOutcome com status, external_id, falha tipada e logs acumulados.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.segments import MAX_TEXT_LENGTH, split_text
from app.protocols.http_transport import HttpRequest
from app.protocols.models import ChannelLog, FailureKind, SendFailure, SendOutcome
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpTransportProtocol
    from app.protocols.models import OutgoingMessage, SendResult
    from app.protocols.send_profile import MediaRelayProtocol, SendContext, SendProfileProtocol

logger = logging.getLogger(__name__)


class OutboundDispatcher:
    """Orquestra o envio de uma mensagem para um canal."""

    def __init__(
        self,
        profile: SendProfileProtocol,
        transport: HttpTransportProtocol,
        media_relay: MediaRelayProtocol | None = None,
        user_agent: str = "",
        max_text_length: int = MAX_TEXT_LENGTH,
    ) -> None:
        self._profile = profile
        self._transport = transport
        self._media_relay = media_relay
        self._user_agent = user_agent
        self._max_text_length = max_text_length

    async def send(self, msg: OutgoingMessage) -> SendOutcome:
        outcome = SendOutcome(msg_id=msg.id)

        try:
            context = self._profile.prepare(msg)
        except ConfigurationError as exc:
            logger.error(
                "send_configuration_error",
                extra={"msg_id": msg.id, "channel_uuid": msg.channel.uuid, "error": str(exc)},
            )
            return self._reject(outcome, FailureKind.CONFIGURATION, str(exc))

        if len(msg.attachments) > 1:
            return self._reject(
                outcome,
                FailureKind.ATTACHMENT_POLICY,
                f"message has {len(msg.attachments)} attachments, only one is allowed",
            )

        if msg.attachments:
            return await self._send_attachment(msg, context, outcome)
        return await self._send_segments(msg, context, outcome)

    async def _send_segments(
        self,
        msg: OutgoingMessage,
        context: SendContext,
        outcome: SendOutcome,
    ) -> SendOutcome:
        segments = split_text(msg.text, self._max_text_length)
        first_external_id: str | None = None

        for index, segment in enumerate(segments):
            result = await self._send_wire(msg, context, self._profile.text_payload(msg, segment), outcome)
            if result.failure is not None:
                logger.warning(
                    "wire_send_failed",
                    extra={
                        "msg_id": msg.id,
                        "segment_index": index,
                        "segment_count": len(segments),
                        "failure_kind": result.failure.kind,
                    },
                )
                return outcome.fail(result.failure)
            if index == 0:
                first_external_id = result.external_id

        if not first_external_id:
            logger.warning(
                "wire_send_without_external_id",
                extra={"msg_id": msg.id, "segment_count": len(segments)},
            )
            return outcome.fail(
                SendFailure(FailureKind.MALFORMED_RESPONSE, "provider response has no message id")
            )

        logger.info(
            "message_wired",
            extra={"msg_id": msg.id, "segment_count": len(segments)},
        )
        return outcome.wire(first_external_id)

    async def _send_attachment(
        self,
        msg: OutgoingMessage,
        context: SendContext,
        outcome: SendOutcome,
    ) -> SendOutcome:
        mime_type, separator, source_url = msg.attachments[0].partition(":")
        if not separator or not mime_type or not source_url:
            return self._reject(outcome, FailureKind.ATTACHMENT_POLICY, "invalid attachment format")

        if self._media_relay is None or not context.media_url:
            return self._reject(
                outcome,
                FailureKind.ATTACHMENT_POLICY,
                f"attachments are not supported on {msg.channel.channel_type} channels",
            )

        if not self._profile.accepts_media(mime_type):
            return self._reject(
                outcome,
                FailureKind.ATTACHMENT_POLICY,
                f"unknown attachment mime type: {mime_type}",
            )

        relayed = await self._media_relay.relay(source_url, mime_type, context.media_url, context.token)
        for log in relayed.logs:
            outcome.add_log(log)
        if relayed.failure is not None or not relayed.media_id:
            failure = relayed.failure or SendFailure(
                FailureKind.MALFORMED_UPLOAD_RESPONSE, "malformed upload response"
            )
            logger.warning(
                "media_relay_failed",
                extra={"msg_id": msg.id, "failure_kind": failure.kind},
            )
            return outcome.fail(failure)

        payload = self._profile.media_payload(msg, mime_type, relayed.media_id)
        result = await self._send_wire(msg, context, payload, outcome)
        if result.failure is not None:
            logger.warning(
                "wire_send_failed",
                extra={"msg_id": msg.id, "failure_kind": result.failure.kind},
            )
            return outcome.fail(result.failure)
        return outcome.wire(result.external_id)

    async def _send_wire(
        self,
        msg: OutgoingMessage,
        context: SendContext,
        payload: dict[str, Any],
        outcome: SendOutcome,
    ) -> SendResult:
        body = json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {context.token}",
        }
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        request = HttpRequest(
            method="POST",
            url=self._profile.message_url(context, msg),
            headers=headers,
            body=body,
        )

        response = await self._transport.perform(request)
        result = self._profile.classify(response)

        outcome.add_log(
            ChannelLog(
                description="Message Sent" if result.failure is None else "Message Send Error",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
                request_body=body.decode("utf-8"),
                response_body=response.body.decode("utf-8", errors="replace"),
                elapsed_ms=response.elapsed_ms,
                error=result.failure.message if result.failure else None,
            )
        )
        return result

    @staticmethod
    def _reject(outcome: SendOutcome, kind: FailureKind, message: str) -> SendOutcome:
        """Falha antes de qualquer chamada de rede."""
        failure = SendFailure(kind=kind, message=message)
        outcome.add_log(ChannelLog(description="Message Send Error", error=message))
        return outcome.fail(failure)
