"""Handler WhatsApp (tipo WA).

Inbound: lote {messages, statuses}, timestamp epoch em segundos.
Outbound: texto segmentado ou um anexo via upload em /v1/media.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from api.connectors.endpoints import resolve_endpoint
from api.connectors.response_classifier import FlatFieldIdExtractor, ProviderResponseClassifier
from api.handlers.base import ChannelHandler
from api.normalizers.whatsapp import WhatsAppEventPayload, WhatsAppNormalizer
from api.payload_builders.whatsapp import build_media_payload, build_text_payload, get_media_builder
from app.protocols.models import CONFIG_AUTH_TOKEN, CONFIG_BASE_URL
from app.protocols.send_profile import SendContext

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpResult
    from app.protocols.models import Channel, OutgoingMessage, SendResult
    from app.services.outbound_dispatcher import OutboundDispatcher

SEND_PATH = "/v1/messages"
MEDIA_PATH = "/v1/media"

WHATSAPP_CLASSIFIER = ProviderResponseClassifier(
    error_path=("errors", 0, "title"),
    id_extractor=FlatFieldIdExtractor(("messages", 0, "id")),
)


class WhatsAppSendProfile:
    """Regras de wire do WhatsApp para o OutboundDispatcher."""

    def __init__(self, classifier: ProviderResponseClassifier = WHATSAPP_CLASSIFIER) -> None:
        self._classifier = classifier

    def prepare(self, msg: OutgoingMessage) -> SendContext:
        token = msg.channel.require_config(CONFIG_AUTH_TOKEN)
        base_url = msg.channel.require_config(CONFIG_BASE_URL)
        return SendContext(
            token=token,
            send_url=resolve_endpoint(base_url, SEND_PATH),
            media_url=resolve_endpoint(base_url, MEDIA_PATH),
        )

    def accepts_media(self, mime_type: str) -> bool:
        return get_media_builder(mime_type) is not None

    def message_url(self, context: SendContext, msg: OutgoingMessage) -> str:
        return context.send_url

    def text_payload(self, msg: OutgoingMessage, segment: str) -> dict[str, Any]:
        return build_text_payload(msg.urn.path, segment)

    def media_payload(self, msg: OutgoingMessage, mime_type: str, media_id: str) -> dict[str, Any]:
        return build_media_payload(msg.urn.path, mime_type, media_id, caption=msg.text)

    def classify(self, result: HttpResult) -> SendResult:
        return self._classifier.classify(result)


class WhatsAppHandler(ChannelHandler):
    channel_type: ClassVar[str] = "WA"
    name: ClassVar[str] = "WhatsApp"
    payload_model = WhatsAppEventPayload

    def __init__(self, dispatcher: OutboundDispatcher) -> None:
        super().__init__(WhatsAppNormalizer(), dispatcher)

    def build_media_download_headers(self, channel: Channel) -> dict[str, str]:
        """Headers para o host baixar a mídia diferida de uma mensagem recebida.

        Raises:
            ConfigurationError: Se o canal não tiver auth_token
        """
        token = channel.require_config(CONFIG_AUTH_TOKEN)
        return {"Authorization": f"Bearer {token}"}
