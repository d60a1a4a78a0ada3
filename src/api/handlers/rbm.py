"""Handler RBM (RCS Business Messaging, tipo RBM).

Inbound: evento único com sendTime RFC 3339 (nanossegundos).
Outbound: apenas texto; id extraído do resource name devolvido.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar
from urllib.parse import quote
from uuid import uuid4

from api.connectors.endpoints import ensure_absolute_url
from api.connectors.response_classifier import ProviderResponseClassifier, ResourceNameIdExtractor
from api.handlers.base import ChannelHandler
from api.normalizers.rbm import RbmEventPayload, RbmNormalizer
from api.payload_builders.rbm import build_text_payload
from app.protocols.models import CONFIG_AUTH_TOKEN, CONFIG_SEND_URL
from app.protocols.send_profile import SendContext

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpResult
    from app.protocols.models import OutgoingMessage, SendResult
    from app.services.outbound_dispatcher import OutboundDispatcher

RBM_CLASSIFIER = ProviderResponseClassifier(
    error_path=("error", "status"),
    id_extractor=ResourceNameIdExtractor(("name",)),
)


class RbmSendProfile:
    """Regras de wire do RBM para o OutboundDispatcher."""

    def __init__(self, classifier: ProviderResponseClassifier = RBM_CLASSIFIER) -> None:
        self._classifier = classifier

    def prepare(self, msg: OutgoingMessage) -> SendContext:
        token = msg.channel.require_config(CONFIG_AUTH_TOKEN)
        send_url = ensure_absolute_url(msg.channel.require_config(CONFIG_SEND_URL))
        return SendContext(token=token, send_url=send_url.rstrip("/"))

    def accepts_media(self, mime_type: str) -> bool:
        return False

    def message_url(self, context: SendContext, msg: OutgoingMessage) -> str:
        # messageId novo por requisição: cada segmento é uma mensagem distinta no provedor
        phone = quote(msg.urn.path, safe="+")
        return f"{context.send_url}/phones/{phone}/agentMessages?messageId={uuid4()}"

    def text_payload(self, msg: OutgoingMessage, segment: str) -> dict[str, Any]:
        return build_text_payload(segment)

    def media_payload(self, msg: OutgoingMessage, mime_type: str, media_id: str) -> dict[str, Any]:
        raise ValueError("RBM channels do not support attachments")

    def classify(self, result: HttpResult) -> SendResult:
        return self._classifier.classify(result)


class RbmHandler(ChannelHandler):
    channel_type: ClassVar[str] = "RBM"
    name: ClassVar[str] = "RBM"
    payload_model = RbmEventPayload

    def __init__(self, dispatcher: OutboundDispatcher) -> None:
        super().__init__(RbmNormalizer(), dispatcher)
