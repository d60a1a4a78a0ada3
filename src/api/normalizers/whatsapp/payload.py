"""Schema do webhook WhatsApp (statuses + messages em lote).

Exemplo:
    {
      "statuses": [{"id": "9712A34B4A8B6AD50F", "recipient_id": "16315555555",
                    "status": "sent", "timestamp": "1518694700"}],
      "messages": [{"from": "16315555555", "id": "3AF99CB6BE490DCAF641",
                    "timestamp": "1518694235", "type": "text",
                    "text": {"body": "Hello this is an answer"}}]
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WhatsAppText(_WireModel):
    body: str = ""


class WhatsAppMedia(_WireModel):
    id: str = ""
    mime_type: str = ""
    caption: str = ""
    link: str = ""
    file: str = ""
    sha256: str = ""


class WhatsAppLocation(_WireModel):
    latitude: float = 0.0
    longitude: float = 0.0
    name: str = ""
    address: str = ""
    url: str = ""


class WhatsAppMessage(_WireModel):
    from_: str = Field(alias="from", min_length=1)
    id: str = Field(min_length=1)
    timestamp: str = Field(min_length=1)
    type: str = Field(min_length=1)
    text: WhatsAppText = Field(default_factory=WhatsAppText)
    audio: WhatsAppMedia = Field(default_factory=WhatsAppMedia)
    document: WhatsAppMedia = Field(default_factory=WhatsAppMedia)
    image: WhatsAppMedia = Field(default_factory=WhatsAppMedia)
    video: WhatsAppMedia = Field(default_factory=WhatsAppMedia)
    voice: WhatsAppMedia = Field(default_factory=WhatsAppMedia)
    location: WhatsAppLocation = Field(default_factory=WhatsAppLocation)


class WhatsAppStatus(_WireModel):
    id: str = Field(min_length=1)
    recipient_id: str = Field(min_length=1)
    timestamp: str = Field(min_length=1)
    status: str = Field(min_length=1)


class WhatsAppEventPayload(_WireModel):
    messages: list[WhatsAppMessage] = Field(default_factory=list)
    statuses: list[WhatsAppStatus] = Field(default_factory=list)

    @field_validator("messages", "statuses", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
