"""Schema do webhook RBM (RCS Business Messaging).

Exemplo:
    {
      "senderPhoneNumber": "+12223334444",
      "messageId": "msg000999888777a",
      "sendTime": "2018-12-31T15:01:23.045123456Z",
      "text": "Hello to you too!"
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RbmEventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sender_phone_number: str = Field(alias="senderPhoneNumber", min_length=1)
    message_id: str = Field(alias="messageId", min_length=1)
    send_time: str = Field(alias="sendTime", min_length=1)
    text: str = ""
