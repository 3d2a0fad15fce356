"""
Inbound SMS webhook schemas
"""
from typing import Dict, Mapping
from pydantic import Field
from evaleads.schemas.base import BaseSchema

# Optional provider fields copied into the notification, in display order
METADATA_FIELDS = (
    "MessageSid",
    "SmsSid",
    "AccountSid",
    "NumMedia",
    "FromCity",
    "FromState",
    "FromZip",
    "FromCountry",
)


class InboundSms(BaseSchema):
    """A text message forwarded by Twilio"""
    from_number: str = Field("", alias="From")
    to_number: str = Field("", alias="To")
    body: str = Field("", alias="Body")
    metadata: Dict[str, str] = {}

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "InboundSms":
        """Build from webhook form parameters, keeping only allow-listed metadata"""
        metadata = {
            key: str(params[key])
            for key in METADATA_FIELDS
            if params.get(key)
        }
        return cls(
            From=str(params.get("From") or ""),
            To=str(params.get("To") or ""),
            Body=str(params.get("Body") or ""),
            metadata=metadata,
        )
