"""
Outbound email models for the Resend API
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class OutboundEmail(BaseModel):
    """A single transactional email"""
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: List[str]
    subject: str
    html: str
    text: Optional[str] = None
    reply_to: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Request body for POST /emails"""
        return self.model_dump(by_alias=True, exclude_none=True)


class SendError(BaseModel):
    """Error reported by the email provider"""
    name: str = "application_error"
    message: str
    status_code: Optional[int] = None


class SendResult(BaseModel):
    """Result of a send attempt: exactly one of id or error is set"""
    id: Optional[str] = None
    error: Optional[SendError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
