"""
Twilio webhook signature verification
"""
from typing import Mapping, Optional, Protocol
from twilio.request_validator import RequestValidator


class SignatureVerifier(Protocol):
    """Checks that a webhook request was signed by the provider"""

    def verify(self, signature: Optional[str], url: str, params: Mapping[str, str]) -> bool:
        ...


class TwilioSignatureVerifier:
    """Validates X-Twilio-Signature against the account auth token"""

    def __init__(self, auth_token: str):
        self._validator = RequestValidator(auth_token)

    def verify(self, signature: Optional[str], url: str, params: Mapping[str, str]) -> bool:
        if not signature:
            return False
        return self._validator.validate(url, dict(params), signature)
