"""
Twilio integration
"""
from evaleads.external.twilio.validator import SignatureVerifier, TwilioSignatureVerifier

__all__ = ["SignatureVerifier", "TwilioSignatureVerifier"]
