"""
Transactional email integration
"""
from evaleads.external.email.client import EmailSender, ResendClient
from evaleads.external.email.models import OutboundEmail, SendError, SendResult

__all__ = ["EmailSender", "ResendClient", "OutboundEmail", "SendError", "SendResult"]
