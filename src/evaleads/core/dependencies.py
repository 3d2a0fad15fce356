"""
Shared dependencies for FastAPI routes

Each collaborator is provided through a dependency so tests can swap it via
``app.dependency_overrides``.
"""
from typing import Optional
from fastapi import Depends, Request

from evaleads.core.config import Settings
from evaleads.external.email import EmailSender, ResendClient
from evaleads.external.twilio import SignatureVerifier, TwilioSignatureVerifier
from evaleads.services.lead_service import LeadService
from evaleads.services.notification_service import NotificationDispatcher
from evaleads.services.rate_limiter import FixedWindowRateLimiter
from evaleads.services.sms_service import SmsWebhookService


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def get_rate_limiter(request: Request) -> FixedWindowRateLimiter:
    """The limiter owned by the running application"""
    return request.app.state.lead_rate_limiter


def get_email_sender(app_settings: Settings = Depends(get_settings)) -> EmailSender:
    return ResendClient(app_settings.email)


def get_signature_verifier(
    app_settings: Settings = Depends(get_settings),
) -> Optional[SignatureVerifier]:
    if not app_settings.sms.auth_token:
        return None
    return TwilioSignatureVerifier(app_settings.sms.auth_token)


def get_dispatcher(
    app_settings: Settings = Depends(get_settings),
    sender: EmailSender = Depends(get_email_sender),
) -> NotificationDispatcher:
    return NotificationDispatcher(sender, app_settings.email, app_settings.business_name)


def get_lead_service(
    app_settings: Settings = Depends(get_settings),
    rate_limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> LeadService:
    return LeadService(app_settings, rate_limiter, dispatcher)


def get_sms_service(
    app_settings: Settings = Depends(get_settings),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
    verifier: Optional[SignatureVerifier] = Depends(get_signature_verifier),
) -> SmsWebhookService:
    return SmsWebhookService(app_settings, dispatcher, verifier)
