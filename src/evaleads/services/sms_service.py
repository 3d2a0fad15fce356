"""
Inbound SMS webhook: signature check, notification, acknowledgment
"""
from datetime import datetime
from typing import Callable, Mapping, Optional

from twilio.twiml.messaging_response import MessagingResponse

from evaleads.core.config import Settings
from evaleads.external.twilio import SignatureVerifier
from evaleads.schemas.sms import InboundSms
from evaleads.services.notification_service import NotificationDispatcher
from evaleads.utils.exceptions import (
    DispatchError,
    WebhookConfigurationError,
    WebhookDispatchError,
    WebhookForbiddenError,
)
from evaleads.utils.helpers import utc_now
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)


def twiml_reply(text: str) -> str:
    """TwiML document that answers the texter with ``text``"""
    response = MessagingResponse()
    response.message(text)
    return str(response)


class SmsWebhookService:
    """Handles one Twilio messaging webhook call"""

    def __init__(
        self,
        settings: Settings,
        dispatcher: NotificationDispatcher,
        verifier: Optional[SignatureVerifier] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.settings = settings
        self.dispatcher = dispatcher
        self.verifier = verifier
        self._clock = clock

    def ensure_configured(self) -> None:
        missing = self.settings.missing_sms_settings()
        if missing or (self.settings.sms.verify_signature and self.verifier is None):
            logger.error(
                f"[bold red]SMS webhook configuration missing:[/bold red] "
                f"{', '.join(missing) or 'signature verifier'}"
            )
            raise WebhookConfigurationError()

    def verification_url(self, request_url: str) -> str:
        return self.settings.sms.public_url or request_url

    def authenticate(self, signature: Optional[str], url: str, params: Mapping[str, str]) -> None:
        """
        Reject the call unless it carries a valid provider signature.
        No-op when verification is switched off in configuration.
        """
        if not self.settings.sms.verify_signature:
            return
        if not self.verifier.verify(signature, self.verification_url(url), params):
            logger.warning(
                f"[yellow]Rejected SMS webhook:[/yellow] "
                f"{'invalid' if signature else 'missing'} signature"
            )
            raise WebhookForbiddenError()

    async def handle(
        self,
        params: Mapping[str, str],
        signature: Optional[str],
        url: str,
    ) -> Optional[str]:
        """
        Process a webhook call. Callers run ensure_configured first, before
        the request body is read.

        Returns:
            The TwiML reply body, or None when the acknowledgment is empty

        Raises:
            WebhookForbiddenError: If the signature check fails
            WebhookDispatchError: If the notice could not be emailed
        """
        self.authenticate(signature, url, params)

        sms = InboundSms.from_params(params)
        try:
            await self.dispatcher.send_sms_notice(sms, received_at=self._clock())
        except DispatchError as e:
            raise WebhookDispatchError() from e

        logger.info(
            f"[green]✅ SMS notice sent[/green] "
            f"[dim]{untrusted(sms.metadata.get('MessageSid', ''))}[/dim]"
        )

        if self.settings.sms.reply == "empty":
            return None
        return twiml_reply(self.settings.sms.auto_reply_text)
