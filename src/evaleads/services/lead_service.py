"""
Lead submission pipeline: configuration, rate limit, validation, consent,
abuse checks, then notification
"""
from typing import Any

from evaleads.core.config import Settings
from evaleads.schemas.leads import AnyLead
from evaleads.services.abuse_filter import is_suspicious
from evaleads.services.notification_service import NotificationDispatcher
from evaleads.services.rate_limiter import FixedWindowRateLimiter
from evaleads.services.validation import validate_submission
from evaleads.utils.exceptions import (
    ConfigurationError,
    ConsentRequiredError,
    RateLimitExceededError,
    SubmissionRejectedError,
)
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)


class LeadService:
    """
    Service for gating and forwarding quote requests.
    No lead is stored; each accepted submission produces fresh sends.
    """

    def __init__(
        self,
        settings: Settings,
        rate_limiter: FixedWindowRateLimiter,
        dispatcher: NotificationDispatcher,
    ):
        self.settings = settings
        self.rate_limiter = rate_limiter
        self.dispatcher = dispatcher

    @property
    def variant(self) -> str:
        return self.settings.lead_form.variant

    def ensure_configured(self) -> None:
        missing = self.settings.missing_email_settings()
        if missing:
            logger.error(f"[bold red]Email configuration missing:[/bold red] {', '.join(missing)}")
            raise ConfigurationError()

    def check_rate_limit(self, client_id: str) -> None:
        if not self.rate_limiter.check(client_id):
            logger.warning(f"[yellow]Rate limit exceeded for client[/yellow] {untrusted(client_id)}")
            raise RateLimitExceededError()

    def screen(self, raw: Any) -> AnyLead:
        """
        Validate the payload and apply consent and abuse checks.

        Raises:
            InvalidSubmissionError: If the payload does not match the schema
            ConsentRequiredError: If the full form arrives without consent
            SubmissionRejectedError: If the abuse filter flags it
        """
        lead = validate_submission(raw, self.variant)

        if self.variant == "full" and not lead.consent:
            logger.info("[yellow]Rejected lead:[/yellow] consent not given")
            raise ConsentRequiredError()

        if is_suspicious(lead):
            logger.warning("[yellow]Rejected lead:[/yellow] flagged as likely bot")
            raise SubmissionRejectedError()

        return lead

    async def submit(self, client_id: str, raw: Any) -> AnyLead:
        """
        Screen a decoded JSON body and send the notifications.
        Callers run ensure_configured and check_rate_limit first.
        """
        lead = self.screen(raw)
        await self.dispatcher.send_lead(lead, confirm=self.variant == "full")
        logger.info(f"[green]✅ Lead from[/green] {untrusted(client_id)} [green]forwarded[/green]")
        return lead
