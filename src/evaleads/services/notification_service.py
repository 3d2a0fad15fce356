"""
Notification composition and dispatch through the email collaborator
"""
from datetime import datetime
from typing import List

import httpx

from evaleads.core.config import EmailConfig
from evaleads.external.email import EmailSender, OutboundEmail
from evaleads.schemas.leads import AnyLead
from evaleads.schemas.sms import InboundSms
from evaleads.utils.exceptions import DispatchError
from evaleads.utils.helpers import display_value, escape_html, format_datetime
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)


def lead_summary(lead: AnyLead) -> str:
    """Plain-text summary of a lead, one field per line in a fixed order"""
    lines = [
        f"Name: {display_value(lead.name)}",
        f"Email: {display_value(lead.email)}",
        f"Phone: {display_value(lead.phone)}",
        f"City/ZIP: {display_value(lead.city_or_zip)}",
        f"Home type: {display_value(lead.home_type)}",
        f"Beds: {display_value(lead.beds)}",
        f"Baths: {display_value(lead.baths)}",
        f"Frequency: {display_value(lead.frequency)}",
        f"Condition: {display_value(lead.condition)}",
        f"Consent to text: {'Yes' if lead.consent else 'No'}",
        f"Message: {display_value(lead.message)}",
    ]
    return "\n".join(lines)


def summary_to_html(text: str) -> str:
    return "".join(
        f'<p style="margin:0 0 8px">{escape_html(line)}</p>'
        for line in text.split("\n")
    )


def confirmation_html(name: str, business_name: str) -> str:
    name = escape_html(name)
    business_name = escape_html(business_name)
    return (
        '<div style="font-family:Arial,sans-serif;line-height:1.5;color:#0c1c1a;">'
        f"<p>Hi {name},</p>"
        "<p>We got your request for a quote. We will ask a few quick questions "
        "and get back to you shortly.</p>"
        "<p>If you have any updates, just reply to this email.</p>"
        f"<p>Thank you,<br/>{business_name}</p>"
        "</div>"
    )


def sms_notice_html(sms: InboundSms, received_at: datetime) -> str:
    """HTML notice for an inbound text; every provider value is escaped"""
    message = escape_html(sms.body or "-").replace("\n", "<br/>")
    parts: List[str] = [
        f"<p><strong>From:</strong> {escape_html(sms.from_number or '-')}</p>",
        f"<p><strong>To:</strong> {escape_html(sms.to_number or '-')}</p>",
        f"<p><strong>Received:</strong> {format_datetime(received_at)}</p>",
        f"<p><strong>Message:</strong><br/>{message}</p>",
    ]
    if sms.metadata:
        extra = "<br/>".join(
            escape_html(f"{key}: {value}") for key, value in sms.metadata.items()
        )
        parts.append(f"<p><strong>Twilio:</strong><br/>{extra}</p>")
    return "".join(parts)


class NotificationDispatcher:
    """
    Sends lead and SMS notices through an EmailSender.

    Every message gets exactly one attempt. A provider error and a transport
    failure both surface as DispatchError, whichever message failed.
    """

    def __init__(self, sender: EmailSender, config: EmailConfig, business_name: str = ""):
        self.sender = sender
        self.from_email = config.from_email
        self.leads_to = config.leads_to
        self.business_name = business_name

    async def send_lead(self, lead: AnyLead, confirm: bool = True) -> None:
        """
        Send the internal lead notice and, when ``confirm`` is set and the
        lead left an address, a confirmation to the submitter.

        Raises:
            DispatchError: If either message could not be sent
        """
        text = lead_summary(lead)
        await self._deliver(
            OutboundEmail(
                sender=self.from_email,
                to=[self.leads_to],
                subject=f"New cleaning lead: {lead.name}",
                html=summary_to_html(text),
                text=text,
                reply_to=lead.email or None,
            ),
            label="internal lead notice",
        )

        if not confirm or not lead.email:
            return

        await self._deliver(
            OutboundEmail(
                sender=self.from_email,
                to=[lead.email],
                subject="We got your quote request",
                html=confirmation_html(lead.name, self.business_name),
                reply_to=self.from_email,
            ),
            label="lead confirmation",
        )

    async def send_sms_notice(self, sms: InboundSms, received_at: datetime) -> None:
        await self._deliver(
            OutboundEmail(
                sender=self.from_email,
                to=[self.leads_to],
                subject=f"New SMS lead from {sms.from_number or 'Unknown'}",
                html=sms_notice_html(sms, received_at),
            ),
            label="SMS notice",
        )

    async def _deliver(self, message: OutboundEmail, label: str) -> None:
        try:
            result = await self.sender.send(message)
        except httpx.HTTPError as e:
            logger.error(f"[red]❌ Transport error sending {label}:[/red] {untrusted(repr(e))}")
            raise DispatchError() from e

        if result.error is not None:
            logger.error(
                f"[red]❌ Email provider rejected {label}:[/red] "
                f"{untrusted(result.error.name)} - {untrusted(result.error.message)}"
            )
            raise DispatchError()

        logger.info(f"[green]✅ Sent {label}[/green] [dim]{untrusted(result.id)}[/dim]")
