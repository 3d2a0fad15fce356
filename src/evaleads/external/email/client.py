"""
Resend REST API client
"""
import httpx
from typing import Dict, Optional, Protocol
from evaleads.core.config import EmailConfig
from evaleads.external.email.models import OutboundEmail, SendError, SendResult
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)


class EmailSender(Protocol):
    """Anything that can deliver an OutboundEmail"""

    async def send(self, message: OutboundEmail) -> SendResult:
        ...


class ResendClient:
    """
    Client for the Resend transactional email API.

    Provider-side failures (4xx/5xx responses) come back as a SendResult with
    ``error`` set; transport failures raise ``httpx.HTTPError``.
    """

    def __init__(
        self,
        config: EmailConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = config.base_url
        self.api_key = config.api_key
        self.timeout = config.timeout
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def send(self, message: OutboundEmail) -> SendResult:
        """
        Send one email with a single attempt.

        Args:
            message: The email to deliver

        Returns:
            SendResult with the provider message id, or the provider error

        Raises:
            httpx.HTTPError: If the request could not be completed
        """
        url = f"{self.base_url.rstrip('/')}/emails"
        logger.debug(f"[cyan]Sending email via Resend:[/cyan] {untrusted(repr(message.subject))}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                url,
                json=message.to_payload(),
                headers=self._get_headers(),
            )

        if response.is_error:
            error = _parse_error(response)
            logger.error(
                f"[red]❌ Resend rejected email:[/red] "
                f"[yellow]{response.status_code}[/yellow] {untrusted(error.name)} - {untrusted(error.message)}"
            )
            return SendResult(error=error)

        try:
            body = response.json()
        except ValueError:
            body = {}
        result = SendResult(id=body.get("id") if isinstance(body, dict) else None)
        logger.info(f"[green]✅ Email accepted by Resend:[/green] [cyan]{untrusted(result.id)}[/cyan]")
        return result


def _parse_error(response: httpx.Response) -> SendError:
    """Build a SendError from a Resend error response"""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        return SendError(
            name=str(body.get("name") or "application_error"),
            message=str(body.get("message") or response.text or "Unknown error"),
            status_code=response.status_code,
        )
    return SendError(
        message=response.text or "Unknown error",
        status_code=response.status_code,
    )
