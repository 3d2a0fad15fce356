"""
Inbound SMS webhook endpoint (Twilio messaging)
"""
from fastapi import APIRouter, Depends, Request, Response, status

from evaleads.core.dependencies import get_sms_service
from evaleads.services.sms_service import SmsWebhookService
from evaleads.utils.exceptions import WebhookDispatchError, WebhookError
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)
router = APIRouter()

SIGNATURE_HEADER = "X-Twilio-Signature"


@router.post("/sms-webhook")
async def receive_sms(
    request: Request,
    service: SmsWebhookService = Depends(get_sms_service),
):
    """
    Forward an inbound text to the operator mailbox and acknowledge Twilio.

    Returns:
        TwiML auto-reply (200, text/xml) or an empty 204, per configuration
    """
    service.ensure_configured()
    form = await request.form()
    params = {key: str(value) for key, value in form.items()}

    try:
        reply = await service.handle(
            params,
            signature=request.headers.get(SIGNATURE_HEADER),
            url=str(request.url),
        )
    except WebhookError:
        raise
    except Exception as e:
        logger.exception(f"[red]Unexpected error handling SMS webhook:[/red] {untrusted(e)}")
        raise WebhookDispatchError()

    if reply is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(content=reply, media_type="text/xml")
