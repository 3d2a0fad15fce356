"""
Lead submission endpoint
"""
from fastapi import APIRouter, Depends, Request

from evaleads.api.v1.dependencies import get_client_id
from evaleads.core.dependencies import get_lead_service
from evaleads.schemas.leads import ErrorResponse, LeadSubmissionResponse
from evaleads.services.lead_service import LeadService
from evaleads.utils.exceptions import DispatchError, InvalidSubmissionError, LeadSubmissionError
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "/lead-submission",
    response_model=LeadSubmissionResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_lead(
    request: Request,
    client_id: str = Depends(get_client_id),
    service: LeadService = Depends(get_lead_service),
):
    """
    Accept a quote request from the website form.

    Order of checks: server configuration, rate limit, schema, consent,
    bot heuristics. Accepted leads are emailed to the operator (and, for
    the full form, confirmed to the submitter).

    Returns:
        {"ok": true} once every email was accepted by the provider
    """
    service.ensure_configured()
    service.check_rate_limit(client_id)

    try:
        payload = await request.json()
    except ValueError:
        logger.info("[yellow]Rejected lead payload:[/yellow] body is not valid JSON")
        raise InvalidSubmissionError()

    try:
        await service.submit(client_id, payload)
    except LeadSubmissionError:
        raise
    except Exception as e:
        logger.exception(f"[red]Unexpected error forwarding lead:[/red] {untrusted(e)}")
        raise DispatchError()

    return {"ok": True}
