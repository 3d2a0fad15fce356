"""
Lead payload validation
"""
from typing import Any

from pydantic import ValidationError

from evaleads.schemas.leads import AnyLead, LeadSubmission, QuickLeadSubmission
from evaleads.utils.exceptions import InvalidSubmissionError
from evaleads.utils.logging import get_logger, untrusted

logger = get_logger(__name__)

SCHEMAS = {
    "full": LeadSubmission,
    "quick": QuickLeadSubmission,
}


def validate_submission(raw: Any, variant: str = "full") -> AnyLead:
    """
    Validate a decoded JSON payload against the form variant's schema.

    Any violation rejects the whole submission with the same generic error;
    only the offending field names are logged.

    Raises:
        InvalidSubmissionError: If the payload does not match the schema
    """
    schema = SCHEMAS[variant]
    if not isinstance(raw, dict):
        logger.info("[yellow]Rejected lead payload:[/yellow] body is not a JSON object")
        raise InvalidSubmissionError()
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        logger.info(f"[yellow]Rejected lead payload:[/yellow] invalid fields {untrusted(fields)}")
        raise InvalidSubmissionError() from e
