"""
Pydantic schemas for request/response validation
"""
from evaleads.schemas.base import BaseSchema, RequestSchema
from evaleads.schemas.leads import (
    AnyLead,
    ErrorResponse,
    LeadSubmission,
    LeadSubmissionResponse,
    QuickLeadSubmission,
)
from evaleads.schemas.sms import InboundSms, METADATA_FIELDS

__all__ = [
    # Base schemas
    "BaseSchema",
    "RequestSchema",
    # Lead schemas
    "AnyLead",
    "ErrorResponse",
    "LeadSubmission",
    "LeadSubmissionResponse",
    "QuickLeadSubmission",
    # SMS schemas
    "InboundSms",
    "METADATA_FIELDS",
]
