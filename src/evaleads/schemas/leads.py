"""
Lead submission request and response schemas
"""
from typing import Literal, Optional, Union
from pydantic import EmailStr, Field, StrictBool, field_validator
from evaleads.schemas.base import BaseSchema, RequestSchema

HomeType = Literal["house", "condo", "apartment"]
Frequency = Literal["one-time", "weekly", "bi-weekly", "monthly"]
Condition = Literal["light", "normal", "heavy"]


class LeadSubmission(RequestSchema):
    """Full quote-request form"""
    name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., min_length=7)
    city_or_zip: str = Field(..., min_length=2)
    home_type: HomeType
    beds: Optional[float] = None
    baths: Optional[float] = None
    frequency: Frequency
    condition: Condition
    message: Optional[str] = None
    consent: StrictBool
    company: Optional[str] = None  # Honeypot, hidden from people


class QuickLeadSubmission(RequestSchema):
    """Reduced contact form: only name, phone and location are required"""
    name: str = Field(..., min_length=2)
    email: Optional[EmailStr] = None
    phone: str = Field(..., min_length=7)
    city_or_zip: str = Field(..., min_length=2)
    home_type: Optional[HomeType] = None
    beds: Optional[float] = None
    baths: Optional[float] = None
    frequency: Optional[Frequency] = None
    condition: Optional[Condition] = None
    message: Optional[str] = None
    consent: StrictBool = False
    company: Optional[str] = None

    @field_validator(
        "email", "home_type", "frequency", "condition", "beds", "baths", mode="before"
    )
    @classmethod
    def blank_to_none(cls, v):
        # Optional inputs left empty on the form arrive as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v


AnyLead = Union[LeadSubmission, QuickLeadSubmission]


class LeadSubmissionResponse(BaseSchema):
    """Response for an accepted submission"""
    ok: bool = True


class ErrorResponse(BaseSchema):
    """Generic error body"""
    error: str
