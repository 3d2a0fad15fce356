"""
Custom exception classes

Lead form errors render as ``{"error": detail}`` JSON, webhook errors as
plain text. Client-facing details stay generic; logs carry the specifics.
"""
from fastapi import HTTPException, status


class LeadSubmissionError(HTTPException):
    """Base class for errors returned by the lead submission endpoint"""
    def __init__(self, detail: str, status_code: int):
        super().__init__(status_code=status_code, detail=detail)


class ConfigurationError(LeadSubmissionError):
    """Raised when required server configuration is missing"""
    def __init__(self, detail: str = "Server email configuration missing.",
                 status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(detail=detail, status_code=status_code)


class InvalidSubmissionError(LeadSubmissionError):
    """Raised when the payload fails schema validation"""
    def __init__(self, detail: str = "Invalid form submission.",
                 status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(detail=detail, status_code=status_code)


class ConsentRequiredError(LeadSubmissionError):
    """Raised when the full form is submitted without consent"""
    def __init__(self, detail: str = "Consent is required.",
                 status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(detail=detail, status_code=status_code)


class SubmissionRejectedError(LeadSubmissionError):
    """Raised when the abuse filter flags a submission"""
    def __init__(self, detail: str = "Submission rejected.",
                 status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(detail=detail, status_code=status_code)


class RateLimitExceededError(LeadSubmissionError):
    """Raised when a client exceeds the submission rate limit"""
    def __init__(self, detail: str = "Too many requests. Please try again shortly.",
                 status_code: int = status.HTTP_429_TOO_MANY_REQUESTS):
        super().__init__(detail=detail, status_code=status_code)


class DispatchError(LeadSubmissionError):
    """Raised when the email collaborator fails to accept a message"""
    def __init__(self, detail: str = "Unable to send email right now.",
                 status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(detail=detail, status_code=status_code)


class WebhookError(HTTPException):
    """Base class for errors returned by the SMS webhook"""
    def __init__(self, detail: str, status_code: int):
        super().__init__(status_code=status_code, detail=detail)


class WebhookConfigurationError(WebhookError):
    def __init__(self, detail: str = "Email configuration missing",
                 status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(detail=detail, status_code=status_code)


class WebhookForbiddenError(WebhookError):
    """Raised when the provider signature does not match"""
    def __init__(self, detail: str = "Forbidden",
                 status_code: int = status.HTTP_403_FORBIDDEN):
        super().__init__(detail=detail, status_code=status_code)


class WebhookDispatchError(WebhookError):
    def __init__(self, detail: str = "Email send failed",
                 status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(detail=detail, status_code=status_code)
