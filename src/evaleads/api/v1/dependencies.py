"""
API-specific dependencies for v1 endpoints
"""
from fastapi import Request

UNKNOWN_CLIENT = "unknown"


def get_client_id(request: Request) -> str:
    """
    Identify the caller for rate limiting.

    Uses the first X-Forwarded-For entry, then X-Real-IP. Callers without
    either header all share the "unknown" bucket.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or UNKNOWN_CLIENT
    return request.headers.get("x-real-ip") or UNKNOWN_CLIENT
