"""
Heuristic bot checks for validated leads
"""
import re

from evaleads.schemas.leads import AnyLead

LINK_PATTERNS = (
    re.compile(r"https?://", re.IGNORECASE),
    re.compile(r"www\.", re.IGNORECASE),
)


def honeypot_filled(lead: AnyLead) -> bool:
    return bool(lead.company and lead.company.strip())


def contains_link(text: str) -> bool:
    return any(pattern.search(text) for pattern in LINK_PATTERNS)


def is_suspicious(lead: AnyLead) -> bool:
    """True when any check trips: a filled honeypot or a link in the message"""
    return honeypot_filled(lead) or contains_link(lead.message or "")
