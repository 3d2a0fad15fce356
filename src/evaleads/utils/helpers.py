"""
General helper functions
"""
import html
from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Format datetime to ISO string"""
    return dt.isoformat() if dt else None


def escape_html(value: str) -> str:
    """Escape text for inclusion in an HTML email body"""
    return html.escape(value, quote=False)


def display_value(value: Any) -> str:
    """Render an optional form value for a notification, using '-' when empty"""
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value).strip()
    return text or "-"
