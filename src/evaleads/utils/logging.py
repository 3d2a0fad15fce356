"""
Rich logging for the lead service

Log lines use Rich markup for color. Anything that came from a request
(client ids, form values, provider replies, exception text) must go through
``untrusted()`` before it is interpolated, otherwise a value such as ``[/x]``
is parsed as a markup tag.
"""
import logging
from typing import Any, Optional
from rich.console import Console, ConsoleRenderable
from rich.errors import MarkupError
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text
from rich.traceback import install as install_traceback
from evaleads.core.config import settings

# Locals stay hidden: request handlers hold lead PII and API keys
install_traceback(show_locals=False)

_console = Console()


def untrusted(value: Any) -> str:
    """Render a request-sourced value so Rich prints it literally"""
    return escape(str(value))


class LeadLogHandler(RichHandler):
    """
    RichHandler that never lets a markup error escape from emit().

    RichHandler renders the message outside its own error handling, so a
    bad tag would raise inside logger.info() and fail the request.
    A line that does not parse is printed as plain text instead.
    """

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        try:
            return super().render_message(record, message)
        except MarkupError:
            return Text(message)


def _build_handler() -> LeadLogHandler:
    handler = LeadLogHandler(
        console=_console,
        show_time=True,
        show_path=True,
        show_level=True,
        rich_tracebacks=True,
        markup=True,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    return handler


_handler = _build_handler()


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger that writes through the shared lead-service handler.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override (defaults to settings.log_level)
    """
    logger = logging.getLogger(name)

    log_level = level.upper() if level else settings.log_level.upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    # Uvicorn configures the root logger too; avoid printing lines twice
    logger.propagate = False

    return logger


def get_shared_logger() -> logging.Logger:
    """Application-wide logger for startup, shutdown and configuration warnings"""
    return get_logger("evaleads")


app_logger = get_shared_logger()
