"""
Utility functions and helpers
"""
from evaleads.utils.logging import get_logger, app_logger, get_shared_logger, untrusted

__all__ = ["get_logger", "app_logger", "get_shared_logger", "untrusted"]
