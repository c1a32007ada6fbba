"""Infrastructure: logging setup."""

from .observability import HANDLER_NAME, JSONFormatter, setup_logging

__all__ = ["HANDLER_NAME", "JSONFormatter", "setup_logging"]
