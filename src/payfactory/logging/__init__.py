"""
Logging helpers for the payfactory package.
"""

from payfactory.logging.setup import LOG_FORMAT, configure_logging

configure_logging()

__all__ = ["configure_logging", "LOG_FORMAT"]
