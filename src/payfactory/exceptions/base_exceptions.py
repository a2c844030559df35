"""
Base exception classes for the payfactory package.
"""

from enum import Enum
from typing import Optional


class ExceptionCode(Enum):
    """Enumeration of all possible exception codes."""

    # Business rule errors (BIZ_XXXX)
    UNRECOGNIZED_PAYMENT_METHOD = "BIZ_2001"

    # System errors (SYS_XXXX)
    CONFIGURATION_ERROR = "SYS_4001"


class PayFactoryException(Exception):
    """Base exception carrying a stable code and diagnostic details."""

    def __init__(self, message: str, code: ExceptionCode, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code.value
        self.details = details or {}

    def __str__(self):
        return f"[{self.code}] {self.message}"


class BusinessException(PayFactoryException):
    """Raised for rejected business input, such as an unknown payment code."""


class SystemException(PayFactoryException):
    """Raised when the package itself is misconfigured."""
