"""
Exception module for the payfactory package.
"""

from payfactory.exceptions.base_exceptions import (
    BusinessException,
    ExceptionCode,
    PayFactoryException,
    SystemException,
)
from payfactory.exceptions.payment_exceptions import UnrecognizedPaymentMethod

__all__ = [
    "PayFactoryException",
    "BusinessException",
    "SystemException",
    "ExceptionCode",
    "UnrecognizedPaymentMethod",
]
