"""
payfactory: a Factory Method illustration that builds payment methods from
numeric codes.
"""

import payfactory.logging  # noqa: F401  Ensures logging is configured
from payfactory.config import config
from payfactory.exceptions import UnrecognizedPaymentMethod
from payfactory.services.payments import (
    PAYMENT_METHODS,
    Cash,
    DebitCard,
    PaymentMethod,
    PaymentMethodCode,
    PaymentMethodFactory,
    PaymentMethodResult,
    create,
    payment_method_factory,
    try_create,
)

__all__ = [
    "config",
    "create",
    "try_create",
    "PaymentMethod",
    "PaymentMethodCode",
    "PaymentMethodFactory",
    "PaymentMethodResult",
    "Cash",
    "DebitCard",
    "PAYMENT_METHODS",
    "payment_method_factory",
    "UnrecognizedPaymentMethod",
]
