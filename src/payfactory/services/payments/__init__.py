"""
Payment services module for building payment methods from numeric codes.
"""

from payfactory.services.payments.payment_factory import (
    PAYMENT_METHODS,
    PaymentMethodFactory,
    PaymentMethodResult,
    create,
    payment_method_factory,
    try_create,
)
from payfactory.services.payments.payment_methods import (
    Cash,
    DebitCard,
    PaymentMethod,
    PaymentMethodCode,
)

__all__ = [
    "PaymentMethodFactory",
    "PaymentMethodResult",
    "PaymentMethod",
    "PaymentMethodCode",
    "Cash",
    "DebitCard",
    "PAYMENT_METHODS",
    "payment_method_factory",
    "create",
    "try_create",
]
