"""
Core services package for payfactory.
"""

from payfactory.services.payments import PaymentMethodFactory, payment_method_factory

__all__ = [
    "PaymentMethodFactory",
    "payment_method_factory",
]
