"""
Factory that maps numeric payment codes to payment method instances.
Single source of truth for the code to variant mapping.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Type

from loguru import logger

from payfactory.exceptions import UnrecognizedPaymentMethod
from payfactory.services.payments.payment_methods import (
    Cash,
    DebitCard,
    PaymentMethod,
    PaymentMethodCode,
)

PAYMENT_METHODS: Mapping[int, Type[PaymentMethod]] = MappingProxyType(
    {
        PaymentMethodCode.CASH: Cash,
        PaymentMethodCode.DEBIT_CARD: DebitCard,
    }
)


@dataclass(frozen=True)
class PaymentMethodResult:
    """Outcome of a factory call: exactly one of method or error is set."""

    method: Optional[PaymentMethod] = None
    error: Optional[UnrecognizedPaymentMethod] = None

    def __post_init__(self):
        if (self.method is None) == (self.error is None):
            raise ValueError("PaymentMethodResult needs exactly one of method or error")

    @property
    def ok(self) -> bool:
        return self.method is not None

    def unwrap(self) -> PaymentMethod:
        """Return the payment method or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.method


class PaymentMethodFactory:
    """Factory for creating payment methods from their numeric code."""

    def available_codes(self) -> List[int]:
        """List the codes this factory can build, in ascending order."""
        return sorted(int(code) for code in PAYMENT_METHODS)

    def is_supported(self, code) -> bool:
        """Check whether a payment method is registered for the code."""
        return self._lookup(code) is not None

    def create(self, code: int) -> PaymentMethod:
        """
        Create a payment method instance.

        Args:
            code: Numeric payment method code

        Returns:
            A new payment method instance

        Raises:
            UnrecognizedPaymentMethod: If no payment method exists for the code
        """
        method_class = self._lookup(code)
        if method_class is None:
            logger.warning(f"Unrecognized payment method code: {code!r}")
            logger.debug(f"Available payment method codes: {self.available_codes()}")
            raise UnrecognizedPaymentMethod(code, self.available_codes())

        logger.debug(f"Creating payment method {method_class.__name__} (code: {code})")
        return method_class()

    def try_create(self, code: int) -> PaymentMethodResult:
        """Create a payment method, returning the error as a value instead of raising."""
        try:
            return PaymentMethodResult(method=self.create(code))
        except UnrecognizedPaymentMethod as e:
            return PaymentMethodResult(error=e)

    def _lookup(self, code) -> Optional[Type[PaymentMethod]]:
        # bool is an int subclass but never a payment code
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        return PAYMENT_METHODS.get(code)


# Global factory instance
payment_method_factory = PaymentMethodFactory()


def create(code: int) -> PaymentMethod:
    """Create a payment method using the default factory."""
    return payment_method_factory.create(code)


def try_create(code: int) -> PaymentMethodResult:
    """Create a payment method using the default factory, without raising."""
    return payment_method_factory.try_create(code)
