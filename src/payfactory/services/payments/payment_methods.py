"""
Payment method variants.

Each variant renders a confirmation sentence for a monetary amount. Instances
hold no state; the factory builds a fresh one per call.
"""

from abc import ABC, abstractmethod
from enum import IntEnum


class PaymentMethodCode(IntEnum):
    """Numeric codes accepted by the payment method factory."""

    CASH = 1
    DEBIT_CARD = 2


class PaymentMethod(ABC):
    """Abstract base class for payment methods."""

    code: PaymentMethodCode
    label: str

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Render a confirmation message for the paid amount."""

    def _format_amount(self, amount: float) -> str:
        return f"{amount:.2f}"

    def __repr__(self):
        return f"{type(self).__name__}(code={int(self.code)})"


class Cash(PaymentMethod):
    code = PaymentMethodCode.CASH
    label = "cash"

    def pay(self, amount: float) -> str:
        return f"{self._format_amount(amount)} payed using cash"


class DebitCard(PaymentMethod):
    code = PaymentMethodCode.DEBIT_CARD
    label = "debit card"

    def pay(self, amount: float) -> str:
        return f"{self._format_amount(amount)} payed using debit card"
