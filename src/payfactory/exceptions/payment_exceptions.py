"""
Payment method exceptions.
"""

from typing import Any, Iterable, Optional

from payfactory.exceptions.base_exceptions import BusinessException, ExceptionCode


class UnrecognizedPaymentMethod(BusinessException):
    """Raised when no payment method is registered for a given code."""

    def __init__(
        self,
        payment_code: Any,
        available_codes: Optional[Iterable[int]] = None,
    ):
        self.payment_code = payment_code
        super().__init__(
            message=f"Unrecognized payment method: {payment_code!r}",
            code=ExceptionCode.UNRECOGNIZED_PAYMENT_METHOD,
            details={
                "payment_code": payment_code,
                "available_codes": sorted(available_codes or []),
            },
        )
