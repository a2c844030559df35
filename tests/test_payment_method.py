"""
Test suite for payment method creation and confirmation messages.
"""

import math

import pytest

from payfactory import (
    Cash,
    DebitCard,
    PaymentMethod,
    PaymentMethodCode,
    UnrecognizedPaymentMethod,
    config,
    create,
)


class TestPaymentScenarios:
    """Test the documented payment scenarios."""

    def test_cash_payment(self):
        """Test paying with cash."""
        message = create(1).pay(10.23)

        assert "10.23" in message
        assert "payed using cash" in message

    def test_debit_card_payment(self):
        """Test paying with a debit card."""
        message = create(2).pay(22.30)

        assert "22.30" in message
        assert "payed using debit card" in message

    def test_unknown_payment_method(self):
        """Test that an unknown code is reported with the code in the message."""
        with pytest.raises(UnrecognizedPaymentMethod) as exc_info:
            create(20)

        assert "20" in str(exc_info.value)


class TestPaymentMethodVariants:
    """Test the concrete payment method variants."""

    def test_factory_returns_expected_variants(self):
        """Test the code to variant mapping."""
        assert isinstance(create(1), Cash)
        assert isinstance(create(2), DebitCard)
        assert isinstance(create(PaymentMethodCode.DEBIT_CARD), DebitCard)

    def test_variants_share_base_class(self):
        """Test every variant implements the payment method interface."""
        assert isinstance(create(1), PaymentMethod)
        assert isinstance(create(2), PaymentMethod)

    def test_base_class_is_abstract(self):
        """Test the payment method interface cannot be instantiated."""
        with pytest.raises(TypeError):
            PaymentMethod()

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (0.0, "0.00"),
            (5, "5.00"),
            (1.005, "1.00"),
            (-3.5, "-3.50"),
            (22.3, "22.30"),
            (1234567.891, "1234567.89"),
        ],
    )
    def test_cash_formats_two_decimals(self, amount, expected):
        """Test cash messages use two decimal digits without validation."""
        assert Cash().pay(amount) == f"{expected} payed using cash"

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (0.0, "0.00"),
            (5, "5.00"),
            (1.005, "1.00"),
            (-3.5, "-3.50"),
            (22.3, "22.30"),
            (1234567.891, "1234567.89"),
        ],
    )
    def test_debit_card_formats_two_decimals(self, amount, expected):
        """Test debit card messages use two decimal digits without validation."""
        assert DebitCard().pay(amount) == f"{expected} payed using debit card"

    def test_precision_does_not_depend_on_config(self):
        """Test no configuration value changes the two-decimal format."""
        assert not hasattr(config, "amount_precision")
        assert create(1).pay(10.23) == "10.23 payed using cash"

    def test_special_floats_are_formatted_as_is(self):
        """Test NaN and infinity are rendered instead of rejected."""
        assert create(1).pay(math.nan) == "nan payed using cash"
        assert create(2).pay(math.inf) == "inf payed using debit card"
        assert create(2).pay(-math.inf) == "-inf payed using debit card"

    def test_variant_labels(self):
        """Test the human-readable label of each variant."""
        assert Cash.label == "cash"
        assert DebitCard.label == "debit card"
        assert repr(create(2)) == "DebitCard(code=2)"
