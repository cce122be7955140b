"""
Payment strategies (Strategy pattern).

Two interchangeable implementations of pay(). The caller constructs the one it
wants; there is no lookup by name and no state kept between calls.
"""

import logging

from shopping import messages
from shopping.models import Writer

logger = logging.getLogger("payment_strategy")


class PaymentStrategy:
    """Interface for a way of paying."""

    def __init__(self, output: Writer = print):
        self.output = output

    def pay(self, amount: int) -> None:
        raise NotImplementedError("PaymentStrategy subclasses must implement 'pay'")


class CreditCardPayment(PaymentStrategy):
    """Pay by credit card."""

    def pay(self, amount: int) -> None:
        logger.debug(f"Paying {amount} lira by credit card")
        self.output(messages.render(messages.CREDIT_CARD_PAID, amount=amount))


class BankTransferPayment(PaymentStrategy):
    """Pay by bank transfer (havale)."""

    def pay(self, amount: int) -> None:
        logger.debug(f"Paying {amount} lira by bank transfer")
        self.output(messages.render(messages.BANK_TRANSFER_PAID, amount=amount))
