"""
Payment adapters (Adapter pattern).

PaymentAdapter is the call shape the shop uses for payments. The credit card
gateway exposes a different call (charge), and CreditCardPaymentAdapter maps
one onto the other.

The credit card payment is silent: it writes no output line. The confirmation
line can be switched on with echo=True.
"""

import logging
from typing import Optional

from shopping import messages
from shopping.models import Writer

logger = logging.getLogger("payment_adapter")


class PaymentAdapter:
    """Interface the shop uses to take a payment."""

    def pay(self, amount: int) -> None:
        raise NotImplementedError("PaymentAdapter subclasses must implement 'pay'")


class CreditCardGateway:
    """
    Stand-in for an external credit card API.

    Accepts every charge and produces no output.
    """

    def charge(self, amount: int) -> None:
        logger.debug(f"[CARD GATEWAY] Charged {amount} lira")


class CreditCardPaymentAdapter(PaymentAdapter):
    """Adapts CreditCardGateway.charge to the PaymentAdapter interface."""

    def __init__(
        self,
        gateway: Optional[CreditCardGateway] = None,
        echo: bool = False,
        output: Writer = print,
    ):
        """
        Initialize the adapter.

        Args:
            gateway: Gateway to charge (a new one by default)
            echo: Write a confirmation line after each payment
            output: Where the confirmation line is written
        """
        self.gateway = gateway or CreditCardGateway()
        self.echo = echo
        self.output = output

    def pay(self, amount: int) -> None:
        self.gateway.charge(amount)
        logger.info(f"Credit card payment of {amount} lira taken through adapter")

        if self.echo:
            self.output(messages.render(messages.CREDIT_CARD_ADAPTER_PAID, amount=amount))
