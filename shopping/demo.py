"""
Demonstration of the shopping system.

run_shopping_demo() wires the four components together and runs the fixed
sequence once: stock notifications, an adapter payment, two products from the
factory, then one payment with each strategy.
"""

import logging
from typing import Optional

from shopping.adapters import CreditCardPaymentAdapter
from shopping.factory import ProductFactory
from shopping.models import ShoppingScenario, Writer
from shopping.stock import Customer, Stock
from shopping.strategies import BankTransferPayment, CreditCardPayment

logger = logging.getLogger("demo")


def run_shopping_demo(
    scenario: Optional[ShoppingScenario] = None,
    output: Writer = print,
) -> None:
    """
    Run the shopping demo.

    With the default scenario this writes the lines below (both product lines
    end with a trailing space):
        Ali: Stok durumu değişti: Stok var.
        Bora: Stok durumu değişti: Stok var.
        Laptop üretildi.
        Akıllı Telefon üretildi.
        Kredi kartı ile 200 lira ödendi.
        Havale ile 150 lira ödendi.

    Products are displayed without checking for None, so an unknown label in
    the scenario raises AttributeError at display time.
    """
    scenario = scenario or ShoppingScenario()
    logger.info(f"Running shopping demo for {len(scenario.customers)} customer(s)")

    # Observer
    customers = [Customer(name, output=output) for name in scenario.customers]

    stock = Stock()
    for customer in customers:
        stock.add_observer(customer)

    stock.set_stock_status(scenario.stock_status)

    # Adapter
    credit_card_payment = CreditCardPaymentAdapter(output=output)
    credit_card_payment.pay(scenario.adapter_amount)

    # Factory
    product_factory = ProductFactory()
    products = [product_factory.create_product(label) for label in scenario.product_labels]

    for product in products:
        product.display(output)

    # Strategy
    credit_card_strategy = CreditCardPayment(output=output)
    bank_transfer_strategy = BankTransferPayment(output=output)

    credit_card_strategy.pay(scenario.credit_card_amount)
    bank_transfer_strategy.pay(scenario.bank_transfer_amount)

    logger.info("Shopping demo finished")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
        datefmt="%H:%M:%S",
    )
    run_shopping_demo()
