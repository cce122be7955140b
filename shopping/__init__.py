"""
Shopping system demo.

Four classic design patterns, each as a small independent component:
- Observer: Stock notifies Customers when its status changes
- Adapter: CreditCardPaymentAdapter puts a card gateway behind PaymentAdapter
- Factory: ProductFactory builds Laptops and Smartphones from a label
- Strategy: CreditCardPayment and BankTransferPayment share one pay() call

run_shopping_demo() wires them together for one canonical run.
"""

from shopping.models import (
    ProductKind,
    Product,
    Laptop,
    Smartphone,
    ShoppingScenario,
)
from shopping.stock import Observer, Customer, Stock
from shopping.adapters import PaymentAdapter, CreditCardGateway, CreditCardPaymentAdapter
from shopping.factory import ProductFactory, UnknownProductError, require_product
from shopping.strategies import PaymentStrategy, CreditCardPayment, BankTransferPayment
from shopping.demo import run_shopping_demo

__all__ = [
    "ProductKind",
    "Product",
    "Laptop",
    "Smartphone",
    "ShoppingScenario",
    "Observer",
    "Customer",
    "Stock",
    "PaymentAdapter",
    "CreditCardGateway",
    "CreditCardPaymentAdapter",
    "ProductFactory",
    "UnknownProductError",
    "require_product",
    "PaymentStrategy",
    "CreditCardPayment",
    "BankTransferPayment",
    "run_shopping_demo",
]
