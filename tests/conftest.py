"""
Shared pytest fixtures for the shopping demo tests.

These fixtures provide fresh components for every test and a collector that
records the lines components write instead of printing them.
"""

import pytest

from shopping.adapters import CreditCardPaymentAdapter
from shopping.factory import ProductFactory
from shopping.models import ShoppingScenario
from shopping.stock import Stock
from shopping.strategies import BankTransferPayment, CreditCardPayment


@pytest.fixture
def lines() -> list[str]:
    """Collected output lines. Pass lines.append as a component's output."""
    return []


@pytest.fixture
def stock() -> Stock:
    """Fresh Stock with no observers."""
    return Stock()


@pytest.fixture
def product_factory() -> ProductFactory:
    return ProductFactory()


@pytest.fixture
def credit_card_adapter(lines) -> CreditCardPaymentAdapter:
    """Credit card adapter writing into the lines collector."""
    return CreditCardPaymentAdapter(output=lines.append)


@pytest.fixture
def credit_card_strategy(lines) -> CreditCardPayment:
    return CreditCardPayment(output=lines.append)


@pytest.fixture
def bank_transfer_strategy(lines) -> BankTransferPayment:
    return BankTransferPayment(output=lines.append)


# =============================================================================
# Scenario Fixtures
# =============================================================================

@pytest.fixture
def canonical_scenario() -> ShoppingScenario:
    """Ali and Bora, "Stok var.", payments 100/200/150, laptop and smartphone."""
    return ShoppingScenario()


@pytest.fixture
def canonical_output() -> list[str]:
    """The exact lines the canonical scenario writes, in order."""
    return [
        "Ali: Stok durumu değişti: Stok var.",
        "Bora: Stok durumu değişti: Stok var.",
        "Laptop üretildi. ",
        "Akıllı Telefon üretildi. ",
        "Kredi kartı ile 200 lira ödendi.",
        "Havale ile 150 lira ödendi.",
    ]
