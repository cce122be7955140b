"""
Domain models for the shopping demo.

Design decisions:
- Using Pydantic for validation and serialization
- Products are a closed set of variants tagged by ProductKind
- ShoppingScenario holds the inputs of one demo run; its defaults are the
  canonical scenario
"""

from enum import Enum
from typing import Callable, Literal
from pydantic import BaseModel, Field, ConfigDict

from shopping import messages

# Receives one output line per observable effect
Writer = Callable[[str], None]


class ProductKind(str, Enum):
    """Product variants the factory knows how to build."""
    LAPTOP = "laptop"
    SMARTPHONE = "smartphone"


# =============================================================================
# Products
# =============================================================================

class Product(BaseModel):
    """
    A manufactured product.

    Products carry no attributes beyond their kind. Each variant has a fixed
    display line that is written when the product is displayed.
    """
    kind: ProductKind = Field(..., description="Which product variant this is")

    model_config = ConfigDict(frozen=True)

    def display_text(self) -> str:
        """The line written by display()."""
        raise NotImplementedError("Product subclasses must implement 'display_text'")

    def display(self, output: Writer = print) -> None:
        """Write this product's display line."""
        output(self.display_text())


class Laptop(Product):
    """Laptop variant."""
    kind: Literal[ProductKind.LAPTOP] = ProductKind.LAPTOP

    def display_text(self) -> str:
        return messages.LAPTOP_PRODUCED


class Smartphone(Product):
    """Smartphone variant."""
    kind: Literal[ProductKind.SMARTPHONE] = ProductKind.SMARTPHONE

    def display_text(self) -> str:
        return messages.SMARTPHONE_PRODUCED


# =============================================================================
# Demo scenario
# =============================================================================

class ShoppingScenario(BaseModel):
    """
    Inputs for one run of the shopping demo.

    The defaults reproduce the canonical run: two customers are told the item
    is in stock, a silent adapter payment is made, a laptop and a smartphone
    are produced, then one credit card and one bank transfer payment follow.
    """
    customers: list[str] = Field(
        default_factory=lambda: ["Ali", "Bora"],
        description="Customer names, registered with the stock in this order"
    )
    stock_status: str = Field(
        default="Stok var.",
        description="Status broadcast to every customer"
    )
    adapter_amount: int = Field(
        default=100,
        description="Amount paid through the credit card adapter (silent)"
    )
    product_labels: list[str] = Field(
        default_factory=lambda: ["Laptop", "Smartphone"],
        description="Type labels handed to the product factory, in order"
    )
    credit_card_amount: int = Field(
        default=200,
        description="Amount paid with the credit card strategy"
    )
    bank_transfer_amount: int = Field(
        default=150,
        description="Amount paid with the bank transfer strategy"
    )
