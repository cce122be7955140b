"""
Product factory (Factory pattern).

Maps a type label to a newly built product. Matching is case-insensitive.
An unknown label yields None rather than an exception, so callers must check
the result before using it. require_product() is available for callers that
would rather get an error.
"""

import logging
from typing import Optional

from shopping.models import Laptop, Product, Smartphone

logger = logging.getLogger("product_factory")


class UnknownProductError(ValueError):
    """Raised by require_product() when a label matches no product."""

    def __init__(self, type_label: str):
        self.type_label = type_label
        super().__init__(f"Unknown product type: {type_label!r}")


class ProductFactory:
    """
    Builds products from a type label.

    Example:
        factory = ProductFactory()
        factory.create_product("LAPTOP")   # Laptop(kind=<ProductKind.LAPTOP: 'laptop'>)
        factory.create_product("Tablet")   # None
    """

    # Label -> product class, in the order they are offered
    _PRODUCTS: dict[str, type[Product]] = {
        "Laptop": Laptop,
        "Smartphone": Smartphone,
    }

    def create_product(self, type_label: str) -> Optional[Product]:
        """
        Build the product matching a type label.

        Args:
            type_label: Product type, matched case-insensitively

        Returns:
            A new product, or None if the label is not recognized
        """
        wanted = type_label.casefold()
        for label, product_class in self._PRODUCTS.items():
            if label.casefold() == wanted:
                logger.debug(f"Creating {label} for label {type_label!r}")
                return product_class()

        logger.warning(f"No product for label {type_label!r}")
        return None

    def known_labels(self) -> list[str]:
        """Labels the factory recognizes."""
        return list(self._PRODUCTS)


def require_product(factory: ProductFactory, type_label: str) -> Product:
    """
    Build a product or raise.

    Raises:
        UnknownProductError: If the label is not recognized
    """
    product = factory.create_product(type_label)
    if product is None:
        raise UnknownProductError(type_label)
    return product
