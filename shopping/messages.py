"""
Output messages for the shopping demo.

Every line the demo writes comes from one of these templates, so tests and the
API can rely on a single source for the exact wording. The wording is Turkish
and some lines carry a trailing space that must be preserved.
"""

# Observer
STOCK_STATUS_CHANGED = "Stok durumu değişti: {status}"
CUSTOMER_NOTIFICATION = "{name}: {message}"

# Factory
LAPTOP_PRODUCED = "Laptop üretildi. "
SMARTPHONE_PRODUCED = "Akıllı Telefon üretildi. "

# Strategy
CREDIT_CARD_PAID = "Kredi kartı ile {amount} lira ödendi."
BANK_TRANSFER_PAID = "Havale ile {amount} lira ödendi."

# Adapter (only written when echo is switched on)
CREDIT_CARD_ADAPTER_PAID = "{amount} lira kredi kartıyla ödendi"


def render(template: str, **kwargs) -> str:
    """Render a message template with the provided variables."""
    return template.format(**kwargs)
