"""
FastAPI application for the shopping demo.

This application provides:
1. A demo endpoint that runs the full shopping scenario and returns its output
2. Endpoints that exercise each component on its own

Every request builds fresh components and collects the lines they write
instead of printing them.

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from shopping.adapters import CreditCardPaymentAdapter
from shopping.demo import run_shopping_demo
from shopping.factory import ProductFactory, UnknownProductError, require_product
from shopping.models import ProductKind, ShoppingScenario
from shopping.stock import Customer, Stock
from shopping.strategies import BankTransferPayment, CreditCardPayment

logger = logging.getLogger("shopping_api")


# Request/response models
class DemoResult(BaseModel):
    """Result of running the shopping demo."""
    scenario: ShoppingScenario
    lines: list[str]


class StockStatusRequest(BaseModel):
    """Customers to register and the status to broadcast to them."""
    customers: list[str] = Field(default_factory=list)
    status: str


class StockStatusResult(BaseModel):
    status: str
    notified: int
    lines: list[str]


class ProductResult(BaseModel):
    kind: ProductKind
    display: str


class PaymentRequest(BaseModel):
    amount: int


class PaymentResult(BaseModel):
    method: str
    amount: int
    lines: list[str]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logging.info("Starting Shopping Patterns Demo API")
    yield
    logging.info("Shutting down")


app = FastAPI(
    title="Shopping Patterns Demo",
    description="""
    A toy shopping system built from four design patterns.

    - **Observer**: stock status notifications to customers
    - **Adapter**: credit card payments behind a common payment interface
    - **Factory**: products built from a type label
    - **Strategy**: interchangeable credit card and bank transfer payments
    """,
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "shopping-patterns-demo"}


# =============================================================================
# Demo
# =============================================================================

@app.post("/demo/shopping", response_model=DemoResult, tags=["Demo"])
def demo_shopping(scenario: Optional[ShoppingScenario] = None):
    """
    Run the full shopping demo and return the lines it wrote.

    Without a body the canonical scenario is used.
    """
    scenario = scenario or ShoppingScenario()

    factory = ProductFactory()
    unknown = [label for label in scenario.product_labels if factory.create_product(label) is None]
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown product type(s): {', '.join(unknown)}",
        )

    lines: list[str] = []
    run_shopping_demo(scenario, output=lines.append)
    logger.info(f"Demo produced {len(lines)} line(s)")

    return DemoResult(scenario=scenario, lines=lines)


# =============================================================================
# Components
# =============================================================================

@app.post("/stock/status", response_model=StockStatusResult, tags=["Observer"])
def set_stock_status(request: StockStatusRequest):
    """Register the customers with a fresh stock and broadcast a status."""
    lines: list[str] = []
    stock = Stock()
    for name in request.customers:
        stock.add_observer(Customer(name, output=lines.append))

    notified = stock.set_stock_status(request.status)
    return StockStatusResult(status=request.status, notified=notified, lines=lines)


@app.get("/products/{type_label}", response_model=ProductResult, tags=["Factory"])
def get_product(type_label: str):
    """Build a product from its type label."""
    try:
        product = require_product(ProductFactory(), type_label)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ProductResult(kind=product.kind, display=product.display_text())


@app.post("/payments/adapter", response_model=PaymentResult, tags=["Adapter"])
def pay_with_adapter(request: PaymentRequest):
    """Pay through the credit card adapter. Writes no lines."""
    lines: list[str] = []
    CreditCardPaymentAdapter(output=lines.append).pay(request.amount)
    return PaymentResult(method="credit-card-adapter", amount=request.amount, lines=lines)


@app.post("/payments/credit-card", response_model=PaymentResult, tags=["Strategy"])
def pay_by_credit_card(request: PaymentRequest):
    """Pay with the credit card strategy."""
    lines: list[str] = []
    CreditCardPayment(output=lines.append).pay(request.amount)
    return PaymentResult(method="credit-card", amount=request.amount, lines=lines)


@app.post("/payments/bank-transfer", response_model=PaymentResult, tags=["Strategy"])
def pay_by_bank_transfer(request: PaymentRequest):
    """Pay with the bank transfer strategy."""
    lines: list[str] = []
    BankTransferPayment(output=lines.append).pay(request.amount)
    return PaymentResult(method="bank-transfer", amount=request.amount, lines=lines)
