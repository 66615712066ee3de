"""Domain models for invoice and estimate documents."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class DocumentKind(str, Enum):
    """Kind of sales document, which decides how tax is applied."""

    INVOICE = "invoice"
    ESTIMATE = "estimate"


@dataclass(frozen=True)
class LineItem:
    """One product row within an invoice or estimate.

    Attributes:
        product_ref: Identifier of the product the row bills.
        quantity: Number of units, zero or more.
        unit_rate: Price per unit before discount and tax.
        discount_percent: Discount applied to the row, between 0 and 100.
        tax_percent: Tax applied to the discounted row amount.
    """

    product_ref: str
    quantity: Decimal
    unit_rate: Decimal
    discount_percent: Decimal = Decimal("0")
    tax_percent: Decimal = Decimal("0")

    @property
    def gross(self) -> Decimal:
        """Return quantity times unit rate, before discount and tax."""
        return self.quantity * self.unit_rate


@dataclass(frozen=True)
class DocumentTotals:
    """Totals for a sales document."""

    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal


__all__ = ["DocumentKind", "LineItem", "DocumentTotals"]
