"""Line item amounts and document totals for invoices and estimates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEFAULT_VAT_RATE
from src.domain.models import DocumentKind, DocumentTotals, LineItem

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def compute_amount(
    quantity: Decimal,
    rate: Decimal,
    discount_percent: Decimal,
    tax_percent: Decimal,
) -> Decimal:
    """Compute a line amount after discount and tax.

    Full precision is kept; rounding is left to the presentation layer.
    Inputs are expected to be validated (non-negative, discount <= 100).

    Args:
        quantity: Number of units.
        rate: Price per unit.
        discount_percent: Discount percentage applied to quantity * rate.
        tax_percent: Tax percentage applied to the discounted amount.

    Returns:
        Decimal: The line amount.
    """
    subtotal = quantity * rate
    discounted = subtotal - subtotal * discount_percent / HUNDRED
    return discounted + discounted * tax_percent / HUNDRED


def line_amount(item: LineItem) -> Decimal:
    """Return the amount of a line item, recomputed from its inputs."""
    return compute_amount(
        item.quantity,
        item.unit_rate,
        item.discount_percent,
        item.tax_percent,
    )


def aggregate_document_totals(
    line_items: Iterable[LineItem],
    header_tax_percent: Decimal | None = None,
) -> DocumentTotals:
    """Sum line items into document totals.

    With a header tax rate (invoices) the subtotal is the sum of
    quantity * rate and the header rate is applied on top; per-line
    discount and tax are ignored. Without one (estimates) each line amount
    already carries its own discount and tax.

    Args:
        line_items: Lines of the document, possibly empty.
        header_tax_percent: Document-level tax rate, or None for per-line tax.

    Returns:
        DocumentTotals: Subtotal, tax amount, and total.
    """
    items = list(line_items)
    if header_tax_percent is None:
        subtotal = sum((line_amount(item) for item in items), ZERO)
        return DocumentTotals(subtotal=subtotal, tax_amount=ZERO, total=subtotal)

    subtotal = sum((item.gross for item in items), ZERO)
    tax_amount = subtotal * header_tax_percent / HUNDRED
    return DocumentTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
    )


def compute_document_totals(
    kind: DocumentKind,
    line_items: Iterable[LineItem],
    header_tax_percent: Decimal | None = None,
) -> DocumentTotals:
    """Compute totals using the tax mode of the document kind.

    Invoices fall back to the default VAT rate when no header rate is given.
    """
    if kind is DocumentKind.ESTIMATE:
        return aggregate_document_totals(line_items)
    rate = DEFAULT_VAT_RATE if header_tax_percent is None else header_tax_percent
    return aggregate_document_totals(line_items, rate)


def invoice_total(subtotal: Decimal, vat_rate: Decimal) -> Decimal:
    """Return the VAT-inclusive total for a stored invoice header."""
    return subtotal * (1 + vat_rate / HUNDRED)


__all__ = [
    "compute_amount",
    "line_amount",
    "aggregate_document_totals",
    "compute_document_totals",
    "invoice_total",
]
