"""Application use cases package."""

from .compute_document_totals import ComputeDocumentTotalsUseCase
from .get_ledger_summary import GetLedgerSummaryUseCase
from .get_profit_and_loss import GetProfitAndLossUseCase
from .get_tax_report import GetTaxReportUseCase

__all__ = [
    "ComputeDocumentTotalsUseCase",
    "GetLedgerSummaryUseCase",
    "GetProfitAndLossUseCase",
    "GetTaxReportUseCase",
]
