"""
Tabular views and console summaries on top of burger-core.

Builds pandas DataFrames from the catalog and from live orders.
"""

from reporting.frames import catalog_frame, order_breakdown
from reporting.order_report import OrderTotals, print_report

__all__ = [
    "catalog_frame",
    "order_breakdown",
    "OrderTotals",
    "print_report",
]
