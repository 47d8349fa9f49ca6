"""Top level package for the invoice store.

The public API is :class:`faturas.store.InvoiceStore`; the remaining modules
provide the configuration, logging and the interactive menu that drive it.
"""

from .invoices import KNOWN_STATUSES, STATUS_PAID, STATUS_PENDING, Invoice
from .store import InvoiceStore

__all__ = [
    "Invoice",
    "InvoiceStore",
    "KNOWN_STATUSES",
    "STATUS_PAID",
    "STATUS_PENDING",
    "cli",
    "commands",
    "config",
    "errors",
    "invoices",
    "logging",
    "menu",
    "store",
]
