"""Exceptions raised by the invoice store and its menu.

A missing invoice is never an exception: lookups return ``None`` and
mutations return ``False``.
"""

from __future__ import annotations


class FaturasError(Exception):
    """Base class for the package errors."""


class DuplicateInvoiceError(FaturasError, ValueError):
    """Inserção recusada porque o número da fatura já existe."""

    def __init__(self, number: int) -> None:
        super().__init__(f"Fatura {number} ja existe.")
        self.number = number


class UserInputError(FaturasError):
    """Erro de validação provocado por dados introduzidos pelo utilizador."""


__all__ = ["DuplicateInvoiceError", "FaturasError", "UserInputError"]
