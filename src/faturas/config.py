"""Configuration for :class:`faturas.store.InvoiceStore`."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DUPLICATES_REJECT = "reject"
DUPLICATES_ALLOW = "allow"
DUPLICATES_REPLACE = "replace"
DUPLICATE_POLICIES = (DUPLICATES_REJECT, DUPLICATES_ALLOW, DUPLICATES_REPLACE)

# Capacidade dos campos de texto na versão original (buffers de 50 e 10 bytes).
LEGACY_DUE_DATE_LENGTH = 49
LEGACY_STATUS_LENGTH = 9

DUPLICATES_ENV_VARIABLE = "FATURAS_DUPLICATES"
LEGACY_FIELDS_ENV_VARIABLE = "FATURAS_LEGACY_FIELDS"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Behaviour switches for the invoice store.

    ``duplicates`` decides what happens when an invoice number is inserted a
    second time:

    ``"reject"``
        raise :class:`~faturas.errors.DuplicateInvoiceError` (default);
    ``"allow"``
        keep both records, the new one in the right subtree of the old one;
    ``"replace"``
        overwrite the stored record in place.

    The ``max_*_length`` caps truncate text fields silently, as the fixed
    buffers of the legacy program did. ``None`` keeps text unbounded.
    """

    duplicates: str = DUPLICATES_REJECT
    max_due_date_length: int | None = None
    max_status_length: int | None = None

    def __post_init__(self) -> None:
        if self.duplicates not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Politica de duplicados desconhecida: {self.duplicates!r} "
                f"(esperado um de {', '.join(DUPLICATE_POLICIES)})"
            )
        for name in ("max_due_date_length", "max_status_length"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} nao pode ser negativo: {value}")

    @classmethod
    def legacy(cls) -> "StoreConfig":
        """Return the configuration matching the original program."""

        return cls(
            duplicates=DUPLICATES_ALLOW,
            max_due_date_length=LEGACY_DUE_DATE_LENGTH,
            max_status_length=LEGACY_STATUS_LENGTH,
        )

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "StoreConfig":
        """Build a configuration from ``FATURAS_*`` environment variables."""

        env = os.environ if environ is None else environ
        legacy = env.get(LEGACY_FIELDS_ENV_VARIABLE, "").strip().lower() in _TRUTHY
        duplicates = env.get(DUPLICATES_ENV_VARIABLE, "").strip().lower()

        if legacy:
            base = cls.legacy()
            if not duplicates:
                return base
            return cls(
                duplicates=duplicates,
                max_due_date_length=base.max_due_date_length,
                max_status_length=base.max_status_length,
            )
        return cls(duplicates=duplicates or DUPLICATES_REJECT)

    def clip_due_date(self, value: str) -> str:
        return _clip(value, self.max_due_date_length)

    def clip_status(self, value: str) -> str:
        return _clip(value, self.max_status_length)


def _clip(value: str, limit: int | None) -> str:
    if limit is None:
        return value
    return value[:limit]


__all__ = [
    "DUPLICATES_ALLOW",
    "DUPLICATES_REJECT",
    "DUPLICATES_REPLACE",
    "DUPLICATE_POLICIES",
    "LEGACY_DUE_DATE_LENGTH",
    "LEGACY_STATUS_LENGTH",
    "StoreConfig",
]
