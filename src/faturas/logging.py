"""Registo da aplicação e exportação de listagens em Excel.

:func:`configure_logging` prepara o logger ``faturas`` usado pelo menu e pelo
armazém de faturas. :class:`ExcelLogger` grava linhas tabulares num *workbook*
``openpyxl``; :func:`export_invoices` usa-o para gravar a listagem ordenada
das faturas. A exportação é apenas um relatório: nunca é lida de volta.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Protocol, Sequence

if TYPE_CHECKING:  # pragma: no cover - apenas para anotações
    from .store import InvoiceStore

LOGGER_NAME = "faturas"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
INVOICE_COLUMNS = ("Numero", "Vencimento", "Valor", "Status")


def configure_logging(
    log_file: Path | None = None, *, level: int = logging.INFO
) -> logging.Logger:
    """Configure the package logger.

    With ``log_file`` the records go to a rotating file, otherwise to
    ``stderr``. Calling the function again only adjusts the level.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler: logging.Handler
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=1_000_000,
                backupCount=5,
                encoding="utf-8",
            )
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    logging.captureWarnings(True)
    return logger


class RowLike(Protocol):
    """Protocolo para linhas serializáveis em formato tabular."""

    def as_cells(self) -> Iterable[object]:
        """Devolve os valores ordenados a escrever na folha."""


@dataclass(slots=True)
class ExcelLoggerConfig:
    """Configuração usada pelo :class:`ExcelLogger`."""

    columns: Sequence[str]
    filename: str = "faturas.xlsx"
    sheet_title: str = "Faturas"


class ExcelLogger:
    """Grava registos em Excel utilizando :mod:`openpyxl`.

    Cada chamada a :meth:`write_rows` cria um novo *workbook* com o cabeçalho
    de :class:`ExcelLoggerConfig` seguido das linhas recebidas.
    """

    def __init__(self, config: ExcelLoggerConfig) -> None:
        self.config = config

    def write_rows(self, rows: Iterable[RowLike | Iterable[object]]) -> Path:
        """Persistir ``rows`` num ficheiro Excel e devolver o caminho final."""

        from openpyxl import Workbook

        destination = Path(self.config.filename)
        destination.parent.mkdir(parents=True, exist_ok=True)

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.config.sheet_title

        if self.config.columns:
            worksheet.append(list(self.config.columns))

        for row in rows:
            if hasattr(row, "as_cells"):
                cells = list(row.as_cells())  # type: ignore[union-attr]
            else:
                cells = list(row)  # type: ignore[arg-type]
            worksheet.append(cells)

        workbook.save(destination)
        return destination


def export_invoices(store: "InvoiceStore", destination: Path) -> Path:
    """Write the ordered invoice listing of ``store`` to ``destination``."""

    logger = ExcelLogger(
        ExcelLoggerConfig(columns=INVOICE_COLUMNS, filename=str(destination))
    )
    path = logger.write_rows(store.iter_ordered())
    logging.getLogger(LOGGER_NAME).info(
        "Listagem de %d faturas exportada para %s", len(store), path
    )
    return path


__all__ = [
    "ExcelLogger",
    "ExcelLoggerConfig",
    "INVOICE_COLUMNS",
    "RowLike",
    "configure_logging",
    "export_invoices",
]
