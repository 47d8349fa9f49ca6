"""Run the interactive invoice menu."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ..config import DUPLICATE_POLICIES, StoreConfig
from ..logging import configure_logging, export_invoices
from ..menu import InvoiceMenu
from ..store import InvoiceStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Controle de faturas em memória: inserir, buscar, atualizar, "
            "remover e listar faturas ordenadas pelo número."
        )
    )
    parser.add_argument(
        "--relatorio",
        type=Path,
        help="Exportar a listagem ordenada para este ficheiro Excel ao sair",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Gravar o registo da sessão neste ficheiro (rotativo)",
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="Reproduzir o programa original (duplicados permitidos, campos truncados)",
    )
    parser.add_argument(
        "--duplicados",
        choices=DUPLICATE_POLICIES,
        help="Política para números de fatura repetidos",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Registar também as mensagens de depuração",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> StoreConfig:
    base = StoreConfig.legacy() if args.legacy else StoreConfig.from_environment()
    if args.duplicados is None:
        return base
    return StoreConfig(
        duplicates=args.duplicados,
        max_due_date_length=base.max_due_date_length,
        max_status_length=base.max_status_length,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.log_file is not None:
        level = logging.INFO
    else:
        # Na consola só avisos, para não misturar registos com as perguntas.
        level = logging.WARNING
    logger = configure_logging(args.log_file, level=level)

    try:
        config = _resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    store = InvoiceStore(config)
    logger.info("Sessao iniciada (duplicados=%s).", config.duplicates)
    InvoiceMenu(store).run()

    if args.relatorio is not None:
        destination = export_invoices(store, args.relatorio)
        print(f"Relatório de faturas guardado em: {destination}")

    logger.info("Sessao terminada com %d faturas.", len(store))
    return 0


if __name__ == "__main__":  # pragma: no cover - execução directa
    raise SystemExit(main())
