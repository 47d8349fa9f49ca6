"""Menu de texto interactivo para o armazém de faturas.

O menu é apenas a camada de apresentação: recolhe os campos introduzidos pelo
utilizador, chama :class:`~faturas.store.InvoiceStore` e mostra o resultado.
A leitura e a escrita são injectáveis para que o menu possa ser testado sem
consola.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from .errors import DuplicateInvoiceError, UserInputError
from .invoices import STATUS_PAID, STATUS_PENDING
from .store import InvoiceStore

LOGGER = logging.getLogger("faturas.menu")

MENU_TEXT = "\n".join(
    (
        "",
        "- Controle de faturas -",
        "1- Inserir Fatura",
        "2- Buscar Fatura",
        "3- Atualizar Status de Fatura",
        "4- Remover Fatura",
        "5- Exibir Todas as Faturas",
        "0- Sair",
    )
)
SEPARATOR = "----------------------------"
STATUS_PROMPT = f"('{STATUS_PENDING}' ou '{STATUS_PAID}')"

InputFunc = Callable[[str], str]


class InvoiceMenu:
    """Ciclo de menu que termina com a opção ``0`` ou no fim da entrada."""

    def __init__(
        self,
        store: InvoiceStore,
        *,
        input_func: InputFunc | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.store = store
        self._input = input_func or input
        self._output = output
        self._handlers: dict[int, Callable[[], None]] = {
            1: self.insert_invoice,
            2: self.find_invoice,
            3: self.update_invoice_status,
            4: self.remove_invoice,
            5: self.list_invoices,
        }

    def run(self) -> None:
        """Mostrar o menu até o utilizador escolher sair."""

        while True:
            self._print(MENU_TEXT)
            try:
                option = self._read_option()
            except EOFError:
                self._print("\nSaindo...")
                return
            except UserInputError:
                option = -1

            if option == 0:
                self._print("\nSaindo...")
                return

            handler = self._handlers.get(option)
            if handler is None:
                self._print("\nOpcao invalida! Tente novamente.")
                continue

            try:
                handler()
            except EOFError:
                self._print("\nSaindo...")
                return
            except UserInputError as exc:
                self._print(f"\nValor invalido: {exc}")
            except DuplicateInvoiceError as exc:
                self._print(f"\n{exc}")

    def insert_invoice(self) -> None:
        number = self._ask_int("\nDigite o numero da fatura: ")
        due_date = self._ask("Digite a data de vencimento: ")
        amount = self._ask_float("Digite o valor: ")
        status = self._ask(f"Digite o status {STATUS_PROMPT}: ")

        self.store.insert(number, due_date, amount, status)
        LOGGER.info("Fatura %s inserida pelo menu.", number)
        self._print("\nFatura inserida com sucesso!")

    def find_invoice(self) -> None:
        number = self._ask_int("\nInforme o numero da fatura para busca: ")
        invoice = self.store.find(number)
        if invoice is None:
            self._print("\nFatura nao encontrada.")
            return
        self._print("\nFatura Encontrada!")
        self._print(invoice.describe())

    def update_invoice_status(self) -> None:
        number = self._ask_int("\nInforme o numero da fatura para atualizar: ")
        status = self._ask(f"Digite o novo status {STATUS_PROMPT}: ")
        if self.store.update_status(number, status):
            stored = self.store.find(number).status
            LOGGER.info("Status da fatura %s atualizado pelo menu.", number)
            self._print(f"\nStatus da Fatura {number} atualizado para '{stored}'.")
        else:
            self._print(f"\nFatura {number} nao foi encontrada.")

    def remove_invoice(self) -> None:
        number = self._ask_int("\nInforme o numero da fatura a remover: ")
        if self.store.remove(number):
            LOGGER.info("Fatura %s removida pelo menu.", number)
            self._print(f"\nFatura {number} removida.")
        else:
            self._print(f"\nFatura {number} nao foi encontrada.")

    def list_invoices(self) -> None:
        if not self.store:
            self._print("\nNenhuma fatura cadastrada.")
            return
        self._print("\n-- Faturas em ordem crescente --")
        for invoice in self.store.iter_ordered():
            self._print(f"\n{SEPARATOR}")
            self._print(invoice.describe())
            self._print(SEPARATOR)

    def _read_option(self) -> int:
        return self._ask_int("opcao: ")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _ask_int(self, prompt: str) -> int:
        text = self._ask(prompt).strip()
        try:
            return int(text)
        except ValueError as exc:
            raise UserInputError(f"numero inteiro esperado, recebido {text!r}") from exc

    def _ask_float(self, prompt: str) -> float:
        text = self._ask(prompt).strip()
        try:
            # Aceitar a vírgula decimal usada em português.
            return float(text.replace(",", "."))
        except ValueError as exc:
            raise UserInputError(f"valor numerico esperado, recebido {text!r}") from exc

    def _print(self, message: str = "") -> None:
        print(message, file=self._output or sys.stdout)


__all__ = ["InvoiceMenu", "MENU_TEXT"]
