"""Invoice record stored by :class:`faturas.store.InvoiceStore`."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass

STATUS_PENDING = "pendente"
STATUS_PAID = "paga"
KNOWN_STATUSES = (STATUS_PENDING, STATUS_PAID)


@dataclass
class Invoice:
    """Fatura identificada pelo seu número.

    Nenhum campo é validado: a data de vencimento é texto livre, o valor
    aceita qualquer ``float`` e o estado, embora normalmente seja
    ``"pendente"`` ou ``"paga"``, pode conter qualquer texto. O número não pode ser
    alterado depois da criação.
    """

    number: int
    due_date: str
    amount: float
    status: str

    def __setattr__(self, name: str, value: object) -> None:
        # O número é a chave da árvore: fixo depois de criado.
        if name == "number" and "number" in self.__dict__:
            raise FrozenInstanceError("O numero da fatura nao pode ser alterado.")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name == "number":
            raise FrozenInstanceError("O numero da fatura nao pode ser alterado.")
        super().__delattr__(name)

    def as_cells(self) -> list[object]:
        """Serialise the invoice for tabular export."""

        return [self.number, self.due_date, self.amount, self.status]

    def describe(self) -> str:
        """Return the multi-line block shown by the menu."""

        return "\n".join(
            (
                f"Numero da Fatura: {self.number}",
                f"Data de Vencimento: {self.due_date}",
                f"Valor: {self.amount:.2f}",
                f"Status: {self.status}",
            )
        )


__all__ = ["Invoice", "KNOWN_STATUSES", "STATUS_PAID", "STATUS_PENDING"]
