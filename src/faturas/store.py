"""Ordered in-memory invoice store backed by a binary search tree.

Each node owns its two optional children and nothing else, so the tree has
no back references. The tree is not rebalanced: inserting invoices in
ascending order produces a linked list and lookups degrade to linear time.
All descents are iterative, which keeps degenerate trees clear of the
interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .config import DUPLICATES_ALLOW, DUPLICATES_REJECT, StoreConfig
from .errors import DuplicateInvoiceError
from .invoices import Invoice

LOGGER = logging.getLogger("faturas.store")


class _Node:
    __slots__ = ("invoice", "left", "right")

    def __init__(self, invoice: Invoice) -> None:
        self.invoice = invoice
        self.left: _Node | None = None
        self.right: _Node | None = None

    @property
    def key(self) -> int:
        return self.invoice.number


class InvoiceStore:
    """Colecção de faturas ordenada pelo número da fatura.

    ``find`` devolve ``None`` e ``update_status``/``remove`` devolvem
    ``False`` quando a fatura não existe; nenhuma destas situações é tratada
    como erro.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        self.config = config or StoreConfig()
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, number: object) -> bool:
        if not isinstance(number, int):
            return False
        return self._find_node(number) is not None

    def __iter__(self) -> Iterator[Invoice]:
        return self.iter_ordered()

    def __repr__(self) -> str:
        return f"InvoiceStore(size={self._size}, duplicates={self.config.duplicates!r})"

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, number: int, due_date: str, amount: float, status: str) -> Invoice:
        """Store a new invoice and return the stored record.

        Raises :class:`~faturas.errors.DuplicateInvoiceError` when ``number``
        already exists and the configured policy is ``"reject"``. With the
        ``"replace"`` policy the existing record is updated in place and
        returned instead.
        """

        invoice = Invoice(
            number=number,
            due_date=self.config.clip_due_date(due_date),
            amount=amount,
            status=self.config.clip_status(status),
        )

        if self._root is None:
            self._root = _Node(invoice)
            self._size = 1
            LOGGER.debug("Fatura %s inserida como raiz.", number)
            return invoice

        policy = self.config.duplicates
        node = self._root
        while True:
            if number == node.key and policy != DUPLICATES_ALLOW:
                if policy == DUPLICATES_REJECT:
                    LOGGER.warning("Fatura %s recusada: numero duplicado.", number)
                    raise DuplicateInvoiceError(number)
                existing = node.invoice
                existing.due_date = invoice.due_date
                existing.amount = invoice.amount
                existing.status = invoice.status
                LOGGER.debug("Fatura %s substituida.", number)
                return existing

            # Equal keys go right.
            if number < node.key:
                if node.left is None:
                    node.left = _Node(invoice)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(invoice)
                    break
                node = node.right

        self._size += 1
        LOGGER.debug("Fatura %s inserida.", number)
        return invoice

    def find(self, number: int) -> Invoice | None:
        """Return the stored invoice with ``number`` or ``None``."""

        node = self._find_node(number)
        if node is None:
            return None
        return node.invoice

    def update_status(self, number: int, new_status: str) -> bool:
        """Overwrite the status of invoice ``number``.

        Returns ``True`` when the invoice was updated and ``False`` when it
        does not exist, in which case nothing changes.
        """

        invoice = self.find(number)
        if invoice is None:
            LOGGER.debug("Fatura %s nao encontrada para atualizar.", number)
            return False
        invoice.status = self.config.clip_status(new_status)
        LOGGER.debug("Status da fatura %s atualizado para %r.", number, invoice.status)
        return True

    def remove(self, number: int) -> bool:
        """Remove invoice ``number``; return ``False`` when it is absent.

        A node with two children takes over the record of its in-order
        successor, and the successor's node is unlinked instead.
        """

        parent: _Node | None = None
        node = self._root
        while node is not None and node.key != number:
            parent = node
            node = node.left if number < node.key else node.right

        if node is None:
            LOGGER.debug("Fatura %s nao encontrada para remover.", number)
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            node.invoice = successor.invoice
            # The successor has no left child.
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.right if node.left is None else node.left
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1
        LOGGER.debug("Fatura %s removida.", number)
        return True

    def iter_ordered(self) -> Iterator[Invoice]:
        """Yield every invoice in ascending number order.

        The traversal is lazy and reads the live tree; every call starts a
        new traversal.
        """

        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.invoice
            node = node.right

    def height(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""

        if self._root is None:
            return 0
        height = 0
        level = [self._root]
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def clear(self) -> None:
        """Drop every invoice."""

        self._root = None
        self._size = 0

    def _find_node(self, number: int) -> _Node | None:
        node = self._root
        while node is not None:
            if number == node.key:
                return node
            node = node.left if number < node.key else node.right
        return None


__all__ = ["InvoiceStore"]
