"""Event handler that tracks OFX aggregate nesting and collects transactions."""

from __future__ import annotations

import logging

from ofx2qif.errors import StructuralError
from ofx2qif.models import DocumentNode, Transaction
from ofx2qif.normalize import apply_field

LOGGER = logging.getLogger(__name__)

DEFAULT_TRANSACTION_AGGREGATE = 'STMTTRN'


class AggregateTracker:
    """Consume parser events, rebuild the document tree and accumulate transactions.

    The stack always holds the sentinel root mapping at the bottom; each open
    aggregate pushes its own mapping, which is also stored under its name in
    the parent. A transaction is open between the start and end of a
    transaction aggregate and is appended to ``transactions`` when it closes.
    """

    def __init__(
        self,
        *,
        transaction_aggregate: str = DEFAULT_TRANSACTION_AGGREGATE,
        strict_dates: bool = False,
    ) -> None:
        self.transaction_aggregate = transaction_aggregate.upper()
        self.strict_dates = strict_dates
        self.headers: dict[str, str] = {}
        self.tree: dict[str, DocumentNode] = {}
        self.transactions: list[Transaction] = []
        self.warnings: list[str] = []
        self.current: Transaction | None = None
        self._stack: list[dict[str, DocumentNode]] = [self.tree]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _indent(self) -> str:
        return ' ' * (len(self._stack) * 2)

    def _is_transaction(self, name: str) -> bool:
        return name.upper() == self.transaction_aggregate

    def on_header(self, name: str, value: str) -> None:
        LOGGER.debug('%s:%s', name, value)
        self.headers[name] = value

    def on_aggregate_start(self, name: str) -> None:
        LOGGER.debug('%s%s {', self._indent(), name)
        if self._is_transaction(name):
            if self.current is not None:
                # an empty SGML leaf (e.g. ``<MEMO>``) leaves the previous transaction unterminated
                raise StructuralError(f'{name} started inside an unterminated {self.transaction_aggregate}')
            self.current = Transaction()
        aggregate: dict[str, DocumentNode] = {}
        self._stack[-1][name] = aggregate
        self._stack.append(aggregate)

    def on_aggregate_end(self, name: str) -> None:
        if len(self._stack) <= 1:
            raise StructuralError(f'Unbalanced aggregate end: {name}')
        if self._is_transaction(name) and self.current is not None:
            self.transactions.append(self.current)
            self.current = None
        self._stack.pop()
        LOGGER.debug('%s}', self._indent())

    def on_element(self, name: str, value: str) -> None:
        LOGGER.debug('%s%s=%s', self._indent(), name, value)
        if self.current is not None:
            warning = apply_field(self.current, name, value, strict_dates=self.strict_dates)
            if warning:
                self.warnings.append(warning)
        self._stack[-1][name] = value

    def finish(self) -> list[Transaction]:
        """Verify the document closed every aggregate and return the transactions."""

        if len(self._stack) != 1:
            raise StructuralError(f'{len(self._stack) - 1} aggregate(s) left open at end of document')
        if self.current is not None:
            raise StructuralError(f'{self.transaction_aggregate} aggregate left open at end of document')
        return self.transactions
