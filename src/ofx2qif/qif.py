"""QIF rendering for converted bank transactions."""

from __future__ import annotations

import io
from collections.abc import Iterable
from pathlib import Path

from ofx2qif.models import Transaction

QIF_HEADER = '\n!Type:Bank\n\n'
"""Blank line, bank account type marker, blank line."""


def _field(value: str | None) -> str:
    return value if value is not None else ''


def build_qif_payload(transactions: Iterable[Transaction]) -> str:
    """Serialize transactions into a QIF bank-account string."""

    if not isinstance(transactions, Iterable):
        raise TypeError('transactions must be iterable')

    buffer = io.StringIO()
    buffer.write(QIF_HEADER)
    for txn in transactions:
        buffer.write(f'D{_field(txn.date)}\n')
        buffer.write(f'T{_field(txn.amount)}\n')
        buffer.write(f'M{_field(txn.memo)}\n')
        buffer.write('^\n\n')
    return buffer.getvalue()


def write_qif(
    transactions: Iterable[Transaction],
    *,
    output_path: Path | str | None,
    encoding: str = 'utf-8',
) -> str:
    """Write the QIF payload to ``output_path`` if provided and return the QIF string."""

    payload = build_qif_payload(transactions)
    if output_path:
        path = Path(output_path)
        with path.open('w', encoding=encoding, newline='') as handle:
            handle.write(payload)
    return payload
