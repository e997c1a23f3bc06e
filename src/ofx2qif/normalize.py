"""Field normalization from raw OFX element text to QIF field text."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import TYPE_CHECKING

from ofx2qif.errors import FieldParseError

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from ofx2qif.models import Transaction

LOGGER = logging.getLogger(__name__)

INPUT_DATE_FORMAT = '%Y%m%d'
OUTPUT_DATE_FORMAT = '%d/%m/%Y'

_WHITESPACE_RE = re.compile(r'\s+')
_PERIOD_SPACE_RE = re.compile(r'\.\s')


def _collapse(value: str) -> str:
    collapsed = _WHITESPACE_RE.sub(' ', value.strip())
    return _PERIOD_SPACE_RE.sub('.', collapsed)


def normalize_type(value: str) -> str:
    return value.strip().upper()


def normalize_date(value: str) -> str:
    """Convert a ``YYYYMMDD[...]`` OFX date into ``DD/MM/YYYY``.

    Only the leading eight digits are read; OFX time and zone suffixes are ignored.
    Raises ``FieldParseError`` when they do not form a valid date.
    """

    text = value.strip()[:8]
    if len(text) != 8 or not text.isdigit():
        raise FieldParseError('dtuser', value)
    try:
        parsed = datetime.strptime(text, INPUT_DATE_FORMAT)
    except ValueError as exc:
        raise FieldParseError('dtuser', value) from exc
    return parsed.strftime(OUTPUT_DATE_FORMAT).upper()


def normalize_amount(value: str) -> str:
    """Rewrite an amount so the rightmost separator becomes the decimal comma.

    ``1,024.00`` and ``1.024,00`` both become ``1.024,00``; ``50`` stays ``50``.
    """

    amount = value.strip().replace(',', '.').upper()
    index = amount.rfind('.')
    if index < 0:
        return amount
    return f'{amount[:index]},{amount[index + 1:]}'


def normalize_name(value: str) -> str | None:
    """Build the payee prefix of the memo, e.g. ``'Acme Corp. '`` -> ``'ACME CORP: '``.

    The last character is assumed to be a trailing period and dropped.
    Returns ``None`` for blank names.
    """

    collapsed = _collapse(value)
    if not collapsed:
        return None
    return f'{collapsed[:-1]}: '.upper()


def normalize_memo(value: str) -> str:
    return _collapse(value).upper()


def apply_field(transaction: Transaction, name: str, value: str, *, strict_dates: bool = False) -> str | None:
    """Update ``transaction`` from one element; return a warning when a field was skipped.

    Unknown element names are ignored. With ``strict_dates`` an unparsable
    ``dtuser`` raises ``FieldParseError`` instead of being skipped.
    """

    key = name.lower()
    if key == 'trntype':
        transaction.type = normalize_type(value)
    elif key == 'dtuser':
        try:
            transaction.date = normalize_date(value)
        except FieldParseError as exc:
            if strict_dates:
                raise
            LOGGER.debug('%s; leaving transaction date unset', exc)
            return str(exc)
    elif key == 'trnamt':
        transaction.amount = normalize_amount(value)
    elif key == 'name':
        prefix = normalize_name(value)
        if prefix is not None:
            transaction.memo = prefix
    elif key == 'memo':
        transaction.memo = (transaction.memo or '') + normalize_memo(value)
    return None
