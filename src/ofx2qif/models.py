"""Shared data models used across ofx2qif modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover - type-checking imports only
    from pathlib import Path

DocumentNode = Union[str, dict[str, 'DocumentNode']]
"""A parsed OFX node: leaf text or an ordered mapping of child nodes."""


class SourceFormat(str, Enum):
    """Supported input formats detected by the pipeline."""

    OFX = 'ofx'
    UNKNOWN = 'unknown'


@dataclass(slots=True)
class Transaction:
    """Single bank statement entry with QIF-ready field text."""

    type: str | None = None
    date: str | None = None
    amount: str | None = None
    memo: str | None = None


@dataclass(slots=True)
class ConversionJob:
    """Input file and destination for one conversion run."""

    source_path: Path
    source_format: SourceFormat
    output_path: Path | None = None


@dataclass(slots=True)
class ConversionResult:
    """Outcome of converting an input file."""

    job: ConversionJob
    transactions: list[Transaction] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    tree: dict[str, DocumentNode] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    payload: str = ''

    def has_transactions(self) -> bool:
        """Return ``True`` if the result contains at least one transaction."""

        return bool(self.transactions)

    def summary(self) -> str:
        """Return a human readable summary string for logging/UX."""

        count = len(self.transactions)
        target = str(self.job.output_path) if self.job.output_path else 'stdout'
        return f'{self.job.source_path.name}: {count} transactions -> {target}'
