"""Two-phase OFX to QIF conversion: parse every event, then serialize."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ofx2qif.config import ConverterSettings
from ofx2qif.models import ConversionJob, ConversionResult
from ofx2qif.qif import write_qif
from ofx2qif.reader import read_ofx
from ofx2qif.tracker import AggregateTracker

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from pathlib import Path

LOGGER = logging.getLogger(__name__)


def parse_document(path: Path, settings: ConverterSettings | None = None) -> AggregateTracker:
    """Run the parse phase for ``path`` and return the finished tracker."""

    settings = settings or ConverterSettings()
    tracker = AggregateTracker(
        transaction_aggregate=settings.transaction_aggregate,
        strict_dates=settings.strict_dates,
    )
    read_ofx(path, tracker)
    tracker.finish()
    LOGGER.debug('Parsed %d transactions from %s', len(tracker.transactions), path)
    return tracker


def convert(job: ConversionJob, settings: ConverterSettings | None = None) -> ConversionResult:
    """Convert ``job.source_path`` to QIF, writing ``job.output_path`` when set.

    The output file is only opened once the whole input has been parsed.
    """

    settings = settings or ConverterSettings()
    tracker = parse_document(job.source_path, settings)
    payload = write_qif(
        tracker.transactions,
        output_path=job.output_path,
        encoding=settings.output_encoding,
    )
    return ConversionResult(
        job=job,
        transactions=list(tracker.transactions),
        headers=dict(tracker.headers),
        tree=tracker.tree,
        warnings=list(tracker.warnings),
        payload=payload,
    )
