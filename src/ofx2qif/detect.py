"""Resolve command-line targets into conversion jobs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ofx2qif.models import ConversionJob, SourceFormat

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Iterable
    from pathlib import Path

OFX_SUFFIXES = frozenset({'.ofx', '.qfx'})
"""Suffixes picked up when scanning a directory."""


def detect_format(path: Path) -> SourceFormat:
    return SourceFormat.OFX if path.suffix.lower() in OFX_SUFFIXES else SourceFormat.UNKNOWN


def default_output_path(source: Path, suffix: str = '.qif') -> Path:
    return source.with_suffix(suffix)


def scan_directory(directory: Path) -> list[ConversionJob]:
    """Return jobs for the OFX/QFX files directly inside ``directory``, sorted by name."""

    return [
        ConversionJob(source_path=entry, source_format=SourceFormat.OFX)
        for entry in sorted(directory.iterdir())
        if entry.is_file() and detect_format(entry) is SourceFormat.OFX
    ]


def gather_jobs(paths: Iterable[Path]) -> list[ConversionJob]:
    """Collect conversion jobs for all provided ``paths``.

    A file named explicitly is converted whatever its suffix; suffixes only
    filter directory scans. Missing paths raise ``FileNotFoundError``.
    """

    jobs: list[ConversionJob] = []
    for path in paths:
        target = path.expanduser()
        if target.is_dir():
            jobs.extend(scan_directory(target))
        elif target.is_file():
            jobs.append(ConversionJob(source_path=target, source_format=SourceFormat.OFX))
        else:
            raise FileNotFoundError(f'Input path not found: {target}')
    return jobs
