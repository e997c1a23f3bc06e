"""Command-line interface for ofx2qif."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from ofx2qif import __version__ as pkg_version
from ofx2qif.config import ConverterSettings, load_settings
from ofx2qif.converter import convert
from ofx2qif.detect import default_output_path, gather_jobs
from ofx2qif.errors import ConversionError
from ofx2qif.models import ConversionJob, ConversionResult

LOGGER = logging.getLogger('ofx2qif')
if not LOGGER.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    LOGGER.addHandler(handler)
LOGGER.setLevel(logging.INFO)
LOGGER.propagate = False


def _emit(message: str, args: argparse.Namespace, *, verbose_only: bool = False, error: bool = False) -> None:
    """Log ``message`` honoring ``--quiet``/``--verbose`` flags."""

    if verbose_only and not args.verbose:
        return
    if args.quiet and not error:
        return
    level = logging.ERROR if error else logging.INFO
    LOGGER.log(level, message)


def _trace_transactions(result: ConversionResult, args: argparse.Namespace) -> None:
    """Print each converted transaction in QIF field order (verbose mode)."""

    for index, txn in enumerate(result.transactions, start=1):
        _emit(f'Transaction {index}: D{txn.date or ""} T{txn.amount or ""} M{txn.memo or ""}', args, verbose_only=True)


def _resolve_output(job: ConversionJob, args: argparse.Namespace, settings: ConverterSettings) -> Path | None:
    if args.stdout:
        return None
    if args.output:
        return Path(args.output)
    if args.output_dir:
        return Path(args.output_dir) / default_output_path(job.source_path, settings.output_suffix).name
    return default_output_path(job.source_path, settings.output_suffix)


def _check_options(args: argparse.Namespace, jobs: list[ConversionJob]) -> None:
    """Raise ``ValueError`` for output options that do not fit the resolved jobs."""

    if not jobs:
        raise ValueError('No OFX/QFX inputs found')
    if args.output and len(jobs) != 1:
        raise ValueError('--output can only be used when a single job is specified')
    if args.output and args.output_dir:
        raise ValueError('Use either --output or --output-dir, not both')
    if args.stdout and len(jobs) != 1:
        raise ValueError('--stdout can only be used when a single job is specified')
    if args.stdout and (args.output or args.output_dir):
        raise ValueError('--stdout is incompatible with --output or --output-dir')


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Convert OFX bank statements to QIF')
    parser.add_argument('targets', nargs='+', type=Path, help='Input OFX/QFX files or directories')
    parser.add_argument('-o', '--output', type=Path, help='Path to write the QIF output')
    parser.add_argument('--output-dir', type=Path, help='Directory to write per-job QIF outputs')
    parser.add_argument('--stdout', action='store_true', help='Print the QIF output to stdout')
    parser.add_argument('-c', '--config', type=Path, help='Path to configuration TOML')
    parser.add_argument('--strict-dates', action='store_true', help='Fail on unparsable transaction dates')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {pkg_version}')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Suppress informational output')
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Print converted transactions and parse events')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config)
    if args.strict_dates:
        settings = replace(settings, strict_dates=True)
    if args.verbose:
        LOGGER.setLevel(logging.DEBUG)
    elif args.quiet:
        LOGGER.setLevel(logging.WARNING)
    else:
        LOGGER.setLevel(logging.INFO)
    try:
        jobs = gather_jobs(args.targets)
        _check_options(args, jobs)
    except (ValueError, OSError) as exc:
        _emit(str(exc), args, error=True)
        return 1

    failures = 0
    for job in jobs:
        job.output_path = _resolve_output(job, args, settings)
        if job.output_path is not None:
            job.output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            result = convert(job, settings)
        except (ConversionError, OSError) as exc:
            _emit(f'Error converting {job.source_path}: {exc}', args, error=True)
            failures += 1
            continue
        _emit(result.summary(), args)
        for warning in result.warnings:
            _emit(f'Warning: {warning}', args, error=True)
        _trace_transactions(result, args)
        if args.stdout:
            sys.stdout.write(result.payload)
    return 1 if failures else 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
