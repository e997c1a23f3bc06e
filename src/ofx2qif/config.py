"""Configuration utilities and dataclasses for ofx2qif."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH: Path = Path.home() / '.local/etc/ofx2qif.toml'
"""Default location for the user provided TOML configuration file."""

BASE_SETTINGS: dict[str, Any] = {
    'transaction_aggregate': 'STMTTRN',
    'strict_dates': False,
    'output_encoding': 'utf-8',
    'output_suffix': '.qif',
}
"""Default settings merged with any local overrides."""


@dataclass(frozen=True, slots=True)
class ConverterSettings:
    """Structured settings controlling a conversion run."""

    transaction_aggregate: str = 'STMTTRN'
    strict_dates: bool = False
    output_encoding: str = 'utf-8'
    output_suffix: str = '.qif'


def _merge_dict(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, returning a new dictionary."""

    merged: dict[str, Any] = dict(base)
    for key, value in overrides.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def _prepare_settings(raw: Mapping[str, Any]) -> ConverterSettings:
    """Convert a raw dictionary into ``ConverterSettings`` with proper types."""

    suffix = str(raw.get('output_suffix', '.qif'))
    if not suffix.startswith('.'):
        suffix = f'.{suffix}'
    return ConverterSettings(
        transaction_aggregate=str(raw.get('transaction_aggregate', 'STMTTRN')).upper(),
        strict_dates=bool(raw.get('strict_dates', False)),
        output_encoding=str(raw.get('output_encoding', 'utf-8')),
        output_suffix=suffix,
    )


def load_settings(path: Path | None = None) -> ConverterSettings:
    """Load ``ConverterSettings`` from the provided TOML file path.

    Without ``path`` a missing default configuration file yields the defaults.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.is_file():
        if path is None:
            return _prepare_settings(BASE_SETTINGS)
        raise FileNotFoundError(f'Configuration file not found: {config_path}')

    with config_path.open('rb') as handle:
        overrides = tomllib.load(handle)

    return _prepare_settings(_merge_dict(BASE_SETTINGS, overrides))
