"""Drive an event handler from an OFX file parsed by ``ofxtools``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from ofx2qif.errors import StructuralError
from ofxtools.header import OFXHeaderError
from ofxtools.Parser import OFXTree, ParseError

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from pathlib import Path
    from xml.etree.ElementTree import Element

LOGGER = logging.getLogger(__name__)

HEADER_FIELDS = (
    'ofxheader',
    'data',
    'version',
    'security',
    'encoding',
    'charset',
    'compression',
    'oldfileuid',
    'newfileuid',
)
"""Header attributes exposed by ``ofxtools`` header objects (V1 superset of V2)."""


class OFXEventHandler(Protocol):
    def on_header(self, name: str, value: str) -> None: ...

    def on_aggregate_start(self, name: str) -> None: ...

    def on_aggregate_end(self, name: str) -> None: ...

    def on_element(self, name: str, value: str) -> None: ...


def emit_headers(header: object, handler: OFXEventHandler) -> None:
    """Report each header field present on ``header`` to ``handler``."""

    for field in HEADER_FIELDS:
        value = getattr(header, field, None)
        if value is None:
            continue
        handler.on_header(field.upper(), str(value))


def walk_element(element: Element, handler: OFXEventHandler) -> None:
    """Emit events for ``element`` and its descendants in document order.

    Elements with children, or without text, are aggregates; the rest are leaves.
    """

    if len(element) == 0 and element.text is not None:
        handler.on_element(element.tag, element.text)
        return
    handler.on_aggregate_start(element.tag)
    for child in element:
        walk_element(child, handler)
    handler.on_aggregate_end(element.tag)


def read_ofx(path: Path, handler: OFXEventHandler) -> None:
    """Parse the OFX file at ``path`` and push its events into ``handler``."""

    parser = OFXTree()
    try:
        with path.open('rb') as handle:
            parser.parse(handle)
    except (ParseError, OFXHeaderError) as exc:
        raise StructuralError(f'Failed to parse OFX file: {path}: {exc}') from exc

    emit_headers(getattr(parser, 'header', None), handler)
    root = parser.getroot()
    if root is None:
        raise StructuralError(f'No OFX document found in {path}')
    LOGGER.debug('Walking OFX document rooted at %s', root.tag)
    walk_element(root, handler)
