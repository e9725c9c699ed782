"""
Versioned archive format for point values.

A record is a mapping with ``type`` and ``version`` followed by the named
fields in canonical order:

    Point2:        x, y
    Point3:        x, y, z
    StereoPoint2:  uL, uR, v

Field names and order may only change together with ARCHIVE_VERSION.
"""
import logging
from typing import Dict, Iterable, List, Optional, TextIO, Tuple

import yaml

from ..core.errors import ArchiveError
from ..geometry.point2 import Point2
from ..geometry.point3 import Point3
from ..geometry.stereo_point2 import StereoPoint2

logger = logging.getLogger(__name__)

ARCHIVE_VERSION = 1

FIELDS: Dict[str, Tuple[str, ...]] = {
    'Point2': ('x', 'y'),
    'Point3': ('x', 'y', 'z'),
    'StereoPoint2': ('uL', 'uR', 'v'),
}

_TYPES = {
    'Point2': Point2,
    'Point3': Point3,
    'StereoPoint2': StereoPoint2,
}


def encode(p) -> dict:
    """
    Encode a point as an ordered record.

    Raises:
        ArchiveError: if the value is not an archivable point type
    """
    type_name = type(p).__name__
    if _TYPES.get(type_name) is not type(p):
        raise ArchiveError(f"Cannot archive value of type {type_name}")

    record = {'type': type_name, 'version': ARCHIVE_VERSION}
    for name in FIELDS[type_name]:
        record[name] = getattr(p, name)
    return record


def decode(record: dict):
    """
    Decode a record produced by ``encode``.

    Raises:
        ArchiveError: on unknown type, unsupported version or wrong fields
    """
    if not isinstance(record, dict):
        raise ArchiveError(f"Archive record must be a mapping, got {type(record).__name__}")

    type_name = record.get('type')
    if not isinstance(type_name, str) or type_name not in _TYPES:
        raise ArchiveError(f"Unknown archive type: {type_name!r}")

    version = record.get('version')
    if version != ARCHIVE_VERSION:
        raise ArchiveError(
            f"Unsupported archive version {version!r} for {type_name} "
            f"(expected {ARCHIVE_VERSION})"
        )

    names = tuple(k for k in record if k not in ('type', 'version'))
    if names != FIELDS[type_name]:
        raise ArchiveError(
            f"{type_name} record has fields {list(names)}, "
            f"expected {list(FIELDS[type_name])}"
        )

    try:
        values = [float(record[name]) for name in names]
    except (TypeError, ValueError) as e:
        raise ArchiveError(f"Non-numeric field in {type_name} record: {e}") from e

    logger.debug("Decoded %s record", type_name)
    return _TYPES[type_name](*values)


def dump_yaml(points: Iterable, stream: Optional[TextIO] = None) -> Optional[str]:
    """
    Write points as a YAML list of records.

    Returns:
        The YAML text when ``stream`` is None
    """
    records = [encode(p) for p in points]
    return yaml.safe_dump(records, stream, sort_keys=False, default_flow_style=False)


def load_yaml(stream) -> List:
    """Read points written by ``dump_yaml`` from a string or stream."""
    try:
        records = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ArchiveError(f"Malformed YAML archive: {e}") from e

    if records is None:
        return []
    if not isinstance(records, list):
        raise ArchiveError("YAML archive must contain a list of records")
    return [decode(r) for r in records]
