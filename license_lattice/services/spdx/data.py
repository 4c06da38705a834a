"""
Module `data` — loading of the SPDX tables.

Reads `spdx_data.json` (or the file named by SPDX_DATA_PATH) and normalizes it
into three tables:
- licenses: ordered {identifier: (full name, osi approved)}
- exceptions: ordered {identifier: full name}
- ranges: list of license families, each an ordered list of identifiers

The tables are loaded once, at import. An unreadable external file falls back
to the copy shipped with the package.
"""

import os
import json
import logging
from typing import Dict, List, Tuple

from license_lattice.core.config import SPDX_DATA_PATH

_PACKAGED_DATA_PATH = os.path.join(os.path.dirname(__file__), "spdx_data.json")

logger = logging.getLogger(__name__)


class SpdxTables:
    """
    Normalized SPDX tables.
    """
    def __init__(
        self,
        licenses: Dict[str, Tuple[str, bool]],
        exceptions: Dict[str, str],
        ranges: List[List[str]],
    ):
        self.licenses = licenses
        self.exceptions = exceptions
        self.ranges = ranges

    def __repr__(self):
        return (
            f"SpdxTables(licenses={len(self.licenses)}, "
            f"exceptions={len(self.exceptions)}, ranges={len(self.ranges)})"
        )


def _read_data_json(path: str | None) -> dict | None:
    """Reads the JSON tables from `path`, otherwise from the package resources.

    Returns the decoded JSON or None when nothing could be read.
    """
    if path:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            logger.exception("Error reading SPDX data from %s, using packaged tables", path)

    try:
        with open(_PACKAGED_DATA_PATH, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logger.exception("Error reading %s from the filesystem", _PACKAGED_DATA_PATH)

    if __package__:
        import importlib.resources as resources
        try:
            text = resources.files(__package__).joinpath("spdx_data.json").read_text(encoding="utf-8")
            return json.loads(text)
        except (OSError, ValueError):
            logger.exception("Error reading spdx_data.json as a resource of package %s", __package__)

    return None


def _normalize(data: dict) -> SpdxTables:
    licenses: Dict[str, Tuple[str, bool]] = {}
    for entry in data.get("licenses", []):
        if not isinstance(entry, dict) or not entry.get("id"):
            continue
        licenses[entry["id"]] = (entry.get("name") or entry["id"], bool(entry.get("osi_approved", False)))

    exceptions: Dict[str, str] = {}
    for entry in data.get("exceptions", []):
        if not isinstance(entry, dict) or not entry.get("id"):
            continue
        exceptions[entry["id"]] = entry.get("name") or entry["id"]

    ranges: List[List[str]] = []
    for family in data.get("ranges", []):
        if not isinstance(family, list):
            continue
        members = [m for m in family if m in licenses]
        if len(members) != len(family):
            logger.warning("Range %s mentions unknown identifiers, they are dropped", family)
        if members:
            ranges.append(members)

    return SpdxTables(licenses, exceptions, ranges)


def load_spdx_tables(path: str | None = SPDX_DATA_PATH) -> SpdxTables:
    """
    Loads and normalizes the SPDX tables. Returns empty tables if no data
    could be read.
    """
    data = _read_data_json(path)
    if not isinstance(data, dict):
        logger.error("SPDX tables not available, every identifier will be unknown")
        return SpdxTables({}, {}, [])
    tables = _normalize(data)
    logger.debug("Loaded %r", tables)
    return tables


# load once
_SPDX_TABLES = load_spdx_tables()


def get_tables() -> SpdxTables:
    """
    Returns the tables loaded at import.
    """
    return _SPDX_TABLES
