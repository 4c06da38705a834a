"""
Lookups over the registered SPDX license and exception identifiers.

Identifier matching is case-insensitive, as in the SPDX specification, and
always returns the canonical spelling from the table.
"""

from typing import List, Optional, Tuple

from .data import get_tables
from .types import LicenseExceptionId, LicenseId


def licenses() -> List[Tuple[str, str, bool]]:
    """
    Returns every registered license as (identifier, full name, OSI approved).
    """
    return [(lid, name, osi) for lid, (name, osi) in get_tables().licenses.items()]


def license_identifiers() -> List[LicenseId]:
    return [LicenseId(lid) for lid in get_tables().licenses]


def license_exceptions() -> List[LicenseExceptionId]:
    return [LicenseExceptionId(eid) for eid in get_tables().exceptions]


def _canonical(text: str, known) -> Optional[str]:
    if not text:
        return None
    if text in known:
        return text
    lowered = text.lower()
    for key in known:
        if key.lower() == lowered:
            return key
    return None


def mk_license_id(text: str) -> Optional[LicenseId]:
    """
    Returns the LicenseId for `text` when it names a registered license, else None.
    """
    canonical = _canonical(text, get_tables().licenses)
    return LicenseId(canonical) if canonical else None


def mk_license_exception_id(text: str) -> Optional[LicenseExceptionId]:
    """
    Returns the LicenseExceptionId for `text` when it names a registered exception, else None.
    """
    canonical = _canonical(text, get_tables().exceptions)
    return LicenseExceptionId(canonical) if canonical else None


def license_name(license_id: LicenseId) -> Optional[str]:
    entry = get_tables().licenses.get(license_id.value)
    return entry[0] if entry else None


def is_osi_approved(license_id: LicenseId) -> bool:
    """
    True if the license is OSI approved. Unregistered identifiers are not.
    """
    entry = get_tables().licenses.get(license_id.value)
    return bool(entry and entry[1])
