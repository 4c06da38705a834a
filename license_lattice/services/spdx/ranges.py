"""
License families used to expand "or later" references.

A family is an ordered list of identifiers, oldest version first, e.g.
['GPL-1.0', 'GPL-2.0', 'GPL-3.0']. `GPL-2.0+` stands for the members of the
family from GPL-2.0 onwards.
"""

from typing import List

from .data import get_tables
from .types import LicenseId


def license_ranges() -> List[List[LicenseId]]:
    return [[LicenseId(m) for m in family] for family in get_tables().ranges]


def lookup_license_range(license_id: LicenseId) -> List[LicenseId]:
    """
    Returns `license_id` followed by every later member of its family.

    A license that belongs to no family is its own single-member range.
    """
    for family in get_tables().ranges:
        if license_id.value in family:
            start = family.index(license_id.value)
            return [LicenseId(m) for m in family[start:]]
    return [license_id]
