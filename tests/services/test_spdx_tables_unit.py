"""
test: services/spdx/data.py, registry.py and ranges.py

Unit tests for the SPDX tables: loading and normalization of the JSON data,
identifier lookups (case-insensitive), OSI flags and or-later ranges.
"""

import json
import pytest
from license_lattice.services.spdx import data
from license_lattice.services.spdx import registry
from license_lattice.services.spdx.ranges import license_ranges, lookup_license_range
from license_lattice.services.spdx.types import LicenseExceptionId, LicenseId

# ==================================================================================
#                                TEST: LOOKUPS
# ==================================================================================

def test_mk_license_id_known_and_unknown():
    assert registry.mk_license_id("MIT") == LicenseId("MIT")
    assert registry.mk_license_id("Not-A-License") is None
    assert registry.mk_license_id("") is None


def test_mk_license_id_is_case_insensitive_and_canonical():
    assert registry.mk_license_id("apache-2.0") == LicenseId("Apache-2.0")
    assert registry.mk_license_id("ZLIB") == LicenseId("Zlib")


def test_mk_license_exception_id():
    assert registry.mk_license_exception_id("classpath-exception-2.0") == LicenseExceptionId("Classpath-exception-2.0")
    assert registry.mk_license_exception_id("MIT") is None


@pytest.mark.parametrize("license_id,expected", [
    ("MIT", True),
    ("Apache-2.0", True),
    ("WTFPL", False),
    ("Unknown-1.0", False),
])
def test_is_osi_approved(license_id, expected):
    assert registry.is_osi_approved(LicenseId(license_id)) is expected


def test_licenses_listing_shapes():
    entries = registry.licenses()
    assert ("MIT", "MIT License", True) in entries
    assert LicenseId("GPL-2.0") in registry.license_identifiers()
    assert LicenseExceptionId("LLVM-exception") in registry.license_exceptions()
    assert registry.license_name(LicenseId("ISC")) == "ISC License"


def test_package_reexports_registry_functions():
    from license_lattice.services import spdx
    assert spdx.licenses is registry.licenses
    assert spdx.mk_license_id("mit") == LicenseId("MIT")

# ==================================================================================
#                                TEST: RANGES
# ==================================================================================

@pytest.mark.parametrize("license_id,expected", [
    ("GPL-1.0", ["GPL-1.0", "GPL-2.0", "GPL-3.0"]),
    ("GPL-2.0", ["GPL-2.0", "GPL-3.0"]),
    ("LGPL-2.1", ["LGPL-2.1", "LGPL-3.0"]),
    ("GPL-3.0", ["GPL-3.0"]),
    ("MIT", ["MIT"]),
])
def test_lookup_license_range(license_id, expected):
    assert lookup_license_range(LicenseId(license_id)) == [LicenseId(m) for m in expected]


def test_license_ranges_are_ordered_families():
    families = license_ranges()
    assert [LicenseId("MPL-1.0"), LicenseId("MPL-1.1"), LicenseId("MPL-2.0")] in families

# ==================================================================================
#                                TEST: LOADING
# ==================================================================================

def test_load_from_custom_file(tmp_path):
    """
    A custom file replaces the packaged tables; range members that are not
    registered licenses are dropped.
    """
    custom = {
        "licenses": [
            {"id": "Foo-1.0", "name": "Foo 1.0", "osi_approved": True},
            {"id": "Foo-2.0"},
        ],
        "exceptions": [{"id": "Foo-exception"}],
        "ranges": [["Foo-1.0", "Foo-2.0", "Foo-3.0"]],
    }
    path = tmp_path / "spdx.json"
    path.write_text(json.dumps(custom), encoding="utf-8")

    tables = data.load_spdx_tables(str(path))
    assert tables.licenses == {"Foo-1.0": ("Foo 1.0", True), "Foo-2.0": ("Foo-2.0", False)}
    assert tables.exceptions == {"Foo-exception": "Foo-exception"}
    assert tables.ranges == [["Foo-1.0", "Foo-2.0"]]


def test_unreadable_custom_file_falls_back_to_packaged(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding="utf-8")

    tables = data.load_spdx_tables(str(path))
    assert "MIT" in tables.licenses
    assert tables.ranges


def test_missing_custom_file_falls_back_to_packaged(tmp_path):
    tables = data.load_spdx_tables(str(tmp_path / "missing.json"))
    assert "GPL-2.0" in tables.licenses


def test_normalize_skips_malformed_entries():
    tables = data._normalize({
        "licenses": [{"id": "A"}, "junk", {"name": "no id"}],
        "exceptions": [42],
        "ranges": ["not-a-list", ["A"]],
    })
    assert list(tables.licenses) == ["A"]
    assert tables.exceptions == {}
    assert tables.ranges == [["A"]]
