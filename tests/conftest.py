"""
Shared fixtures for the test suite.

The environment defaults are set before the application modules are imported,
because `license_lattice.core.config` reads them once at import.
"""

import os

os.environ.setdefault("STRICT_PARSING", "true")
os.environ.setdefault("MAX_DISTINCT_TERMS", "12")

import pytest

from license_lattice.services.lattice import Var
from license_lattice.services.spdx.types import Lic, LicenseExceptionId, LicenseId, LicenseRef


@pytest.fixture
def lic():
    """
    Factory for Lic terms: lic("MIT"), lic("GPL-2.0", "Classpath-exception-2.0"),
    lic(ref="Proprietary").
    """
    def _make(license_id=None, exception=None, ref=None):
        identity = LicenseRef(ref) if ref is not None else LicenseId(license_id)
        exc = LicenseExceptionId(exception) if exception else None
        return Lic(identity, exc)
    return _make


@pytest.fixture
def X(lic):
    return Var(lic("MIT"))


@pytest.fixture
def Y(lic):
    return Var(lic("ISC"))


@pytest.fixture
def Z(lic):
    return Var(lic("Zlib"))
