"""
Package `license_lattice.services.spdx`

SPDX license expressions: identifier tables, parsing, translation into lattice
formulas and the policy check built on top of them.

Public API:
- satisfies(package, policy) -> bool
- check_policy(package_text, policy_text) -> dict
- parse_expression(text) -> LicenseExpression

Module layout:
- data: loading of the JSON tables (licenses, exceptions, ranges)
- registry / ranges: lookups over the tables
- parser_spdx: text -> AST, AST -> text
- translator: AST -> lattice formula
- checker: satisfies and the dict-based reports
"""

from .checker import check_policies, check_policy, compare_expressions, distinct_terms, satisfies
from .exceptions import InvalidLicenseExpression
from .registry import (
    is_osi_approved,
    license_exceptions,
    license_identifiers,
    licenses,
    mk_license_exception_id,
    mk_license_id,
)
from .parser_spdx import parse_expression, render_expression, unsafe_parse_expr
from .ranges import license_ranges, lookup_license_range
from .translator import expr_to_lattice
from .types import (
    Conjunction,
    Disjunction,
    Lic,
    License,
    LicenseExceptionId,
    LicenseExpression,
    LicenseId,
    LicenseRef,
)

__all__ = [
    "check_policies",
    "check_policy",
    "compare_expressions",
    "distinct_terms",
    "satisfies",
    "InvalidLicenseExpression",
    "is_osi_approved",
    "license_exceptions",
    "license_identifiers",
    "licenses",
    "mk_license_exception_id",
    "mk_license_id",
    "parse_expression",
    "render_expression",
    "unsafe_parse_expr",
    "license_ranges",
    "lookup_license_range",
    "expr_to_lattice",
    "Conjunction",
    "Disjunction",
    "Lic",
    "License",
    "LicenseExceptionId",
    "LicenseExpression",
    "LicenseId",
    "LicenseRef",
]
