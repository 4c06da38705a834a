"""
Translation of license expressions into lattice formulas over Lic terms.

- a plain license becomes a single variable
- an or-later registered license becomes the join of one variable per member
  of its range, each carrying the same exception
- an or-later LicenseRef stays a single variable: later versions of a
  free-form reference are unknown, so it is never expanded
- AND becomes Meet, OR becomes Join
"""

import logging

from license_lattice.services.lattice import BOTTOM, Join, Lattice, Meet, Var, join_all, substitute

from . import ranges
from .types import Conjunction, Disjunction, Lic, License, LicenseExpression, LicenseId

logger = logging.getLogger(__name__)


def _expand_or_later(term: Lic) -> Lattice:
    """
    Replaces a registered license term with the join over its range.
    An empty range yields the bottom element.
    """
    if not isinstance(term.identity, LicenseId):
        return Var(term)
    members = ranges.lookup_license_range(term.identity)
    if not members:
        logger.warning("Empty range for %s, translating it as bottom", term.identity)
        return BOTTOM
    return join_all(Var(Lic(member, term.exception)) for member in members)


def expr_to_lattice(expr: LicenseExpression) -> Lattice:
    """
    Translates a license expression into a Lattice formula over Lic terms.
    """
    if isinstance(expr, License):
        leaf = Var(Lic(expr.identity, expr.exception))
        if expr.or_later:
            return substitute(leaf, _expand_or_later)
        return leaf
    if isinstance(expr, Conjunction):
        return Meet(expr_to_lattice(expr.left), expr_to_lattice(expr.right))
    if isinstance(expr, Disjunction):
        return Join(expr_to_lattice(expr.left), expr_to_lattice(expr.right))
    raise TypeError(f"Unrecognized license expression node: {expr!r}")
