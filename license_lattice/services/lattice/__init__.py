"""
Package `license_lattice.services.lattice`

Boolean-lattice formulas over arbitrary equality-comparable terms and the
brute-force evaluator used to compare them.

Public API:
- Var, Bound, Join, Meet: formula nodes
- dual, free_vars, substitute: structural operations
- equivalent, preorder, satisfiable: decision predicates
"""

from .formula import (
    BOTTOM,
    TOP,
    Bound,
    Join,
    Lattice,
    Meet,
    Var,
    distinct_vars,
    dual,
    free_vars,
    join_all,
    meet_all,
    render,
    substitute,
)
from .predicates import equivalent, preorder, satisfiable, valid

__all__ = [
    "BOTTOM",
    "TOP",
    "Bound",
    "Join",
    "Lattice",
    "Meet",
    "Var",
    "distinct_vars",
    "dual",
    "free_vars",
    "join_all",
    "meet_all",
    "render",
    "substitute",
    "equivalent",
    "preorder",
    "satisfiable",
    "valid",
]
