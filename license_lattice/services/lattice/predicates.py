"""
Predicates derived from the brute-force evaluator.

- equivalent(a, b): same value under every assignment
- preorder(a, b): a ≤ b, defined as `a ∨ b ≡ b`
- satisfiable(a): True under at least one assignment
- valid(a): True under every assignment
"""

from .evaluator import outcomes, paired_outcomes
from .formula import TOP, Join, Lattice


def equivalent(a: Lattice, b: Lattice) -> bool:
    """
    Tests whether two formulas are equivalent.

    Every branch of the joint search must give both formulas the same value;
    the search stops at the first counterexample.

    Example: equivalent(Meet(Var("a"), Var("b")), Meet(Var("b"), Var("a"))) is True
    Example: equivalent(Meet(Var("a"), Var("b")), Meet(Var("b"), Var("b"))) is False
    """
    return all(left == right for left, right in paired_outcomes(a, b))


def preorder(a: Lattice, b: Lattice) -> bool:
    """
    Tests the lattice order `a ≤ b`, i.e. `a ∨ b ≡ b` (a entails b).

    Example: preorder(Meet(Var("a"), Var("b")), Var("a")) is True
    Example: preorder(Var("a"), Meet(Var("a"), Var("b"))) is False
    """
    return equivalent(Join(a, b), b)


def satisfiable(a: Lattice) -> bool:
    """Returns True if some assignment makes the formula True."""
    return any(outcomes(a))


def valid(a: Lattice) -> bool:
    """Returns True if every assignment makes the formula True."""
    return equivalent(a, TOP)
