"""
Lattice formula data type and its structural operations.

A formula is an immutable tree made of four node kinds:
- Var(term): an atomic term (any equality-comparable value)
- Bound(value): one of the two lattice constants (True = top, False = bottom)
- Join(left, right): least upper bound, behaves like OR
- Meet(left, right): greatest lower bound, behaves like AND

Structural operations implemented here:
- dual(f): De Morgan complement (Join <-> Meet, constants negated)
- free_vars(f): every variable term, left to right, duplicates included
- substitute(f, g): replaces every Var(v) with the formula g(v)
- join_all / meet_all: left folds used to build n-ary joins and meets
- render(f): infix rendering for logs and API responses
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Union


@dataclass(frozen=True)
class Var:
    """
    Atomic variable node. The term only needs to support equality.
    """
    term: Any

    def __repr__(self):
        return f"Var({self.term!r})"


@dataclass(frozen=True)
class Bound:
    """
    Lattice constant: True is the top element, False the bottom element.
    """
    value: bool

    def __repr__(self):
        return f"Bound({self.value})"


@dataclass(frozen=True)
class Join:
    """
    Join node (logical OR).
    """
    left: "Lattice"
    right: "Lattice"

    def __repr__(self):
        return f"Join({self.left!r}, {self.right!r})"


@dataclass(frozen=True)
class Meet:
    """
    Meet node (logical AND).
    """
    left: "Lattice"
    right: "Lattice"

    def __repr__(self):
        return f"Meet({self.left!r}, {self.right!r})"


Lattice = Union[Var, Bound, Join, Meet]

TOP = Bound(True)
BOTTOM = Bound(False)


def dual(formula: Lattice) -> Lattice:
    """
    Returns the De Morgan dual of a formula: Join and Meet are swapped and
    every constant is negated. Variables are left unchanged.
    """
    if isinstance(formula, Var):
        return formula
    if isinstance(formula, Bound):
        return Bound(not formula.value)
    if isinstance(formula, Join):
        return Meet(dual(formula.left), dual(formula.right))
    if isinstance(formula, Meet):
        return Join(dual(formula.left), dual(formula.right))
    raise TypeError(f"Unrecognized lattice node: {formula!r}")


def free_vars(formula: Lattice) -> List[Any]:
    """
    Lists the variable terms of a formula in left-to-right order.

    Duplicates are kept: `free_vars(Meet(Var("a"), Var("a")))` is `["a", "a"]`.
    Callers that need a set must deduplicate themselves.
    """
    out: List[Any] = []

    def _collect(node: Lattice) -> None:
        if isinstance(node, Var):
            out.append(node.term)
        elif isinstance(node, (Join, Meet)):
            _collect(node.left)
            _collect(node.right)

    _collect(formula)
    return out


def distinct_vars(formula: Lattice) -> List[Any]:
    """
    Like free_vars but keeps only the first occurrence of every term.
    Only equality is used, so unhashable terms are fine.
    """
    seen: List[Any] = []
    for term in free_vars(formula):
        if term not in seen:
            seen.append(term)
    return seen


def substitute(formula: Lattice, fn: Callable[[Any], Lattice]) -> Lattice:
    """
    Rewrites the tree replacing every Var(v) with fn(v).

    Constants and the Join/Meet structure are preserved as they are.
    """
    if isinstance(formula, Var):
        return fn(formula.term)
    if isinstance(formula, Bound):
        return formula
    if isinstance(formula, Join):
        return Join(substitute(formula.left, fn), substitute(formula.right, fn))
    if isinstance(formula, Meet):
        return Meet(substitute(formula.left, fn), substitute(formula.right, fn))
    raise TypeError(f"Unrecognized lattice node: {formula!r}")


def join_all(formulas: Iterable[Lattice]) -> Lattice:
    """
    Left fold with Join. An empty input gives the bottom element.
    """
    result = None
    for f in formulas:
        result = f if result is None else Join(result, f)
    return BOTTOM if result is None else result


def meet_all(formulas: Iterable[Lattice]) -> Lattice:
    """
    Left fold with Meet. An empty input gives the top element.
    """
    result = None
    for f in formulas:
        result = f if result is None else Meet(result, f)
    return TOP if result is None else result


def render(formula: Lattice, show: Callable[[Any], str] = str) -> str:
    """Fully parenthesized infix rendering, e.g. `((MIT ∨ ISC) ∧ Zlib)`."""
    if isinstance(formula, Var):
        return show(formula.term)
    if isinstance(formula, Bound):
        return "⊤" if formula.value else "⊥"
    if isinstance(formula, Join):
        return f"({render(formula.left, show)} ∨ {render(formula.right, show)})"
    if isinstance(formula, Meet):
        return f"({render(formula.left, show)} ∧ {render(formula.right, show)})"
    raise TypeError(f"Unrecognized lattice node: {formula!r}")
