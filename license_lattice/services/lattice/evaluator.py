"""
Brute-force evaluator for lattice formulas.

The evaluator performs a depth-first nondeterministic search over boolean
assignments of the variables. Every search branch carries its own path
assignment: an immutable tuple of (term, value) pairs. A variable already
assigned on the current path is reused; an unassigned variable forks the
search into a `True` branch followed by a `False` branch, each continuing
with its own extended copy of the assignment.

Join and Meet short-circuit per branch: on a path where the left operand of a
Join is True (or of a Meet is False) the right operand is never evaluated, so
no forks are generated for variables that cannot change that path's outcome.

Terms are compared with `==` only; they do not need to be hashable.
"""

import logging
from typing import Any, Iterator, Optional, Tuple

from .formula import Bound, Join, Lattice, Meet, Var

logger = logging.getLogger(__name__)

Assignment = Tuple[Tuple[Any, bool], ...]


def _lookup(term: Any, assignment: Assignment) -> Optional[bool]:
    for assigned, value in assignment:
        if assigned == term:
            return value
    return None


def _guess(term: Any, assignment: Assignment) -> Iterator[Tuple[Assignment, bool]]:
    known = _lookup(term, assignment)
    if known is not None:
        yield assignment, known
        return
    yield assignment + ((term, True),), True
    yield assignment + ((term, False),), False


def evaluate(formula: Lattice, assignment: Assignment = ()) -> Iterator[Tuple[Assignment, bool]]:
    """
    Enumerates the branches of `formula` starting from `assignment`.

    Yields one (assignment, value) pair per complete branch, where the
    assignment is the input one extended with every variable forced open on
    that branch.
    """
    if isinstance(formula, Var):
        yield from _guess(formula.term, assignment)
    elif isinstance(formula, Bound):
        yield assignment, formula.value
    elif isinstance(formula, Join):
        for branch, left in evaluate(formula.left, assignment):
            if left:
                yield branch, True
            else:
                yield from evaluate(formula.right, branch)
    elif isinstance(formula, Meet):
        for branch, left in evaluate(formula.left, assignment):
            if not left:
                yield branch, False
            else:
                yield from evaluate(formula.right, branch)
    else:
        raise TypeError(f"Unrecognized lattice node: {formula!r}")


def outcomes(formula: Lattice) -> Iterator[bool]:
    """
    Values of a single formula, one per search branch.
    """
    for _, value in evaluate(formula):
        yield value


def paired_outcomes(left: Lattice, right: Lattice) -> Iterator[Tuple[bool, bool]]:
    """
    Values of two formulas evaluated on the same search branches.

    The assignment reached while evaluating `left` is threaded into the
    evaluation of `right`, so a variable shared by both formulas gets a single
    value on each branch.
    """
    branches = 0
    for branch, left_value in evaluate(left):
        for _, right_value in evaluate(right, branch):
            branches += 1
            yield left_value, right_value
    logger.debug("Paired evaluation explored %d branches", branches)
