"""
Property-based tests for the lattice predicates using Hypothesis.

Formulas are generated over three variables and both constants. Besides the
algebraic laws (idempotence, commutativity, double dual, reflexivity and
antisymmetry of the preorder) the brute-force search is checked against a
plain truth table over every assignment of the three variables.
"""

import itertools

from hypothesis import given, settings
from hypothesis import strategies as st

from license_lattice.services.lattice import Bound, Join, Meet, Var, dual, free_vars
from license_lattice.services.lattice.predicates import equivalent, preorder, satisfiable

_NAMES = ("x", "y", "z")

_leaves = st.one_of(
    st.sampled_from(_NAMES).map(Var),
    st.booleans().map(Bound),
)

formulas = st.recursive(
    _leaves,
    lambda children: st.one_of(
        st.builds(Join, children, children),
        st.builds(Meet, children, children),
    ),
    max_leaves=10,
)


def _truth(formula, env):
    """Reference evaluation under a total assignment."""
    if isinstance(formula, Var):
        return env[formula.term]
    if isinstance(formula, Bound):
        return formula.value
    if isinstance(formula, Join):
        return _truth(formula.left, env) or _truth(formula.right, env)
    return _truth(formula.left, env) and _truth(formula.right, env)


def _environments():
    for values in itertools.product((True, False), repeat=len(_NAMES)):
        yield dict(zip(_NAMES, values))

# ═══════════════════════════════════════════════════════════════════
# Lattice laws
# ═══════════════════════════════════════════════════════════════════


@given(formulas)
def test_meet_idempotence(a):
    assert equivalent(a, Meet(a, a))


@given(formulas)
def test_join_idempotence(a):
    assert equivalent(a, Join(a, a))


@given(formulas, formulas)
def test_commutativity(a, b):
    assert equivalent(Meet(a, b), Meet(b, a))
    assert equivalent(Join(a, b), Join(b, a))


@given(formulas)
def test_double_dual(a):
    assert equivalent(dual(dual(a)), a)


@given(formulas)
def test_preorder_reflexive(a):
    assert preorder(a, a)


@given(formulas, formulas)
def test_preorder_antisymmetric_up_to_equivalence(a, b):
    if preorder(a, b) and preorder(b, a):
        assert equivalent(a, b)


@given(formulas, formulas)
def test_meet_is_below_and_join_above(a, b):
    assert preorder(Meet(a, b), a)
    assert preorder(a, Join(a, b))

# ═══════════════════════════════════════════════════════════════════
# Agreement with a truth table
# ═══════════════════════════════════════════════════════════════════


@settings(max_examples=200)
@given(formulas, formulas)
def test_equivalent_matches_truth_table(a, b):
    expected = all(_truth(a, env) == _truth(b, env) for env in _environments())
    assert equivalent(a, b) is expected


@given(formulas)
def test_satisfiable_matches_truth_table(a):
    expected = any(_truth(a, env) for env in _environments())
    assert satisfiable(a) is expected


@given(formulas)
def test_dual_is_de_morgan_complement(a):
    """dual(a) under env equals not a under the negated env."""
    for env in _environments():
        negated = {k: not v for k, v in env.items()}
        assert _truth(dual(a), env) is (not _truth(a, negated))


@given(formulas)
def test_dual_preserves_free_vars(a):
    assert free_vars(dual(a)) == free_vars(a)
