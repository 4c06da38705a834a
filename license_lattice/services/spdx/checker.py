"""
This module provides the public interface for checking package licenses
against a license policy.

Main Responsibility:
- `satisfies`: the entailment check between two parsed expressions.
- `check_policy` / `check_policies`: parse the expression text, run the check
  and report the outcome as plain dicts, one per package.
- `compare_expressions`: equivalence and entailment in both directions.
"""

import logging
from typing import Dict

from license_lattice.services.lattice import distinct_vars, equivalent, meet_all, preorder

from .exceptions import InvalidLicenseExpression
from .parser_spdx import parse_expression, render_expression
from .translator import expr_to_lattice
from .types import LicenseExpression

logger = logging.getLogger(__name__)


def satisfies(package: LicenseExpression, policy: LicenseExpression) -> bool:
    """
    True if the package license satisfies the license policy.

    The policy formula must entail the package formula:
    `policy ≤ package`, i.e. `policy ∨ package ≡ package`.

    Examples:
        'GPL-3.0' against 'ISC AND MIT' -> False
        'Zlib' against 'ISC AND MIT AND Zlib' -> True
        'MIT OR GPL-2.0' against 'ISC AND MIT' -> True
        'MIT AND GPL-2.0' against 'ISC AND GPL-2.0' -> False
    """
    return preorder(expr_to_lattice(policy), expr_to_lattice(package))


def check_policy(package_text: str, policy_text: str) -> dict:
    """
    Checks one package license expression against a policy expression.

    Args:
        package_text (str): License expression declared by the package.
        policy_text (str): License expression required by the policy.

    Returns:
        dict: 'package', 'policy', 'satisfied' and a human readable 'reason'.
              Expressions that cannot be parsed are reported as not satisfied.
    """
    try:
        package = parse_expression(package_text)
        policy = parse_expression(policy_text)
    except InvalidLicenseExpression as e:
        logger.info("Unparseable expression in policy check: %s", e)
        return {
            "package": package_text,
            "policy": policy_text,
            "satisfied": False,
            "reason": str(e),
        }

    ok = satisfies(package, policy)
    package_n = render_expression(package)
    policy_n = render_expression(policy)
    if ok:
        reason = f"{package_n} satisfies {policy_n}"
    else:
        reason = f"{package_n} does not satisfy {policy_n}"
    logger.debug("Policy check: %s", reason)

    return {
        "package": package_n,
        "policy": policy_n,
        "satisfied": ok,
        "reason": reason,
    }


def check_policies(policy_text: str, packages: Dict[str, str]) -> dict:
    """
    Checks several named packages against the same policy.

    Returns:
        dict: the policy text and a list of 'results', each with the package
              'name' added to the check_policy fields.
    """
    results = []
    for name, package_text in packages.items():
        result = check_policy((package_text or "").strip(), policy_text)
        result["name"] = name
        results.append(result)
    return {"policy": policy_text, "results": results}


def compare_expressions(left: LicenseExpression, right: LicenseExpression) -> dict:
    """
    Equivalence plus entailment in both directions between two expressions.
    """
    left_f = expr_to_lattice(left)
    right_f = expr_to_lattice(right)
    return {
        "equivalent": equivalent(left_f, right_f),
        "left_entails_right": preorder(left_f, right_f),
        "right_entails_left": preorder(right_f, left_f),
    }


def distinct_terms(*exprs: LicenseExpression) -> list:
    """
    Distinct Lic terms over all the given expressions, after range expansion.
    The number of these bounds the size of the search.
    """
    return distinct_vars(meet_all(expr_to_lattice(e) for e in exprs))
