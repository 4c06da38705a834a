"""
This module turns SPDX license expression text into the LicenseExpression AST
(License, Conjunction, Disjunction) used by the translator.

Tokenizing and the AND/OR/WITH grammar (AND binds tighter than OR, parentheses
for grouping) are handled by the `license_expression` library; this module
maps the resulting symbols onto SPDX identities:

- 'X+' and 'X-or-later' set the or-later flag on X
- 'X-only' is read as plain X
- 'LicenseRef-...' and 'DocumentRef-...:LicenseRef-...' become LicenseRef
- 'X WITH E' attaches the exception E to X

In strict mode unknown license or exception identifiers are rejected; otherwise
they are kept verbatim as unregistered identifiers.
"""

import re
import logging
from typing import Optional, Tuple

from license_expression import ExpressionError, LicenseSymbol, LicenseWithExceptionSymbol, Licensing

from license_lattice.core.config import STRICT_PARSING
from .exceptions import InvalidLicenseExpression
from .registry import mk_license_exception_id, mk_license_id
from .types import (
    Conjunction,
    Disjunction,
    License,
    LicenseExceptionId,
    LicenseExpression,
    LicenseId,
    LicenseIdentity,
    LicenseRef,
)

licensing = Licensing()

logger = logging.getLogger(__name__)

_REF_RE = re.compile(r"^(?:DocumentRef-(?P<doc>[A-Za-z0-9.\-]+):)?LicenseRef-(?P<ref>[A-Za-z0-9.\-]+)$")

_OR_LATER_SUFFIX = "-or-later"
_ONLY_SUFFIX = "-only"


def _parse_ref(key: str) -> Optional[LicenseRef]:
    match = _REF_RE.match(key)
    if not match:
        return None
    return LicenseRef(license=match.group("ref"), document=match.group("doc"))


def _parse_identity(key: str, strict: bool, expression: str) -> Tuple[LicenseIdentity, bool]:
    """
    Maps a symbol key onto (identity, or_later).
    """
    or_later = False
    if key.endswith("+"):
        key = key[:-1]
        or_later = True

    ref = _parse_ref(key)
    if ref is not None:
        return ref, or_later

    license_id = mk_license_id(key)
    if license_id is not None:
        return license_id, or_later

    lowered = key.lower()
    if lowered.endswith(_OR_LATER_SUFFIX):
        base = mk_license_id(key[: -len(_OR_LATER_SUFFIX)])
        if base is not None:
            return base, True
    if lowered.endswith(_ONLY_SUFFIX):
        base = mk_license_id(key[: -len(_ONLY_SUFFIX)])
        if base is not None:
            return base, or_later

    if strict:
        raise InvalidLicenseExpression(f"Unknown license identifier: {key}", expression)
    logger.info("Keeping unregistered license identifier %r", key)
    return LicenseId(key), or_later


def _parse_exception(key: str, strict: bool, expression: str) -> LicenseExceptionId:
    exception_id = mk_license_exception_id(key)
    if exception_id is not None:
        return exception_id
    if strict:
        raise InvalidLicenseExpression(f"Unknown license exception identifier: {key}", expression)
    logger.info("Keeping unregistered exception identifier %r", key)
    return LicenseExceptionId(key)


def _convert(node, strict: bool, expression: str) -> LicenseExpression:
    """
    Recursively converts a `license_expression` tree into the AST. n-ary
    AND/OR nodes are folded to the left.
    """
    if isinstance(node, LicenseWithExceptionSymbol):
        identity, or_later = _parse_identity(node.license_symbol.key, strict, expression)
        exception = _parse_exception(node.exception_symbol.key, strict, expression)
        return License(identity, exception, or_later)

    if isinstance(node, LicenseSymbol):
        identity, or_later = _parse_identity(node.key, strict, expression)
        return License(identity, None, or_later)

    if isinstance(node, (licensing.AND, licensing.OR)):
        combine = Conjunction if isinstance(node, licensing.AND) else Disjunction
        args = [_convert(arg, strict, expression) for arg in node.args]
        result = args[0]
        for arg in args[1:]:
            result = combine(result, arg)
        return result

    raise InvalidLicenseExpression(f"Unsupported construct in license expression: {node!r}", expression)


def parse_expression(text: str, strict: Optional[bool] = None) -> LicenseExpression:
    """
    Parses an SPDX license expression.

    Args:
        text (str): The expression, e.g. 'MIT OR (GPL-2.0+ WITH Classpath-exception-2.0)'.
        strict (Optional[bool]): Reject unregistered identifiers. Defaults to STRICT_PARSING.

    Returns:
        LicenseExpression: The parsed AST.

    Raises:
        InvalidLicenseExpression: For empty or malformed text, or unknown identifiers in strict mode.
    """
    if strict is None:
        strict = STRICT_PARSING
    if not text or not text.strip():
        raise InvalidLicenseExpression("Empty license expression", text)

    try:
        tree = licensing.parse(text, validate=False, strict=False)
    except (ExpressionError, ValueError, TypeError) as e:
        raise InvalidLicenseExpression(f"Malformed license expression {text!r}: {e}", text) from e

    if tree is None:
        raise InvalidLicenseExpression("Empty license expression", text)
    return _convert(tree, strict, text)


def unsafe_parse_expr(text: str) -> LicenseExpression:
    """
    Strict parse for literals known to be valid (tests, fixtures, constants).
    """
    return parse_expression(text, strict=True)


def render_expression(expr: LicenseExpression) -> str:
    """
    Renders the AST back to SPDX text, adding parentheses only where OR is
    nested inside AND.
    """
    if isinstance(expr, License):
        text = str(expr.identity)
        if expr.or_later:
            text += "+"
        if expr.exception is not None:
            text += f" WITH {expr.exception}"
        return text
    if isinstance(expr, Conjunction):
        parts = []
        for side in (expr.left, expr.right):
            rendered = render_expression(side)
            parts.append(f"({rendered})" if isinstance(side, Disjunction) else rendered)
        return " AND ".join(parts)
    if isinstance(expr, Disjunction):
        return f"{render_expression(expr.left)} OR {render_expression(expr.right)}"
    raise TypeError(f"Unrecognized license expression node: {expr!r}")
