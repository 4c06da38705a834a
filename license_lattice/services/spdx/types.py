"""
Domain types for SPDX license expressions.

- LicenseId / LicenseExceptionId: opaque identifiers from the SPDX tables
- LicenseRef: free-form `[DocumentRef-<doc>:]LicenseRef-<ref>` reference
- Lic: the lattice term, a license identity plus an optional exception
- License / Conjunction / Disjunction: the expression AST produced by the parser
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, order=True)
class LicenseId:
    """
    Registered SPDX license identifier (e.g. 'MIT', 'GPL-2.0').
    """
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True, order=True)
class LicenseExceptionId:
    """
    Registered SPDX license exception identifier (e.g. 'Classpath-exception-2.0').
    """
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True, order=True)
class LicenseRef:
    """
    Free-form license reference. `license` holds the part after 'LicenseRef-',
    `document` the part after 'DocumentRef-' when the reference points into
    another SPDX document.
    """
    license: str
    document: Optional[str] = None

    def __str__(self):
        ref = f"LicenseRef-{self.license}"
        if self.document:
            return f"DocumentRef-{self.document}:{ref}"
        return ref


LicenseIdentity = Union[LicenseRef, LicenseId]


@dataclass(frozen=True)
class Lic:
    """
    Lattice term: license identity with an optional exception.
    Two terms are the same variable iff they are structurally equal.
    """
    identity: LicenseIdentity
    exception: Optional[LicenseExceptionId] = None

    def __str__(self):
        if self.exception is not None:
            return f"{self.identity} WITH {self.exception}"
        return str(self.identity)


@dataclass(frozen=True)
class License:
    """
    Leaf of a license expression. `or_later` is set for `X+` and `X-or-later`.
    """
    identity: LicenseIdentity
    exception: Optional[LicenseExceptionId] = None
    or_later: bool = False


@dataclass(frozen=True)
class Conjunction:
    """`left AND right`"""
    left: "LicenseExpression"
    right: "LicenseExpression"


@dataclass(frozen=True)
class Disjunction:
    """`left OR right`"""
    left: "LicenseExpression"
    right: "LicenseExpression"


LicenseExpression = Union[License, Conjunction, Disjunction]
