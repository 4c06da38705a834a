from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class SatisfiesRequest(BaseModel):
    package: str = Field(..., description="License expression declared by the package")
    policy: str = Field(..., description="License expression required by the policy")


class SatisfiesResponse(BaseModel):
    package: str
    policy: str
    satisfied: bool
    reason: Optional[str] = None


class BatchSatisfiesRequest(BaseModel):
    policy: str
    packages: Dict[str, str]


class PackageResult(SatisfiesResponse):
    name: str


class BatchSatisfiesResponse(BaseModel):
    policy: str
    results: List[PackageResult]


class EquivalenceRequest(BaseModel):
    left: str
    right: str


class EquivalenceResponse(BaseModel):
    left: str
    right: str
    equivalent: bool
    left_entails_right: bool
    right_entails_left: bool


class ParseRequest(BaseModel):
    expression: str


class LicenseTerm(BaseModel):
    term: str
    license: str
    exception: Optional[str] = None
    registered: bool
    osi_approved: bool


class ParseResponse(BaseModel):
    expression: str
    lattice: str
    terms: List[LicenseTerm]


class LicenseRangeResponse(BaseModel):
    license: str
    range: List[str]
