from fastapi import APIRouter, HTTPException
from license_lattice.core.config import MAX_DISTINCT_TERMS
from license_lattice.models.schemas import (
    BatchSatisfiesRequest,
    BatchSatisfiesResponse,
    EquivalenceRequest,
    EquivalenceResponse,
    LicenseRangeResponse,
    LicenseTerm,
    ParseRequest,
    ParseResponse,
    SatisfiesRequest,
    SatisfiesResponse,
)
from license_lattice.services.lattice import render
from license_lattice.services.spdx import (
    LicenseId,
    check_policies,
    compare_expressions,
    distinct_terms,
    expr_to_lattice,
    is_osi_approved,
    lookup_license_range,
    mk_license_id,
    parse_expression,
    render_expression,
    satisfies,
)


router = APIRouter()


def _parse_or_400(text: str):
    try:
        return parse_expression(text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _guard_terms(*exprs) -> None:
    count = len(distinct_terms(*exprs))
    if count > MAX_DISTINCT_TERMS:
        raise HTTPException(
            status_code=422,
            detail=f"Too many distinct license terms ({count} > {MAX_DISTINCT_TERMS})",
        )


@router.post("/satisfies", response_model=SatisfiesResponse)
def check_satisfies(payload: SatisfiesRequest):
    # 1) Parse both expressions
    package = _parse_or_400(payload.package)
    policy = _parse_or_400(payload.policy)

    # 2) Refuse searches that are too large
    _guard_terms(package, policy)

    # 3) Entailment check
    ok = satisfies(package, policy)
    package_n = render_expression(package)
    policy_n = render_expression(policy)
    verb = "satisfies" if ok else "does not satisfy"

    return SatisfiesResponse(
        package=package_n,
        policy=policy_n,
        satisfied=ok,
        reason=f"{package_n} {verb} {policy_n}",
    )


@router.post("/satisfies/batch", response_model=BatchSatisfiesResponse)
def check_satisfies_batch(payload: BatchSatisfiesRequest):
    # the policy must be valid, packages that fail to parse are reported per entry
    policy = _parse_or_400(payload.policy)
    _guard_terms(policy)
    for package_text in payload.packages.values():
        try:
            package = parse_expression((package_text or "").strip())
        except ValueError:
            continue
        _guard_terms(package, policy)
    return check_policies(payload.policy, payload.packages)


@router.post("/equivalent", response_model=EquivalenceResponse)
def check_equivalent(payload: EquivalenceRequest):
    left = _parse_or_400(payload.left)
    right = _parse_or_400(payload.right)
    _guard_terms(left, right)

    result = compare_expressions(left, right)
    return EquivalenceResponse(
        left=render_expression(left),
        right=render_expression(right),
        **result,
    )


@router.post("/parse", response_model=ParseResponse)
def parse(payload: ParseRequest):
    expr = _parse_or_400(payload.expression)

    terms = []
    for lic in distinct_terms(expr):
        registered = isinstance(lic.identity, LicenseId) and mk_license_id(lic.identity.value) is not None
        terms.append(LicenseTerm(
            term=str(lic),
            license=str(lic.identity),
            exception=str(lic.exception) if lic.exception else None,
            registered=registered,
            osi_approved=registered and is_osi_approved(lic.identity),
        ))

    return ParseResponse(
        expression=render_expression(expr),
        lattice=render(expr_to_lattice(expr)),
        terms=terms,
    )


@router.get("/licenses/{license_id}/range", response_model=LicenseRangeResponse)
def license_range(license_id: str):
    lid = mk_license_id(license_id)
    if lid is None:
        raise HTTPException(status_code=404, detail=f"Unknown license identifier: {license_id}")
    return LicenseRangeResponse(
        license=str(lid),
        range=[str(m) for m in lookup_license_range(lid)],
    )
