"""Compliance score route."""

from fastapi import APIRouter

from baseline_checker.aggregator import CategoryTotals, compute_compliance, score

from ..schemas import ComplianceRequest, ComplianceResponse

router = APIRouter()


@router.post("/compliance", response_model=ComplianceResponse)
def compliance(req: ComplianceRequest) -> ComplianceResponse:
    """Score from per-category totals supplied by the caller."""
    categories = {name: CategoryTotals(total=c.total, issues=c.issues) for name, c in req.categories.items()}
    return ComplianceResponse(
        compliance=compute_compliance(categories),
        category_scores={name: score(c.total, c.issues) for name, c in categories.items()},
    )
