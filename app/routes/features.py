"""Feature lookup and statistics routes."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from baseline_checker import NotReadyError
from baseline_checker.features import FEATURE_CATEGORIES

from ..schemas import FeatureOut, FeatureStatusOut, StatsOut
from ..utils import linter_svc

router = APIRouter()


@router.get("/features", response_model=List[FeatureOut])
def list_features(
    q: str = Query(default="", description="Substring of feature id or name"),
    status: Optional[str] = Query(default=None, description="widely, newly, limited or notBaseline"),
    category: Optional[str] = Query(default=None, description=", ".join(FEATURE_CATEGORIES)),
) -> List[FeatureOut]:
    """Registered features, in registry order."""
    if category and category not in FEATURE_CATEGORIES:
        raise HTTPException(400, f"category must be one of: {', '.join(FEATURE_CATEGORIES)}")
    return linter_svc.search_features(q, status, category)


@router.get("/features/{feature_id}", response_model=FeatureStatusOut)
def get_feature(feature_id: str) -> FeatureStatusOut:
    """Resolve one identifier. Unknown identifiers return status 'unknown', not 404."""
    try:
        return linter_svc.feature_status(feature_id)
    except NotReadyError as e:
        raise HTTPException(503, str(e)) from e


@router.get("/stats", response_model=StatsOut)
def stats() -> StatsOut:
    """Resolver counters for this process."""
    return StatsOut(**linter_svc.linter.get_stats())
