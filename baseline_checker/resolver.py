"""
Status resolver: turns a feature identifier into a Baseline classification.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .features import BaselineStatus, FeatureRecord, FeatureRegistry

logger = logging.getLogger(__name__)

UNKNOWN_SUGGESTIONS = ("Check feature name spelling",)


@dataclass
class ResolverStats:
    """Counters owned by one resolver instance."""
    checks: int = 0
    cache_hits: int = 0
    api_calls: int = 0


@dataclass(frozen=True)
class FeatureStatus:
    """Result of resolving one identifier.

    ``status`` is ``UNKNOWN`` when nothing matched; that is a valid outcome,
    not an error.
    """
    identifier: str
    status: BaselineStatus
    record: Optional[FeatureRecord] = None
    match: str = "none"
    confidence: str = "low"
    reason: Optional[str] = None
    suggestions: Tuple[str, ...] = ()
    polyfills: Tuple[str, ...] = ()
    migration: Tuple[str, ...] = ()

    @property
    def is_baseline(self) -> bool:
        return self.status is BaselineStatus.WIDELY

    @property
    def available_since(self) -> Optional[int]:
        return self.record.since_year if self.record else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "is_baseline": self.is_baseline,
            "status": self.status.value,
            "feature": self.record.to_dict() if self.record else None,
            "available_since": self.available_since,
            "match": self.match,
            "confidence": self.confidence,
            "reason": self.reason,
            "suggestions": list(self.suggestions),
            "polyfills": list(self.polyfills),
            "migration": list(self.migration),
        }


def _from_record(identifier: str, record: FeatureRecord, match: str) -> FeatureStatus:
    return FeatureStatus(
        identifier=identifier,
        status=record.status,
        record=record,
        match=match,
        confidence="high" if match == "exact" else "medium",
        suggestions=record.alternatives,
        polyfills=record.polyfills,
        migration=record.migration_steps,
    )


class StatusResolver:
    """Resolves identifiers against a registry: exact id first, then substring.

    The substring fallback returns the first match in registry insertion
    order.
    """

    def __init__(self, registry: Optional[FeatureRegistry] = None):
        self.registry = registry if registry is not None else FeatureRegistry()
        self.stats = ResolverStats()

    def resolve(self, identifier: str) -> FeatureStatus:
        self.stats.checks += 1
        needle = identifier.strip().lower()
        if needle:
            record = self.registry.get(needle)
            if record is not None:
                self.stats.cache_hits += 1
                return _from_record(identifier, record, "exact")
            for record in self.registry:
                if needle in record.id.lower() or needle in record.name.lower():
                    logger.debug("Fuzzy match %r -> %s", identifier, record.id)
                    return _from_record(identifier, record, "fuzzy")
        logger.debug("Unknown feature %r", identifier)
        return FeatureStatus(
            identifier=identifier,
            status=BaselineStatus.UNKNOWN,
            reason=f'Feature "{identifier}" not found',
            suggestions=UNKNOWN_SUGGESTIONS,
        )

    def get_stats(self) -> Dict[str, int]:
        return {
            "checks": self.stats.checks,
            "cache_hits": self.stats.cache_hits,
            "api_calls": self.stats.api_calls,
            "cache_size": len(self.registry),
        }
