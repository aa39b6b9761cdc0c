"""
Feature registry: the canonical set of web platform features and their Baseline status.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import DuplicateFeatureError, RegistrySealedError


class BaselineStatus(Enum):
    """Baseline availability tier, ordered from lowest to highest risk."""
    WIDELY = "widely"
    NEWLY = "newly"
    LIMITED = "limited"
    NOT_BASELINE = "notBaseline"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "BaselineStatus":
        """Accept webstatus.dev, web-features and our own spellings."""
        if isinstance(value, BaselineStatus):
            return value
        if value is None or value is False:
            return cls.NOT_BASELINE
        text = str(value).strip().lower()
        if text in _STATUS_ALIASES:
            return _STATUS_ALIASES[text]
        raise ValueError(f"Unrecognized Baseline status: {value!r}")


_STATUS_ALIASES = {
    "widely": BaselineStatus.WIDELY,
    "high": BaselineStatus.WIDELY,
    "newly": BaselineStatus.NEWLY,
    "low": BaselineStatus.NEWLY,
    "limited": BaselineStatus.LIMITED,
    "notbaseline": BaselineStatus.NOT_BASELINE,
    "not_baseline": BaselineStatus.NOT_BASELINE,
    "false": BaselineStatus.NOT_BASELINE,
    "unknown": BaselineStatus.UNKNOWN,
}

_STATUS_LABELS = {
    BaselineStatus.WIDELY: "Widely Available",
    BaselineStatus.NEWLY: "Newly Available",
    BaselineStatus.LIMITED: "Limited Availability",
    BaselineStatus.NOT_BASELINE: "Not Baseline",
}

_RISK_LEVELS = {
    BaselineStatus.WIDELY: "low",
    BaselineStatus.NEWLY: "high",
    BaselineStatus.LIMITED: "critical",
    BaselineStatus.NOT_BASELINE: "critical",
}


def status_label(status: BaselineStatus) -> str:
    """Human-readable status, e.g. 'Newly Available'."""
    return _STATUS_LABELS.get(status, "Unknown")


def risk_level(status: BaselineStatus) -> str:
    """Risk bucket: critical, high, medium or low."""
    return _RISK_LEVELS.get(status, "medium")


def status_suggestion(status: BaselineStatus, feature_name: str) -> str:
    """One-line guidance for using a feature with the given status."""
    if status is BaselineStatus.WIDELY:
        return f"✓ {feature_name} is widely available - safe to use"
    if status is BaselineStatus.NEWLY:
        return f"⚠ {feature_name} is newly available - consider polyfills for older browsers"
    if status is BaselineStatus.LIMITED:
        return f"⚠ {feature_name} has limited support - use with caution and provide fallbacks"
    return f"❌ {feature_name} is not Baseline - avoid or provide comprehensive polyfills"


@dataclass(frozen=True)
class FeatureRecord:
    """One web platform feature."""
    id: str
    name: str
    status: BaselineStatus
    available_since: Optional[str] = None
    alternatives: Tuple[str, ...] = ()
    polyfills: Tuple[str, ...] = ()
    migration_steps: Tuple[str, ...] = ()
    mdn_url: Optional[str] = None
    category: Optional[str] = None

    @property
    def since_year(self) -> Optional[int]:
        """Year part of ``available_since``, if any."""
        if not self.available_since:
            return None
        head = str(self.available_since)[:4]
        return int(head) if head.isdigit() else None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeatureRecord":
        """Build a record from a plain mapping (bundled JSON layout)."""
        feature_id = str(data["id"]).strip()
        if not feature_id:
            raise ValueError("Feature id must not be empty")
        return cls(
            id=feature_id,
            name=str(data.get("name") or feature_id),
            status=BaselineStatus.parse(data.get("status")),
            available_since=data.get("since"),
            alternatives=tuple(data.get("alternatives") or ()),
            polyfills=tuple(data.get("polyfills") or ()),
            migration_steps=tuple(data.get("migration_steps") or ()),
            mdn_url=data.get("mdn_url"),
            category=data.get("category"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "since": self.available_since,
            "alternatives": list(self.alternatives),
            "polyfills": list(self.polyfills),
            "migration_steps": list(self.migration_steps),
            "mdn_url": self.mdn_url,
            "category": self.category,
        }


class FeatureRegistry:
    """Append-only mapping of feature id to record.

    Ids are indexed case-insensitively; the stored case is preserved. Once
    ``seal()`` is called the registry rejects further registrations.
    """

    def __init__(self):
        self._records: Dict[str, FeatureRecord] = {}
        self._sealed = False

    def register(self, record: FeatureRecord) -> None:
        if self._sealed:
            raise RegistrySealedError(f"Registry is sealed; cannot register {record.id}")
        if record.status is BaselineStatus.UNKNOWN:
            raise ValueError(f"Feature {record.id} cannot be registered with status 'unknown'")
        key = record.id.lower()
        if key in self._records:
            raise DuplicateFeatureError(record.id)
        self._records[key] = record

    def register_all(self, records) -> None:
        for record in records:
            self.register(record)

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, feature_id: str) -> Optional[FeatureRecord]:
        """Exact, case-insensitive lookup by id."""
        return self._records.get(feature_id.strip().lower())

    def all(self) -> List[FeatureRecord]:
        """All records in insertion order."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, feature_id: str) -> bool:
        return self.get(feature_id) is not None

    def __iter__(self) -> Iterator[FeatureRecord]:
        return iter(list(self._records.values()))

    def by_status(self, status: BaselineStatus) -> List[FeatureRecord]:
        return [r for r in self._records.values() if r.status is status]

    def search(self, query: str) -> List[FeatureRecord]:
        """All records whose id or name contains ``query`` (case-insensitive)."""
        q = query.strip().lower()
        return [r for r in self._records.values() if q in r.name.lower() or q in r.id.lower()]

    def statistics(self) -> Dict[str, int]:
        stats = {"total": len(self._records)}
        for status in (BaselineStatus.WIDELY, BaselineStatus.NEWLY,
                       BaselineStatus.LIMITED, BaselineStatus.NOT_BASELINE):
            stats[status.value] = len(self.by_status(status))
        return stats

    def by_category(self, category: str) -> List[FeatureRecord]:
        """Records in one of ``FEATURE_CATEGORIES``.

        A record's own ``category`` wins; records without one (e.g. from
        webstatus.dev) are placed by id and name.
        """
        if category not in _CATEGORY_HEURISTICS:
            raise ValueError(f"Unknown feature category: {category!r}")
        guess = _CATEGORY_HEURISTICS[category]
        return [
            r for r in self._records.values()
            if (r.category == category if r.category else guess(r))
        ]

    def css_features(self) -> List[FeatureRecord]:
        return self.by_category("css")

    def javascript_features(self) -> List[FeatureRecord]:
        return self.by_category("javascript")

    def html_features(self) -> List[FeatureRecord]:
        return self.by_category("html")

    def web_api_features(self) -> List[FeatureRecord]:
        return self.by_category("webApi")


def _looks_css(r: FeatureRecord) -> bool:
    return r.id.startswith("css-") or "css" in r.name.lower()


def _looks_javascript(r: FeatureRecord) -> bool:
    return "javascript" in r.id or "ecmascript" in r.id or "javascript" in r.name.lower()


def _looks_html(r: FeatureRecord) -> bool:
    return r.id.startswith("html-") or "element" in r.id


def _looks_web_api(r: FeatureRecord) -> bool:
    return "api" in r.id or "api" in r.name.lower()


_CATEGORY_HEURISTICS = {
    "css": _looks_css,
    "javascript": _looks_javascript,
    "html": _looks_html,
    "webApi": _looks_web_api,
}

FEATURE_CATEGORIES = tuple(_CATEGORY_HEURISTICS)
