"""
Feature loaders: bundled JSON data and the webstatus.dev API.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .errors import RegistryLoadError
from .features import BaselineStatus, FeatureRecord

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
BUNDLED_FEATURES = DATA_DIR / "features.json"
WEBSTATUS_API_URL = "https://api.webstatus.dev/v1"


class BundledFeatureLoader:
    """Loads feature records shipped with the package (or any JSON file)."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else BUNDLED_FEATURES
        self.api_calls = 0

    async def load(self) -> List[FeatureRecord]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise RegistryLoadError(f"Could not read feature data from {self.path}: {e}") from e
        if not isinstance(raw, list):
            raise RegistryLoadError(f"Feature data in {self.path} must be a JSON list")
        try:
            return [FeatureRecord.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise RegistryLoadError(f"Invalid feature record in {self.path}: {e}") from e


class StaticFeatureLoader:
    """Serves a fixed list of records. Useful for embedding and tests."""

    def __init__(self, records):
        self.records = list(records)
        self.api_calls = 0

    async def load(self) -> List[FeatureRecord]:
        return list(self.records)


def _record_from_webstatus(item: Mapping[str, Any]) -> Optional[FeatureRecord]:
    """Map one webstatus.dev feature to a record. None when it has no id."""
    feature_id = item.get("feature_id") or item.get("id")
    if not feature_id:
        return None
    baseline = item.get("baseline") or {}
    try:
        status = BaselineStatus.parse(baseline.get("status"))
    except ValueError:
        status = BaselineStatus.NOT_BASELINE
    if status is BaselineStatus.UNKNOWN:
        status = BaselineStatus.NOT_BASELINE
    return FeatureRecord(
        id=str(feature_id),
        name=str(item.get("name") or feature_id),
        status=status,
        available_since=baseline.get("high_date") or baseline.get("low_date"),
        mdn_url=item.get("mdn_url"),
    )


class WebStatusFeatureLoader:
    """Pages through ``GET {base_url}/features`` and maps the results."""

    def __init__(
        self,
        base_url: str = WEBSTATUS_API_URL,
        query: Optional[str] = None,
        page_size: int = 100,
        max_pages: int = 50,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.query = query
        self.page_size = page_size
        self.max_pages = max_pages
        self.transport = transport
        self.api_calls = 0

    async def load(self) -> List[FeatureRecord]:
        records: List[FeatureRecord] = []
        seen = set()
        page_token: Optional[str] = None
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
            for _ in range(self.max_pages):
                params: Dict[str, Any] = {"page_size": self.page_size}
                if self.query:
                    params["q"] = self.query
                if page_token:
                    params["page_token"] = page_token
                self.api_calls += 1
                try:
                    response = await client.get("/features", params=params)
                    response.raise_for_status()
                    payload = response.json()
                except (httpx.HTTPError, ValueError) as e:
                    raise RegistryLoadError(f"webstatus.dev request failed: {e}") from e
                for item in payload.get("data") or []:
                    record = _record_from_webstatus(item)
                    # the API can repeat a feature across pages
                    if record is None or record.id.lower() in seen:
                        continue
                    seen.add(record.id.lower())
                    records.append(record)
                page_token = (payload.get("metadata") or {}).get("next_page_token")
                if not page_token:
                    break
            else:
                logger.warning("Stopped paging webstatus.dev after %d pages", self.max_pages)
        logger.info("Fetched %d features from %s in %d request(s)", len(records), self.base_url, self.api_calls)
        return records
