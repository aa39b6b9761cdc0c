"""
Main linter class that wires the registry, resolver and rule sets together.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from .diagnostic import Diagnostic, Location, ScanSummary
from .engine import DiagnosticEngine, RuleContext
from .errors import NotReadyError, RegistryLoadError
from .features import FeatureRegistry
from .loader import BundledFeatureLoader
from .resolver import FeatureStatus, StatusResolver
from .rule_base import BaselineRule
from .rules import CSSBaselineRule, HTMLBaselineRule, JavaScriptBaselineRule

logger = logging.getLogger(__name__)

DEFAULT_LOAD_TIMEOUT = 10.0


class FileType(Enum):
    """Source categories with a dedicated rule set."""
    CSS = "css"
    JAVASCRIPT = "javascript"
    HTML = "html"
    GENERIC = "generic"

    @classmethod
    def from_string(cls, value: str) -> "FileType":
        """Unrecognized file types map to GENERIC."""
        return _FILE_TYPE_ALIASES.get((value or "").strip().lower().lstrip("."), cls.GENERIC)


_FILE_TYPE_ALIASES = {
    "css": FileType.CSS,
    "scss": FileType.CSS,
    "less": FileType.CSS,
    "js": FileType.JAVASCRIPT,
    "jsx": FileType.JAVASCRIPT,
    "mjs": FileType.JAVASCRIPT,
    "cjs": FileType.JAVASCRIPT,
    "javascript": FileType.JAVASCRIPT,
    "ts": FileType.JAVASCRIPT,
    "tsx": FileType.JAVASCRIPT,
    "typescript": FileType.JAVASCRIPT,
    "html": FileType.HTML,
    "htm": FileType.HTML,
}


class LinterState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass(frozen=True)
class LintResult:
    """Outcome of linting one snippet."""
    file_type: str
    diagnostics: Tuple[Diagnostic, ...]
    summary: ScanSummary
    timestamp: datetime
    baseline_target: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_type": self.file_type,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "summary": self.summary.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "baseline_target": self.baseline_target,
        }


class BaselineLinter:
    """Single entry point: ``await initialize()`` once, then ``lint()``.

    ``initialize()`` is idempotent and single-flight: callers arriving while a
    load is in flight await that same load.
    """

    def __init__(
        self,
        target_baseline: str = "2024",
        options: Optional[Dict[str, Any]] = None,
        loader=None,
        load_timeout: Optional[float] = DEFAULT_LOAD_TIMEOUT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        options = options or {}
        self.context = RuleContext(
            target_baseline=str(target_baseline),
            enable_quick_fixes=options.get("enable_quick_fixes", True),
            framework=options.get("framework", "generic"),
        )
        self.loader = loader or BundledFeatureLoader()
        self.load_timeout = load_timeout
        self.clock = clock
        self.resolver = StatusResolver()
        self.state = LinterState.UNINITIALIZED
        self._pending: Optional[asyncio.Future] = None
        self.rules: Dict[FileType, BaselineRule] = {
            FileType.CSS: CSSBaselineRule(),
            FileType.JAVASCRIPT: JavaScriptBaselineRule(),
            FileType.HTML: HTMLBaselineRule(),
            FileType.GENERIC: BaselineRule(),
        }

    @property
    def target_baseline(self) -> str:
        return self.context.target_baseline

    @property
    def registry(self) -> FeatureRegistry:
        return self.resolver.registry

    @property
    def ready(self) -> bool:
        return self.state is LinterState.READY

    async def initialize(self) -> bool:
        if self.state is LinterState.READY:
            return True
        if self._pending is None:
            self.state = LinterState.INITIALIZING
            self._pending = asyncio.ensure_future(self._load())
        pending = self._pending
        try:
            await pending
        finally:
            if self._pending is pending and pending.done():
                self._pending = None
        return True

    async def _load(self) -> None:
        started = time.monotonic()
        try:
            if self.load_timeout:
                records = await asyncio.wait_for(self.loader.load(), timeout=self.load_timeout)
            else:
                records = await self.loader.load()
            registry = FeatureRegistry()
            registry.register_all(records)
            registry.seal()
        except asyncio.TimeoutError as e:
            self.state = LinterState.UNINITIALIZED
            logger.error("Feature registry load timed out after %.1fs", self.load_timeout)
            raise RegistryLoadError(f"Feature registry load timed out after {self.load_timeout}s") from e
        except Exception:
            self.state = LinterState.UNINITIALIZED
            logger.exception("Feature registry load failed")
            raise
        self.resolver.registry = registry
        self.resolver.stats.api_calls += getattr(self.loader, "api_calls", 0)
        self.state = LinterState.READY
        logger.info(
            "Loaded %d features with %s in %.3fs",
            len(registry), type(self.loader).__name__, time.monotonic() - started,
        )

    def _require_ready(self) -> None:
        if self.state is not LinterState.READY:
            raise NotReadyError(f"Linter not initialized (state: {self.state.value})")

    def rule_for(self, file_type: str) -> BaselineRule:
        return self.rules[FileType.from_string(file_type)]

    def new_engine(self, context: Optional[RuleContext] = None) -> DiagnosticEngine:
        """A fresh diagnostic engine bound to this linter's resolver."""
        return DiagnosticEngine(context or self.context, self.resolver, clock=self.clock)

    def lint(
        self,
        code: str,
        file_type: str,
        context: Optional[Dict[str, Any]] = None,
        file: Optional[str] = None,
    ) -> LintResult:
        """Lint one snippet. Each call gets its own diagnostic engine."""
        self._require_ready()
        rule_context = self._context_with(context)
        engine = self.new_engine(rule_context)
        self.rule_for(file_type).check(code, engine, file=file)
        return LintResult(
            file_type=file_type,
            diagnostics=engine.get_diagnostics(),
            summary=engine.get_summary(),
            timestamp=(self.clock or _utcnow)(),
            baseline_target=rule_context.target_baseline,
        )

    def check_feature(
        self,
        identifier: str,
        location: Optional[Location] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Optional[Diagnostic]:
        """Classify a single identifier extracted by the caller."""
        self._require_ready()
        engine = self.new_engine(self._context_with(context))
        return engine.check_feature_usage(identifier, location or Location(category=FileType.GENERIC.value))

    def get_feature_status(self, identifier: str) -> FeatureStatus:
        self._require_ready()
        return self.resolver.resolve(identifier)

    def get_stats(self) -> Dict[str, int]:
        return self.resolver.get_stats()

    def _context_with(self, overrides: Optional[Dict[str, Any]]) -> RuleContext:
        if not overrides:
            return self.context
        allowed = {"target_baseline", "enable_quick_fixes", "framework"}
        changes = {k: v for k, v in overrides.items() if k in allowed and v is not None}
        if "target_baseline" in changes:
            changes["target_baseline"] = str(changes["target_baseline"])
        return replace(self.context, **changes)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def create_linter(target_baseline: str = "2024", options: Optional[Dict[str, Any]] = None, **kwargs) -> BaselineLinter:
    """Build and initialize a linter."""
    linter = BaselineLinter(target_baseline, options, **kwargs)
    await linter.initialize()
    return linter


async def quick_lint(code: str, file_type: str, target_baseline: str = "2024") -> LintResult:
    linter = await create_linter(target_baseline)
    return linter.lint(code, file_type)
