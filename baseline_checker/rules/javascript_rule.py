"""
JavaScript/TypeScript-specific Baseline checks.
"""

import re
from typing import List, Optional

from ..diagnostic import Diagnostic, Location
from ..engine import DiagnosticEngine
from ..rule_base import BaselineRule

JS_PATTERNS = (
    (re.compile(r"\.at\("), "array-at"),
    (re.compile(r"\bstructuredClone\("), "structured-clone"),
    (re.compile(r"\.findLast(?:Index)?\("), "array-findlast"),
    (re.compile(r"\bimport\.meta\b"), "import-meta"),
    (re.compile(r"\.flatMap\("), "array-flatmap"),
    (re.compile(r"\bnew\s+IntersectionObserver\b"), "intersection-observer"),
    (re.compile(r"\bnew\s+ResizeObserver\b"), "resize-observer"),
    (re.compile(r"\bdocument\.startViewTransition\("), "view-transitions"),
    (re.compile(r"\b(?:Object|Map)\.groupBy\("), "array-group"),
)


class JavaScriptBaselineRule(BaselineRule):
    """Checks JavaScript and TypeScript sources for Web API and language features."""

    category = "javascript"

    def _run_checks(self, code: str, engine: DiagnosticEngine, file: Optional[str]) -> List[Diagnostic]:
        """Run JavaScript-specific checks line by line, skipping comment lines."""
        diagnostics = []
        for i, line in enumerate(code.split("\n"), 1):
            if self._is_comment(line):
                continue
            for pattern, feature_id in JS_PATTERNS:
                for match in pattern.finditer(line):
                    location = Location(
                        category=self.category, file=file, line=i, column=match.start() + 1,
                        kind="js-api", value=line.strip(),
                    )
                    diagnostics.extend(self.check_feature(feature_id, engine, location))
        return diagnostics
