"""
HTML-specific Baseline checks.
"""

import re
from typing import List, Optional

from ..diagnostic import Diagnostic, Location
from ..engine import DiagnosticEngine
from ..rule_base import BaselineRule
from ..utils import blank_html_comments, line_and_column

_ATTRIBUTES = r"""(?:\s+[^\s"'<>/=]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'<>]+))?)*?"""


# Attribute names must sit between attributes, never inside a quoted value.
def _attribute(name: str, tail: str = r"(?=[\s=>/])"):
    return re.compile(rf"<[a-z][\w-]*{_ATTRIBUTES}\s+({name}){tail}", re.IGNORECASE)


HTML_PATTERNS = (
    (re.compile(r"<dialog(?![\w-])", re.IGNORECASE), "dialog", "html-element"),
    (re.compile(r"<search(?![\w-])", re.IGNORECASE), "search", "html-element"),
    (_attribute("popover"), "popover", "html-attribute"),
    (_attribute("inert"), "inert", "html-attribute"),
    (_attribute("loading", r"""\s*=\s*["']?lazy\b"""), "loading-lazy", "html-attribute"),
)


class HTMLBaselineRule(BaselineRule):
    """Checks HTML markup for elements and attributes."""

    category = "html"

    def _run_checks(self, code: str, engine: DiagnosticEngine, file: Optional[str]) -> List[Diagnostic]:
        """Run HTML-specific checks over the whole document (tags may span lines)."""
        source = blank_html_comments(code)
        diagnostics = []
        for pattern, feature_id, kind in HTML_PATTERNS:
            for match in pattern.finditer(source):
                start = match.start(1) if match.groups() else match.start()
                line, col = line_and_column(source, start)
                location = Location(
                    category=self.category, file=file, line=line, column=col,
                    kind=kind, value=match.group(0).strip(),
                )
                diagnostics.extend(self.check_feature(feature_id, engine, location))
        return diagnostics
