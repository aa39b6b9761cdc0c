"""
CSS-specific Baseline checks.
"""

import re
from dataclasses import replace
from typing import List, Optional

from ..diagnostic import Diagnostic, Location
from ..engine import DiagnosticEngine
from ..rule_base import BaselineRule
from ..utils import blank_css_comments, line_and_column

# Property names worth a registry lookup.
CSS_PROPERTIES = (
    "grid", "subgrid", "gap", "aspect-ratio", "container", "container-type",
    "container-name", "view-transition-name", "color-scheme", "anchor-name",
    "text-wrap",
)
# Function-call patterns searched for in declaration values.
CSS_FUNCTIONS = ("min()", "max()", "clamp()", "var()", "color-mix()")
# Keyword values that are features on their own.
CSS_VALUE_KEYWORDS = ("subgrid",)
# Selector and at-rule patterns searched for in the whole stylesheet.
CSS_SELECTOR_PATTERNS = (
    (re.compile(r":has\("), "css-has"),
    (re.compile(r"@container\b"), "css-container-queries"),
    (re.compile(r"@layer\b"), "css-cascade-layers"),
    (re.compile(r"@starting-style\b"), "css-starting-style"),
)

_DECLARATION = re.compile(r"([a-z-]+)\s*:\s*([^;{}]*)")


def function_feature_id(func: str) -> str:
    """'clamp()' -> 'clamp-function'."""
    return func.replace("()", "-function")


class CSSBaselineRule(BaselineRule):
    """Checks CSS declarations, functions and selectors."""

    category = "css"

    def __init__(self, properties=CSS_PROPERTIES, functions=CSS_FUNCTIONS):
        self.properties = tuple(properties)
        self.functions = tuple(functions)

    def _run_checks(self, code: str, engine: DiagnosticEngine, file: Optional[str]) -> List[Diagnostic]:
        """Run CSS-specific checks."""
        source = blank_css_comments(code)
        diagnostics = []
        diagnostics.extend(self._check_declarations(source, engine, file))
        diagnostics.extend(self._check_selectors(source, engine, file))
        return diagnostics

    def _check_declarations(self, source: str, engine: DiagnosticEngine, file: Optional[str]) -> List[Diagnostic]:
        diagnostics = []
        for match in _DECLARATION.finditer(source):
            line, col = line_and_column(source, match.start())
            prop = match.group(1).strip()
            value = match.group(2).strip()
            location = Location(category=self.category, file=file, line=line, column=col, value=value)
            diagnostics.extend(self.check_declaration(prop, value, engine, location))
        return diagnostics

    def check_declaration(
        self,
        prop: str,
        value: str,
        engine: DiagnosticEngine,
        location: Optional[Location] = None,
    ) -> List[Diagnostic]:
        """Check one ``property: value`` pair."""
        base = location or Location(category=self.category, value=value)
        diagnostics = []
        if prop in self.properties:
            diagnostics.extend(self.check_feature(prop, engine, replace(base, kind="css-property")))
        for func in self.functions:
            if func.replace("()", "(") in value:
                diagnostics.extend(
                    self.check_feature(function_feature_id(func), engine, replace(base, kind="css-function"))
                )
        for keyword in CSS_VALUE_KEYWORDS:
            if re.search(rf"(?<![\w-]){re.escape(keyword)}(?![\w-])", value):
                diagnostics.extend(self.check_feature(keyword, engine, replace(base, kind="css-value")))
        return diagnostics

    def _check_selectors(self, source: str, engine: DiagnosticEngine, file: Optional[str]) -> List[Diagnostic]:
        diagnostics = []
        for pattern, feature_id in CSS_SELECTOR_PATTERNS:
            for match in pattern.finditer(source):
                line, col = line_and_column(source, match.start())
                location = Location(
                    category=self.category, file=file, line=line, column=col,
                    kind="css-selector", value=match.group(0),
                )
                diagnostics.extend(self.check_feature(feature_id, engine, location))
        return diagnostics

