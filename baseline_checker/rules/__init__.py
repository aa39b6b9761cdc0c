"""
Rule sets for Baseline compatibility checks, one per source category.
"""

from .css_rule import CSSBaselineRule
from .html_rule import HTMLBaselineRule
from .javascript_rule import JavaScriptBaselineRule

__all__ = [
    'CSSBaselineRule',
    'HTMLBaselineRule',
    'JavaScriptBaselineRule',
]
