"""
Utility functions for the Baseline compatibility checker.
"""

import re
from pathlib import Path
from typing import Tuple

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)


def detect_file_type(file_path: Path) -> str:
    """Detect the source category from a file extension."""
    ext = Path(file_path).suffix.lower()
    type_map = {
        '.css': 'css',
        '.scss': 'css',
        '.less': 'css',
        '.js': 'javascript',
        '.jsx': 'javascript',
        '.mjs': 'javascript',
        '.cjs': 'javascript',
        '.ts': 'typescript',
        '.tsx': 'typescript',
        '.html': 'html',
        '.htm': 'html',
    }
    return type_map.get(ext, 'unknown')


def is_comment(line: str) -> bool:
    """Check if line is a comment."""
    stripped = line.strip()
    comment_prefixes = ['//', '/*', '*']
    return any(stripped.startswith(prefix) for prefix in comment_prefixes)


def _blank(match) -> str:
    # keep newlines so offsets still map to the same line numbers
    return re.sub(r"[^\n]", " ", match.group(0))


def blank_css_comments(code: str) -> str:
    """Replace /* ... */ comments with spaces, preserving offsets."""
    return _CSS_COMMENT.sub(_blank, code)


def blank_html_comments(code: str) -> str:
    """Replace <!-- ... --> comments with spaces, preserving offsets."""
    return _HTML_COMMENT.sub(_blank, code)


def line_and_column(code: str, offset: int) -> Tuple[int, int]:
    """1-based (line, column) of a character offset."""
    line = code.count("\n", 0, offset) + 1
    line_start = code.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1
