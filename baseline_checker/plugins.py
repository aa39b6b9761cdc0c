"""
Build-tool and editor hooks around the linter.

``BaselineTransformHook`` follows the ``transform(code, id)`` shape used by
bundler plugins: it returns ``None`` when there is nothing to report so the
host passes the module through unchanged. ``BuildAssetCheck`` checks a set of
emitted assets in one go.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .diagnostic import Diagnostic
from .linter import BaselineLinter, FileType
from .utils import detect_file_type

logger = logging.getLogger(__name__)

SCRIPT_ID_PATTERN = re.compile(r"\.(js|ts|jsx|tsx)$")


@dataclass
class TransformResult:
    code: str
    warnings: List[Dict[str, Any]] = field(default_factory=list)


def _strip_query(module_id: str) -> str:
    # bundlers append ?query / #hash to module ids
    return re.split(r"[?#]", module_id, maxsplit=1)[0]


def _warning(diagnostic: Diagnostic) -> Dict[str, Any]:
    loc = diagnostic.location
    return {
        "text": diagnostic.message,
        "loc": {"file": loc.file, "line": loc.line, "column": loc.column},
    }


class BaselineTransformHook:
    """Annotates modules that use features outside the Baseline target."""

    name = "baseline-transform"

    def __init__(self, linter: BaselineLinter, include: Optional[re.Pattern] = None):
        self.linter = linter
        self.include = include or SCRIPT_ID_PATTERN

    def transform(self, code: str, module_id: str) -> Optional[TransformResult]:
        path = _strip_query(module_id)
        if not self.include.search(path):
            return None
        file_type = detect_file_type(path)
        result = self.linter.lint(code, file_type, file=path)
        if not result.diagnostics:
            return None
        messages = "\n".join(f"Baseline Warning in {path}: {d.message}" for d in result.diagnostics)
        if FileType.from_string(file_type) is FileType.CSS:
            banner = "/* " + messages.replace("*/", "* /") + " */\n"
        else:
            banner = f"console.warn({json.dumps(messages)});\n"
        return TransformResult(
            code=banner + code,
            warnings=[_warning(d) for d in result.diagnostics],
        )


@dataclass
class BuildReport:
    issues: List[Diagnostic] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors


class BuildAssetCheck:
    """Lints emitted assets; optionally fails the build when anything is found."""

    def __init__(self, linter: BaselineLinter, fail_on_error: bool = False, include: Optional[re.Pattern] = None):
        self.linter = linter
        self.fail_on_error = fail_on_error
        self.include = include or re.compile(r"\.(js|mjs|css)$")

    def check_assets(self, assets: Mapping[str, str]) -> BuildReport:
        report = BuildReport()
        for filename, source in assets.items():
            if not self.include.search(filename):
                continue
            result = self.linter.lint(source, detect_file_type(filename), file=filename)
            report.issues.extend(result.diagnostics)
        if report.issues:
            message = f"Baseline: Found {len(report.issues)} compatibility issues."
            logger.warning(message)
            report.warnings.append(message)
            if self.fail_on_error:
                report.errors.append(message)
        return report
