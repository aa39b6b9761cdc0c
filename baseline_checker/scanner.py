"""
Project scanner: walks source files, lints them and aggregates compliance.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .aggregator import ComplianceReport, build_report
from .diagnostic import Diagnostic
from .errors import ScanInProgressError
from .linter import BaselineLinter, FileType, LintResult
from .utils import detect_file_type

logger = logging.getLogger(__name__)

# Source file extensions to include
SOURCE_EXTENSIONS = {
    '.css', '.scss', '.less',
    '.js', '.jsx', '.mjs', '.cjs', '.ts', '.tsx',
    '.html', '.htm',
}

# Directories to exclude
EXCLUDE_DIRS = {
    '.git', '.svn', '.hg', '__pycache__', 'node_modules',
    '.venv', 'venv', 'env', 'dist', 'build', 'coverage',
    '.next', '.nuxt', '.cache', '.idea', '.vscode',
}


def collect_source_files(source: Union[str, Path]) -> List[Path]:
    """Source files under a folder (recursively), or the file itself."""
    path = Path(source)
    if path.is_file():
        return [path.resolve()] if path.suffix.lower() in SOURCE_EXTENSIONS else []
    if not path.is_dir():
        raise FileNotFoundError(f"No such file or folder: {path}")

    root = path.resolve()
    source_files: List[Path] = []
    for file_path in root.rglob("*"):
        if not file_path.is_file():
            continue
        if any(excluded in file_path.relative_to(root).parts for excluded in EXCLUDE_DIRS):
            continue
        if file_path.suffix.lower() in SOURCE_EXTENSIONS:
            source_files.append(file_path.resolve())
    return sorted(source_files)


@dataclass
class ProjectScanResult:
    files: Dict[str, LintResult] = field(default_factory=dict)
    totals: Dict[str, int] = field(default_factory=dict)
    report: Optional[ComplianceReport] = None

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [d for result in self.files.values() for d in result.diagnostics]


class ProjectScanner:
    """Drives the linter over files. One scan at a time per instance."""

    def __init__(self, linter: BaselineLinter):
        self.linter = linter
        self._scanning = False

    @property
    def is_scanning(self) -> bool:
        return self._scanning

    async def scan(self, sources: Iterable[Union[str, Path]]) -> ProjectScanResult:
        if self._scanning:
            raise ScanInProgressError("Scan already in progress")
        self._scanning = True
        try:
            await self.linter.initialize()
            return self._scan_files(self._collect(sources))
        finally:
            self._scanning = False

    def _collect(self, sources: Iterable[Union[str, Path]]) -> List[Path]:
        files: List[Path] = []
        for source in sources:
            for path in collect_source_files(source):
                if path not in files:
                    files.append(path)
        return files

    def _scan_files(self, files: List[Path]) -> ProjectScanResult:
        result = ProjectScanResult()
        for file_path in files:
            file_type = detect_file_type(file_path)
            try:
                code = file_path.read_text(encoding="utf-8", errors="ignore")
            except OSError as e:
                logger.warning("Could not read %s: %s", file_path, e)
                continue
            category = FileType.from_string(file_type).value
            result.totals[category] = result.totals.get(category, 0) + 1
            result.files[str(file_path)] = self.linter.lint(code, file_type, file=str(file_path))
        result.report = build_report(result.diagnostics, result.totals)
        logger.info(
            "Scanned %d file(s): %d issue(s), compliance %.1f%%",
            len(files), result.report.total_issues, result.report.compliance,
        )
        return result
