"""XAML workflow discovery within a UiPath project directory."""

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from rpadoc.constants import TEMPORARY_FILE_PREFIX, XAML_EXTENSION
from rpadoc.utils.paths import normalize_path, relative_posix_path

logger = logging.getLogger(__name__)


class XamlDiscovery:
    """Finds the XAML workflows of a project."""

    def __init__(
        self,
        project_root: Path,
        exclude_patterns: list[str] | None = None,
        private_workflows: list[str] | None = None,
    ):
        """Initialize XAML discovery.

        Args:
            project_root: Root directory of UiPath project
            exclude_patterns: Glob patterns (POSIX, relative to the root) to exclude
            private_workflows: Workflow paths the project marks as private
        """
        self.project_root = Path(project_root).resolve()
        self.exclude_patterns = exclude_patterns or []
        self.private_workflows = [normalize_path(p) for p in (private_workflows or []) if p]

    def find_xaml_files(self, recursive: bool = False, public_only: bool = False) -> list[Path]:
        """Return the workflow files of the project, sorted by path.

        Args:
            recursive: Also search sub-directories
            public_only: Leave out workflows marked private

        Returns:
            List of XAML file paths
        """
        if not self.project_root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {self.project_root}")

        candidates = self._walk() if recursive else self._top_level()
        files = []

        for file_path in candidates:
            if not self._is_workflow_file(file_path):
                continue

            relative = self.relative_path(file_path)
            if self._is_excluded(relative):
                logger.debug(f"Excluded by pattern: {relative}")
                continue
            if public_only and self._is_private(relative):
                logger.debug(f"Skipping private workflow: {relative}")
                continue

            files.append(file_path)

        files.sort(key=lambda p: self.relative_path(p).lower())
        logger.info(f"Found {len(files)} workflow files in {self.project_root}")
        return files

    def relative_path(self, file_path: Path) -> str:
        """POSIX path of a file relative to the project root."""
        return relative_posix_path(file_path, self.project_root)

    def _top_level(self) -> Iterator[Path]:
        for entry in self.project_root.iterdir():
            if entry.is_file():
                yield entry

    def _walk(self) -> Iterator[Path]:
        for root, dirs, files in os.walk(self.project_root):
            dirs.sort()
            for file in files:
                yield Path(root) / file

    @staticmethod
    def _is_workflow_file(file_path: Path) -> bool:
        return (
            file_path.suffix.lower() == XAML_EXTENSION
            and not file_path.name.startswith(TEMPORARY_FILE_PREFIX)
        )

    def _is_excluded(self, relative_path: str) -> bool:
        for pattern in self.exclude_patterns:
            if fnmatch.fnmatch(relative_path, pattern):
                return True
        return False

    def _is_private(self, relative_path: str) -> bool:
        return any(
            relative_path == private or relative_path.endswith("/" + private)
            for private in self.private_workflows
        )
