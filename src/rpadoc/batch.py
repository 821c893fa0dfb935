"""Batch extraction of workflow metadata across many files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from rpadoc.errors import RpaDocError
from rpadoc.models.metadata import WorkflowMetadata
from rpadoc.parser.extractor import MetadataExtractor
from rpadoc.utils.paths import relative_posix_path

logger = logging.getLogger(__name__)


@dataclass
class ExtractionFailure:
    """A workflow file whose metadata could not be extracted."""
    file_path: str
    error_type: str
    message: str

    @classmethod
    def from_exception(cls, file_path: Path, error: Exception) -> "ExtractionFailure":
        return cls(file_path=str(file_path), error_type=type(error).__name__, message=str(error))


@dataclass
class BatchReport:
    """Outcome of extracting metadata from a set of workflow files."""
    workflows: List[WorkflowMetadata] = field(default_factory=list)
    failures: List[ExtractionFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.workflows) + len(self.failures)

    @property
    def success_rate(self) -> float:
        """Share of files extracted successfully."""
        if self.total == 0:
            return 1.0
        return len(self.workflows) / self.total


def extract_workflows(
    files: Iterable[Path],
    extractor: Optional[MetadataExtractor] = None,
    project_root: Optional[Path] = None,
    fail_fast: bool = False,
) -> BatchReport:
    """Extract metadata from each file.

    Each file is independent: a file that cannot be read or is not a valid
    workflow is recorded as a failure and the batch continues, unless
    ``fail_fast`` is set, in which case the error is re-raised.

    Args:
        files: Workflow files to process
        extractor: Extractor to use (default: MetadataExtractor())
        project_root: When given, each result gets its project-relative path
        fail_fast: Stop at the first failure

    Returns:
        BatchReport with the extracted metadata and the failures
    """
    extractor = extractor or MetadataExtractor()
    report = BatchReport()

    for file_path in files:
        file_path = Path(file_path)
        logger.debug(f"Extracting metadata from {file_path}")

        try:
            metadata = extractor.get_metadata(file_path)
        except (RpaDocError, OSError) as e:
            if fail_fast:
                raise
            logger.warning(f"Skipping {file_path}: {e}")
            report.failures.append(ExtractionFailure.from_exception(file_path, e))
            continue

        if project_root is not None:
            metadata.relative_path = relative_posix_path(file_path, Path(project_root))

        report.workflows.append(metadata)

    logger.info(
        f"Extracted {len(report.workflows)} of {report.total} workflows "
        f"({len(report.failures)} failed)"
    )
    return report
