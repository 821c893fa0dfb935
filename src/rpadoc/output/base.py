"""Base classes for output generators."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from slugify import slugify

from rpadoc.errors import UsageError
from rpadoc.models.metadata import WorkflowMetadata
from rpadoc.utils.paths import strip_xaml_extension

logger = logging.getLogger(__name__)

# Characters replaced when turning a workflow name or path into a file name
DISALLOWED_NAME_CHARS = r"[^-_a-zA-Z0-9]+"


def check_output_directory(output_dir: Path, require_empty: bool = True) -> None:
    """Check that documentation can be written to a directory.

    Hidden entries such as ``.gitignore`` do not count against emptiness.

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        FileExistsError: If require_empty is set and the directory has content
    """
    if not output_dir.exists():
        raise FileNotFoundError(f"The output path '{output_dir}' does not exist")
    if not output_dir.is_dir():
        raise NotADirectoryError(f"The output path '{output_dir}' is not a directory")

    if require_empty:
        visible = [entry for entry in output_dir.iterdir() if not entry.name.startswith(".")]
        if visible:
            raise FileExistsError(f"The output path '{output_dir}' is not an empty directory")


def output_name(metadata: WorkflowMetadata) -> str:
    """File name stem for a workflow's documentation.

    The project-relative path is used when known, with directory separators
    flattened to ``_`` so nested workflows with equal names do not collide;
    otherwise the workflow name is used.
    """
    if metadata.relative_path:
        base = strip_xaml_extension(metadata.relative_path).replace("/", "_")
    else:
        base = metadata.name

    return slugify(base, lowercase=False, regex_pattern=DISALLOWED_NAME_CHARS) or "workflow"


class OutputGenerator(ABC):
    """Base class for output generators."""

    def __init__(self, output_dir: Path, require_empty: bool = True):
        """Initialize output generator.

        Args:
            output_dir: Existing directory that receives one file per workflow
            require_empty: Refuse a directory that already has visible content
        """
        self.output_dir = Path(output_dir)
        check_output_directory(self.output_dir, require_empty)
        self._written: set[str] = set()

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension including the dot (e.g. '.md')."""
        pass

    @abstractmethod
    def render(self, metadata: WorkflowMetadata) -> str:
        """Serialize one workflow's metadata."""
        pass

    def output_path(self, metadata: WorkflowMetadata) -> Path:
        """Target path for a workflow, unique within this generator's run."""
        stem = output_name(metadata)
        candidate = stem
        counter = 2
        while candidate.lower() in self._written:
            candidate = f"{stem}-{counter}"
            counter += 1

        if candidate != stem:
            logger.warning(f"Output name '{stem}' already used, writing {candidate}{self.extension}")
        return self.output_dir / f"{candidate}{self.extension}"

    def write(self, metadata: WorkflowMetadata) -> Path:
        """Write one workflow's documentation and return the file path."""
        if not isinstance(metadata, WorkflowMetadata):
            raise UsageError("metadata parameter is required and must be a WorkflowMetadata object")

        path = self.output_path(metadata)
        path.write_text(self.render(metadata), encoding="utf-8")
        self._written.add(path.stem.lower())

        logger.debug(f"Wrote {path}")
        return path

    def write_all(self, workflows: Iterable[WorkflowMetadata]) -> List[Path]:
        return [self.write(metadata) for metadata in workflows]
