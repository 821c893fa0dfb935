"""rpadoc - Documentation generator for UiPath workflow libraries.

rpadoc reads the XAML workflows of a UiPath project, extracts each workflow's
name, description and typed arguments, and writes them out as Markdown (or
JSON) documentation.
"""

__version__ = "1.1.0"
__author__ = "rpadoc contributors"
__description__ = "Generate documentation for UiPath projects"

from rpadoc.config import RpaDocConfig
from rpadoc.errors import (
    InvalidTypeTokenError,
    MalformedDocumentError,
    RpaDocError,
    UnsetFieldError,
    UsageError,
)
from rpadoc.models.metadata import ArgumentDirection, WorkflowArgument, WorkflowMetadata
from rpadoc.parser.extractor import MetadataExtractor

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "RpaDocConfig",
    "MetadataExtractor",
    "WorkflowMetadata",
    "WorkflowArgument",
    "ArgumentDirection",
    "RpaDocError",
    "UsageError",
    "MalformedDocumentError",
    "InvalidTypeTokenError",
    "UnsetFieldError",
]
