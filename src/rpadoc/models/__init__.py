"""Data models for workflow metadata and UiPath projects."""

from rpadoc.models.metadata import ArgumentDirection, WorkflowArgument, WorkflowMetadata
from rpadoc.models.project import DesignOptions, LibraryOptions, UiPathProject

__all__ = [
    "ArgumentDirection",
    "WorkflowArgument",
    "WorkflowMetadata",
    "UiPathProject",
    "DesignOptions",
    "LibraryOptions",
]
