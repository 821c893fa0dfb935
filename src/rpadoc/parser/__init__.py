"""Parser modules for UiPath project analysis."""

from rpadoc.parser.discovery import XamlDiscovery
from rpadoc.parser.extractor import (
    DEFAULT_ROOT_SHAPES,
    MetadataExtractor,
    RootMatch,
    RootShape,
    find_workflow_root,
    format_default_value_key,
    lookup_default_value,
)
from rpadoc.parser.project import ProjectParser
from rpadoc.parser.type_token import parse_argument_type
from rpadoc.parser.xaml import XamlDocument, load_document, parse_content

__all__ = [
    "XamlDiscovery",
    "ProjectParser",
    "MetadataExtractor",
    "RootShape",
    "RootMatch",
    "DEFAULT_ROOT_SHAPES",
    "find_workflow_root",
    "format_default_value_key",
    "lookup_default_value",
    "parse_argument_type",
    "XamlDocument",
    "load_document",
    "parse_content",
]
