"""Secure XAML loading that keeps the document's namespace declarations."""

import io
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, iterparse

from rpadoc.constants import STANDARD_NAMESPACES
from rpadoc.errors import MalformedDocumentError


def qualified_name(namespace: str, name: str) -> str:
    """Build an ElementTree ``{namespace}name`` key."""
    return f"{{{namespace}}}{name}" if namespace else name


@dataclass
class XamlDocument:
    """Parsed XAML document.

    ElementTree drops ``xmlns`` declarations from the tree, so the prefix
    bindings seen while parsing are kept alongside the root element.
    """
    root: ET.Element
    namespaces: Dict[str, str] = field(default_factory=dict)
    file_path: str = "<string>"

    def namespace(self, prefix: str) -> str:
        """Resolve a prefix using the document's declarations, then the standard bindings."""
        return self.namespaces.get(prefix) or STANDARD_NAMESPACES.get(prefix, '')


def parse_bytes(data: bytes, file_path: str = "<string>") -> XamlDocument:
    """Parse raw XAML bytes.

    Raises:
        MalformedDocumentError: If the content is not well-formed XML
    """
    namespaces: Dict[str, str] = {}
    root: Optional[ET.Element] = None

    try:
        for event, item in iterparse(io.BytesIO(data), events=("start", "start-ns")):
            if event == "start-ns":
                prefix, uri = item
                # Outermost declaration wins for the document-level lookups
                namespaces.setdefault(prefix, uri)
            elif root is None:
                root = item
    except ParseError as e:
        raise MalformedDocumentError(f"XML parse error: {e}", file_path) from e
    except DefusedXmlException as e:
        raise MalformedDocumentError(f"Forbidden XML construct: {e}", file_path) from e

    if root is None:
        raise MalformedDocumentError("Document has no root element", file_path)

    return XamlDocument(root=root, namespaces=namespaces, file_path=file_path)


def parse_content(xml_content: str, file_path: str = "<string>") -> XamlDocument:
    """Parse XAML content from a string."""
    return parse_bytes(xml_content.encode("utf-8"), file_path)


def load_document(file_path: Path | str) -> XamlDocument:
    """Read and parse a XAML file.

    Raises:
        OSError: If the file cannot be read
        MalformedDocumentError: If the file is not well-formed XML
    """
    path = Path(file_path)
    return parse_bytes(path.read_bytes(), str(file_path))
