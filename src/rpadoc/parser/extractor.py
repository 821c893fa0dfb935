"""Extraction of workflow metadata from parsed XAML documents.

The extractor reads the workflow name and annotation from the workflow body
(the first ``Flowchart`` or ``Sequence`` under the outer ``Activity``), the
argument declarations from ``x:Members``, and argument default values from
``this:<Class>.<Argument>`` attributes on the outer ``Activity`` element.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from rpadoc.constants import (
    ACTIVITIES_NS,
    ACTIVITY_ELEMENT,
    ANNOTATION_ATTRIBUTE,
    CLASS_ATTRIBUTE,
    DEFAULT_ROOT_ELEMENTS,
    DEFAULT_VALUE_PREFIX,
    DISPLAY_NAME_ATTRIBUTE,
    MEMBERS_ELEMENT,
    PROPERTY_ELEMENT,
    PROPERTY_NAME_ATTRIBUTE,
    PROPERTY_TYPE_ATTRIBUTE,
    SAP2010_NS,
    XAML_NS,
)
from rpadoc.errors import InvalidTypeTokenError, MalformedDocumentError, UsageError
from rpadoc.models.metadata import WorkflowArgument, WorkflowMetadata, strip_list_brackets
from rpadoc.parser.type_token import parse_argument_type
from rpadoc.parser.xaml import XamlDocument, load_document, parse_content, qualified_name


@dataclass(frozen=True)
class RootShape:
    """A kind of element that can hold a workflow body."""
    name: str
    element: str
    namespace: str = ACTIVITIES_NS

    def match(self, document: XamlDocument) -> Optional[ET.Element]:
        """Return the first direct child of the outer element with this shape."""
        return document.root.find(qualified_name(self.namespace, self.element))


@dataclass(frozen=True)
class RootMatch:
    """Workflow body located in a document, with the shape that matched."""
    shape: RootShape
    element: ET.Element


DEFAULT_ROOT_SHAPES: Tuple[RootShape, ...] = tuple(
    RootShape(name.lower(), name) for name in DEFAULT_ROOT_ELEMENTS
)


def _coerce_shape(shape: Union[RootShape, str]) -> RootShape:
    if isinstance(shape, RootShape):
        return shape
    if not shape or not isinstance(shape, str):
        raise UsageError("root shapes must be RootShape instances or element names")
    return RootShape(shape.lower(), shape)


def find_workflow_root(
    document: XamlDocument,
    shapes: Sequence[RootShape] = DEFAULT_ROOT_SHAPES,
) -> Optional[RootMatch]:
    """Try each shape in order and return the first match, or None."""
    if document.root.tag != qualified_name(ACTIVITIES_NS, ACTIVITY_ELEMENT):
        return None

    for shape in shapes:
        element = shape.match(document)
        if element is not None:
            return RootMatch(shape=shape, element=element)
    return None


def format_default_value_key(class_name: str, argument_name: str) -> str:
    """Name of the attribute holding an argument's default value.

    >>> format_default_value_key("Main", "in_Config")
    'this:Main.in_Config'
    """
    return f"{DEFAULT_VALUE_PREFIX}:{class_name}.{argument_name}"


def _resolve_attribute_key(document: XamlDocument, prefixed_name: str) -> str:
    prefix, _, name = prefixed_name.partition(":")
    return qualified_name(document.namespace(prefix), name)


def lookup_default_value(
    document: XamlDocument,
    class_name: Optional[str],
    argument_name: str,
) -> Optional[str]:
    """Return the declared default value of an argument, or None if there is none.

    A namespace-qualified class (``x:Class="Acme.Main"``) is also tried with
    its short name, which is how Studio writes the attribute when ``this``
    is bound to the class namespace.
    """
    if not class_name:
        return None

    candidates = [class_name]
    short_name = class_name.rsplit(".", 1)[-1]
    if short_name != class_name:
        candidates.append(short_name)

    for candidate in candidates:
        key = _resolve_attribute_key(document, format_default_value_key(candidate, argument_name))
        value = document.root.get(key)
        if value is not None:
            return value
    return None


def _require_document(document: XamlDocument) -> None:
    if not isinstance(document, XamlDocument):
        raise UsageError("document parameter is required and must be a XamlDocument")


def _read_annotation(element: ET.Element) -> str:
    # ElementTree has already decoded the XML entities
    return element.get(qualified_name(SAP2010_NS, ANNOTATION_ATTRIBUTE)) or ""


class MetadataExtractor:
    """Extracts name, description and arguments from XAML workflows."""

    def __init__(self, root_shapes: Optional[Sequence[Union[RootShape, str]]] = None):
        """Initialize extractor.

        Args:
            root_shapes: Workflow body shapes to try, in priority order.
                Defaults to Flowchart, then Sequence.
        """
        shapes = DEFAULT_ROOT_SHAPES if root_shapes is None else root_shapes
        self.root_shapes: Tuple[RootShape, ...] = tuple(_coerce_shape(s) for s in shapes)
        if not self.root_shapes:
            raise UsageError("at least one root shape is required")

    def get_metadata(self, file_path: Union[str, Path]) -> WorkflowMetadata:
        """Read a XAML file and extract its metadata.

        Raises:
            UsageError: If file_path is missing
            OSError: If the file cannot be read
            MalformedDocumentError: If the file is not a recognisable workflow
        """
        if not isinstance(file_path, (str, Path)) or not str(file_path):
            raise UsageError("file_path parameter is required and must be a string or Path")

        return self.extract(load_document(file_path))

    def parse_content(self, xml_content: str, file_path: str = "<string>") -> WorkflowMetadata:
        """Extract metadata from XAML content held in a string."""
        if not isinstance(xml_content, str):
            raise UsageError("xml_content parameter must be a string")
        return self.extract(parse_content(xml_content, file_path))

    def extract(self, document: XamlDocument) -> WorkflowMetadata:
        """Populate a new WorkflowMetadata from a parsed document."""
        _require_document(document)

        metadata = WorkflowMetadata(document.file_path)
        metadata.name = self.get_workflow_name(document)
        metadata.description = self.get_workflow_annotation(document)
        metadata.extend_arguments(self.get_workflow_arguments(document))
        return metadata

    def find_workflow_root(self, document: XamlDocument) -> Optional[RootMatch]:
        _require_document(document)
        return find_workflow_root(document, self.root_shapes)

    def locate_workflow_root(self, document: XamlDocument) -> RootMatch:
        """Like find_workflow_root, but a document without a workflow body is an error."""
        match = self.find_workflow_root(document)
        if match is None:
            expected = ", ".join(shape.element for shape in self.root_shapes)
            raise MalformedDocumentError(
                f"No workflows recognised: expected one of {expected} inside {ACTIVITY_ELEMENT}",
                document.file_path,
            )
        return match

    def get_workflow_name(self, document: XamlDocument) -> str:
        match = self.locate_workflow_root(document)
        name = match.element.get(DISPLAY_NAME_ATTRIBUTE)
        if not name:
            raise MalformedDocumentError(
                f"{match.shape.element} has no {DISPLAY_NAME_ATTRIBUTE} attribute",
                document.file_path,
            )
        return name

    def get_workflow_annotation(self, document: XamlDocument) -> str:
        """Annotation of the workflow body, or an empty string if it has none."""
        match = self.locate_workflow_root(document)
        return _read_annotation(match.element)

    def get_class_name(self, document: XamlDocument) -> Optional[str]:
        """Value of x:Class on the outer element."""
        _require_document(document)
        return document.root.get(qualified_name(XAML_NS, CLASS_ATTRIBUTE))

    def get_argument_default_value(self, document: XamlDocument, argument_name: str) -> str:
        """Default value of an argument with enclosing brackets removed, or an empty string."""
        _require_document(document)
        if not argument_name or not isinstance(argument_name, str):
            raise UsageError("argument_name parameter is required and must be a string")

        value = lookup_default_value(document, self.get_class_name(document), argument_name)
        return strip_list_brackets(value) if value is not None else ""

    def get_workflow_arguments(self, document: XamlDocument) -> List[WorkflowArgument]:
        """Arguments declared in x:Members, in document order."""
        _require_document(document)

        members = document.root.find(qualified_name(XAML_NS, MEMBERS_ELEMENT))
        if members is None:
            return []

        class_name = self.get_class_name(document)
        arguments = []

        for prop in members.findall(qualified_name(XAML_NS, PROPERTY_ELEMENT)):
            name = prop.get(PROPERTY_NAME_ATTRIBUTE)
            if not name:
                raise MalformedDocumentError(
                    f"x:{PROPERTY_ELEMENT} without a {PROPERTY_NAME_ATTRIBUTE} attribute",
                    document.file_path,
                )

            type_token = prop.get(PROPERTY_TYPE_ATTRIBUTE)
            if not type_token:
                raise MalformedDocumentError(
                    f"Argument '{name}' has no {PROPERTY_TYPE_ATTRIBUTE} attribute",
                    document.file_path,
                )

            try:
                direction, type_name = parse_argument_type(type_token)
            except InvalidTypeTokenError as e:
                raise InvalidTypeTokenError(type_token, document.file_path) from e

            default_value = lookup_default_value(document, class_name, name)

            arguments.append(WorkflowArgument.create(
                name=name,
                direction=direction,
                type=type_name,
                annotation=_read_annotation(prop),
                default_value=default_value if default_value is not None else "",
            ))

        return arguments
