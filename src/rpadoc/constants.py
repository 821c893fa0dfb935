"""Constants for XAML metadata extraction.

Namespace URIs, attribute names and discovery markers centralized for
easy maintenance.
"""

from typing import Dict, Tuple

# Namespaces the extractor depends on
ACTIVITIES_NS = 'http://schemas.microsoft.com/netfx/2009/xaml/activities'
XAML_NS = 'http://schemas.microsoft.com/winfx/2006/xaml'
SAP2010_NS = 'http://schemas.microsoft.com/netfx/2010/xaml/activities/presentation'
THIS_NS = 'clr-namespace:'

STANDARD_NAMESPACES: Dict[str, str] = {
    'xaml': ACTIVITIES_NS,
    'x': XAML_NS,
    'sap2010': SAP2010_NS,
    'ui': 'http://schemas.uipath.com/workflow/activities',
    'this': THIS_NS,
}

# Element and attribute names
ACTIVITY_ELEMENT = 'Activity'
MEMBERS_ELEMENT = 'Members'
PROPERTY_ELEMENT = 'Property'
DISPLAY_NAME_ATTRIBUTE = 'DisplayName'
CLASS_ATTRIBUTE = 'Class'
ANNOTATION_ATTRIBUTE = 'Annotation.AnnotationText'
PROPERTY_NAME_ATTRIBUTE = 'Name'
PROPERTY_TYPE_ATTRIBUTE = 'Type'

# Prefix used in default value attribute names (this:Class.Argument)
DEFAULT_VALUE_PREFIX = 'this'

# Workflow body elements, tried in order
DEFAULT_ROOT_ELEMENTS: Tuple[str, ...] = ('Flowchart', 'Sequence')

# Argument direction tokens as written in x:Property Type attributes
DIRECTION_TOKENS: Dict[str, str] = {
    'InArgument': 'In',
    'OutArgument': 'Out',
    'InOutArgument': 'InOut',
}

# Discovery
XAML_EXTENSION = '.xaml'
TEMPORARY_FILE_PREFIX = '~'
PROJECT_FILE_NAME = 'project.json'
CONFIG_FILE_NAME = '.rpadoc.json'
