"""JSON rendering of workflow metadata."""

import json

from rpadoc.models.metadata import WorkflowMetadata
from rpadoc.output.base import OutputGenerator


class JsonGenerator(OutputGenerator):
    """Writes one JSON document per workflow."""

    @property
    def extension(self) -> str:
        return ".json"

    def render(self, metadata: WorkflowMetadata) -> str:
        return json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False) + "\n"
