"""Markdown rendering of workflow metadata."""

from rpadoc.models.metadata import WorkflowMetadata
from rpadoc.output.base import OutputGenerator

NO_ARGUMENTS_TEXT = "This activity does not define any arguments.\n"
TABLE_HEADER = (
    "| Name | Purpose | Direction | Type | Default Value |\n"
    "| ---- | ------- | --------- | ---- | ------------- |\n"
)


def escape_cell(value: str) -> str:
    """Make a value safe for a single Markdown table cell."""
    return value.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


class MarkdownGenerator(OutputGenerator):
    """Writes one Markdown page per workflow."""

    @property
    def extension(self) -> str:
        return ".md"

    def render(self, metadata: WorkflowMetadata) -> str:
        content = [
            f"# {metadata.name}\n\n",
            f"{metadata.description}\n\n",
            "## Arguments\n\n",
        ]

        if not metadata.arguments:
            content.append(NO_ARGUMENTS_TEXT)
            return "".join(content)

        content.append(TABLE_HEADER)
        for argument in metadata.arguments.values():
            cells = [
                argument.name,
                argument.annotation,
                argument.direction.value,
                argument.type,
                argument.default_value,
            ]
            content.append("|" + "|".join(escape_cell(cell) for cell in cells) + "|\n")

        return "".join(content)
