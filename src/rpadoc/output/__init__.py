"""Output generators for extracted workflow metadata."""

from pathlib import Path

from rpadoc.config import OutputFormat
from rpadoc.output.base import OutputGenerator, check_output_directory, output_name
from rpadoc.output.json_output import JsonGenerator
from rpadoc.output.markdown import MarkdownGenerator

GENERATORS: dict[str, type[OutputGenerator]] = {
    OutputFormat.MARKDOWN.value: MarkdownGenerator,
    OutputFormat.JSON.value: JsonGenerator,
}


def create_generator(
    output_format: OutputFormat | str,
    output_dir: Path,
    require_empty: bool = True,
) -> OutputGenerator:
    """Factory function to create the generator for an output format."""
    key = output_format.value if isinstance(output_format, OutputFormat) else str(output_format)
    try:
        generator_class = GENERATORS[key]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}") from None
    return generator_class(output_dir, require_empty=require_empty)


__all__ = [
    "OutputGenerator",
    "MarkdownGenerator",
    "JsonGenerator",
    "check_output_directory",
    "output_name",
    "create_generator",
]
