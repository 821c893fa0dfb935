"""Unit tests for documentation output generators."""

import json

import pytest

from rpadoc.config import OutputFormat
from rpadoc.errors import UsageError
from rpadoc.models.metadata import WorkflowMetadata
from rpadoc.output import (
    JsonGenerator,
    MarkdownGenerator,
    check_output_directory,
    create_generator,
    output_name,
)
from rpadoc.output.markdown import escape_cell
from rpadoc.parser.extractor import MetadataExtractor


def make_metadata(name="uno", description="Hello", file_path="uno.xaml", relative_path=None):
    metadata = WorkflowMetadata(file_path)
    metadata.name = name
    metadata.description = description
    metadata.relative_path = relative_path
    return metadata


class TestCheckOutputDirectory:

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="does not exist"):
            check_output_directory(tmp_path / "docs")

    def test_not_a_directory(self, tmp_path):
        target = tmp_path / "docs"
        target.write_text("")

        with pytest.raises(NotADirectoryError, match="is not a directory"):
            check_output_directory(target)

    def test_not_empty(self, tmp_path):
        (tmp_path / "index.md").write_text("")

        with pytest.raises(FileExistsError, match="is not an empty directory"):
            check_output_directory(tmp_path)

    def test_not_empty_allowed(self, tmp_path):
        (tmp_path / "index.md").write_text("")

        check_output_directory(tmp_path, require_empty=False)

    def test_hidden_entries_ignored(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*")
        (tmp_path / ".git").mkdir()

        check_output_directory(tmp_path)


class TestOutputName:

    def test_uses_workflow_name(self):
        assert output_name(make_metadata(name="My Workflow")) == "My-Workflow"

    def test_uses_relative_path(self):
        metadata = make_metadata(name="dos", relative_path="sub-folder/dos.xaml")
        assert output_name(metadata) == "sub-folder_dos"

    def test_fallback(self):
        assert output_name(make_metadata(name="???")) == "workflow"


class TestMarkdownGenerator:

    def test_render_without_arguments(self, tmp_path):
        generator = MarkdownGenerator(tmp_path)

        assert generator.render(make_metadata()) == (
            "# uno\n"
            "\n"
            "Hello\n"
            "\n"
            "## Arguments\n"
            "\n"
            "This activity does not define any arguments.\n"
        )

    def test_render_sample_workflow(self, tmp_path, uno_xaml):
        metadata = MetadataExtractor().get_metadata(uno_xaml)

        content = MarkdownGenerator(tmp_path).render(metadata)
        lines = content.splitlines()

        assert lines[0] == "# uno"
        assert lines[2] == "This test XAML file is used as an artefact for the majority of unit tests"
        assert lines[4] == "## Arguments"
        assert lines[6] == "| Name | Purpose | Direction | Type | Default Value |"
        assert lines[8] == "|Ichi|First argument using Japanese numbers.|In|String|A default string value|"
        assert lines[11] == "|Shi|Fourth argument using Japanese numbers.|In|DataTable||"
        assert len(lines) == 12

    def test_cells_are_escaped(self):
        assert escape_cell("a | b") == "a \\| b"
        assert escape_cell("one\r\ntwo\nthree") == "one<br>two<br>three"

    def test_write(self, tmp_path, dos_xaml):
        metadata = MetadataExtractor().get_metadata(dos_xaml)
        metadata.relative_path = "sub-folder/dos.xaml"

        path = MarkdownGenerator(tmp_path).write(metadata)

        assert path == tmp_path / "sub-folder_dos.md"
        content = path.read_text(encoding="utf-8")
        assert "|io_Total|Running total \\| carried between calls.|InOut|Double||" in content
        assert "|out_Count||Out|Int32||" in content

    def test_write_requires_metadata(self, tmp_path):
        with pytest.raises(UsageError):
            MarkdownGenerator(tmp_path).write({"name": "uno"})

    def test_name_collisions(self, tmp_path):
        generator = MarkdownGenerator(tmp_path)

        paths = generator.write_all([
            make_metadata(name="My Workflow"),
            make_metadata(name="My-Workflow"),
            make_metadata(name="my workflow"),
        ])

        assert [p.name for p in paths] == ["My-Workflow.md", "My-Workflow-2.md", "my-workflow-3.md"]

    def test_refuses_non_empty_directory(self, tmp_path):
        (tmp_path / "README.md").write_text("")

        with pytest.raises(FileExistsError):
            MarkdownGenerator(tmp_path)


class TestJsonGenerator:

    def test_write(self, tmp_path, uno_xaml):
        metadata = MetadataExtractor().get_metadata(uno_xaml)

        path = JsonGenerator(tmp_path).write(metadata)

        assert path.suffix == ".json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["name"] == "uno"
        assert [a["name"] for a in data["arguments"]] == ["Ichi", "Ni", "San", "Shi"]
        assert data["arguments"][0]["defaultValue"] == "A default string value"


class TestCreateGenerator:

    def test_formats(self, tmp_path):
        assert isinstance(create_generator(OutputFormat.MARKDOWN, tmp_path), MarkdownGenerator)
        assert isinstance(create_generator("json", tmp_path), JsonGenerator)

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported output format"):
            create_generator("html", tmp_path)
