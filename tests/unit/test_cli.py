"""Unit tests for the rpadoc command line."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from typer.testing import CliRunner

from rpadoc import __version__
from rpadoc.cli import _apply_overrides, _resolve_project_path, app
from rpadoc.config import OutputFormat, create_default_config

runner = CliRunner()


class TestProjectPathResolution:
    """Test CLI project path smart detection functionality."""

    def test_resolve_project_json_file_path(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir).resolve()
            project_file = temp_path / "project.json"
            project_file.write_text('{"name": "TestProject", "main": "Main.xaml"}')

            assert _resolve_project_path(project_file) == temp_path

    def test_resolve_directory_path(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir).resolve()
            (temp_path / "project.json").write_text('{"name": "TestProject"}')

            assert _resolve_project_path(temp_path) == temp_path

    def test_resolve_nonexistent_project_json_file(self):
        with TemporaryDirectory() as temp_dir:
            with pytest.raises(FileNotFoundError, match="Project file not found"):
                _resolve_project_path(Path(temp_dir) / "project.json")

    def test_resolve_directory_without_project_json(self):
        with TemporaryDirectory() as temp_dir:
            with pytest.raises(FileNotFoundError, match="No project.json found"):
                _resolve_project_path(Path(temp_dir))


class TestApplyOverrides:

    def test_only_given_values_change(self):
        config = _apply_overrides(create_default_config(), None, None, None, None, False)

        assert config == create_default_config()

    def test_overrides(self):
        config = _apply_overrides(
            create_default_config(), Path("out"), OutputFormat.JSON, True, True, True
        )

        assert config.output.dir == "out"
        assert config.output.format == OutputFormat.JSON
        assert config.scan.recursive is True
        assert config.scan.public_only is True
        assert config.extraction.fail_fast is True


class TestInfoCommand:

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"rpadoc version {__version__}" in result.output

    def test_library_project(self, sample_project):
        result = runner.invoke(app, ["info", str(sample_project)])

        assert result.exit_code == 0
        assert "Project name: rpadoc-sample" in result.output
        assert "Project version: 1.0.2" in result.output
        assert "Private workflows: 1" in result.output
        assert "works best with UiPath Library projects" not in result.output
        assert "Finished in" in result.output

    def test_process_project_warns(self, tmp_path):
        (tmp_path / "project.json").write_text('{"name": "Invoices", "projectVersion": "1.0.0"}')

        result = runner.invoke(app, ["info", str(tmp_path / "project.json")])

        assert result.exit_code == 0
        assert "works best with UiPath Library projects" in result.output

    def test_missing_project(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestInspectCommand:

    def test_table(self, uno_xaml):
        result = runner.invoke(app, ["inspect", str(uno_xaml)])

        assert result.exit_code == 0
        assert "uno" in result.output
        assert "Ichi" in result.output
        assert "DataTable" in result.output

    def test_json(self, uno_xaml):
        result = runner.invoke(app, ["inspect", str(uno_xaml), "--json"])

        assert result.exit_code == 0
        assert '"name": "uno"' in result.output
        assert '"defaultValue": "A default string value"' in result.output

    def test_no_arguments(self, sample_project):
        result = runner.invoke(app, ["inspect", str(sample_project / "Private.xaml")])

        assert result.exit_code == 0
        assert "does not define any arguments" in result.output

    def test_malformed_file(self, tmp_path):
        broken = tmp_path / "Broken.xaml"
        broken.write_text("<Activity")

        result = runner.invoke(app, ["inspect", str(broken)])

        assert result.exit_code == 1
        assert "Error:" in result.output
