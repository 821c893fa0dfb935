"""Unit tests for batch extraction."""

import pytest

from rpadoc.batch import BatchReport, extract_workflows
from rpadoc.errors import MalformedDocumentError
from rpadoc.parser.discovery import XamlDiscovery


class TestExtractWorkflows:

    def test_sample_project(self, sample_project):
        files = XamlDiscovery(sample_project).find_xaml_files(recursive=True)

        report = extract_workflows(files, project_root=sample_project)

        assert report.total == 3
        assert report.failures == []
        assert report.success_rate == 1.0
        assert [m.relative_path for m in report.workflows] == [
            "Private.xaml",
            "sub-folder/dos.xaml",
            "uno.xaml",
        ]

    def test_without_project_root(self, uno_xaml):
        report = extract_workflows([uno_xaml])

        assert report.workflows[0].relative_path is None

    def test_failures_are_collected(self, tmp_path, uno_xaml):
        broken = tmp_path / "Broken.xaml"
        broken.write_text("<Activity", encoding="utf-8")
        missing = tmp_path / "Missing.xaml"

        report = extract_workflows([broken, uno_xaml, missing])

        assert [m.name for m in report.workflows] == ["uno"]
        assert [f.error_type for f in report.failures] == [
            "MalformedDocumentError",
            "FileNotFoundError",
        ]
        assert report.failures[0].file_path == str(broken)
        assert report.success_rate == pytest.approx(1 / 3)

    def test_fail_fast(self, tmp_path, uno_xaml):
        broken = tmp_path / "Broken.xaml"
        broken.write_text("<Activity", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            extract_workflows([broken, uno_xaml], fail_fast=True)

    def test_empty_batch(self):
        report = extract_workflows([])

        assert report.total == 0
        assert report.success_rate == 1.0


class TestBatchReport:

    def test_defaults(self):
        report = BatchReport()
        assert report.workflows == []
        assert report.failures == []
