"""Shared fixtures for the rpadoc test suite."""

import shutil
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_PROJECT = FIXTURES_DIR / "project"


@pytest.fixture
def sample_project() -> Path:
    """Read-only sample library project."""
    return SAMPLE_PROJECT


@pytest.fixture
def project_copy(tmp_path) -> Path:
    """Writable copy of the sample project."""
    target = tmp_path / "project"
    shutil.copytree(SAMPLE_PROJECT, target)
    return target


@pytest.fixture
def uno_xaml(sample_project) -> Path:
    return sample_project / "uno.xaml"


@pytest.fixture
def dos_xaml(sample_project) -> Path:
    return sample_project / "sub-folder" / "dos.xaml"


def build_workflow(
    body: str = '<Sequence DisplayName="Sample" />',
    members: str = "",
    activity_attributes: str = 'x:Class="Sample"',
) -> str:
    """Assemble a minimal XAML workflow around the given fragments."""
    members_block = f"<x:Members>{members}</x:Members>" if members else ""
    return (
        f'<Activity {activity_attributes} '
        'xmlns="http://schemas.microsoft.com/netfx/2009/xaml/activities" '
        'xmlns:sap2010="http://schemas.microsoft.com/netfx/2010/xaml/activities/presentation" '
        'xmlns:this="clr-namespace:" '
        'xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml">'
        f"{members_block}{body}</Activity>"
    )


@pytest.fixture
def workflow_xaml():
    """Factory for in-memory workflow documents."""
    return build_workflow
