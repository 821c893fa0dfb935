"""Path normalization utilities for cross-platform compatibility."""

from pathlib import Path


def normalize_path(path: str) -> str:
    """Convert any path to canonical forward slash format.

    Args:
        path: Path with any separator format

    Returns:
        Path with forward slashes only

    Examples:
        >>> normalize_path("Framework\\\\InitAllSettings.xaml")
        'Framework/InitAllSettings.xaml'
        >>> normalize_path("Framework/InitAllSettings.xaml")
        'Framework/InitAllSettings.xaml'
    """
    if not path:
        return path

    return path.replace("\\", "/")


def relative_posix_path(file_path: Path, project_root: Path) -> str:
    """Return ``file_path`` relative to ``project_root`` in POSIX format.

    Files outside the project root keep their absolute path.
    """
    try:
        relative = file_path.resolve().relative_to(project_root.resolve())
        return normalize_path(str(relative))
    except ValueError:
        return normalize_path(str(file_path.resolve()))


def strip_xaml_extension(path: str) -> str:
    """Remove a trailing ``.xaml`` extension, ignoring case."""
    if path.lower().endswith(".xaml"):
        return path[:-5]
    return path
