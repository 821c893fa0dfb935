"""Reading of a UiPath project's project.json."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rpadoc.constants import PROJECT_FILE_NAME
from rpadoc.models.project import UiPathProject


def _load_object(project_file: Path) -> dict[str, Any]:
    # Studio writes project.json with a byte order mark
    try:
        data = json.loads(project_file.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in project file {project_file}: {e}")
    except OSError as e:
        raise ValueError(f"Failed to read project file {project_file}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Invalid project structure in {project_file}: expected an object")
    return data


class ProjectParser:
    """Locates and validates the project.json of a UiPath project."""

    @staticmethod
    def find_project_file(project_root: Path) -> Path | None:
        """Return the project.json inside ``project_root``, or None."""
        candidate = Path(project_root) / PROJECT_FILE_NAME
        return candidate if candidate.is_file() else None

    @staticmethod
    def parse_project(project_file: Path) -> UiPathProject:
        """Load a project.json into a UiPathProject.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is unreadable, not JSON, or not a project object
        """
        project_file = Path(project_file)
        if not project_file.exists():
            raise FileNotFoundError(f"Project file not found: {project_file}")

        try:
            return UiPathProject.model_validate(_load_object(project_file))
        except ValidationError as e:
            raise ValueError(f"Invalid project structure in {project_file}: {e}")

    @classmethod
    def parse_project_from_dir(cls, project_dir: Path) -> UiPathProject:
        project_file = cls.find_project_file(project_dir)
        if project_file is None:
            raise FileNotFoundError(f"No project.json found in {project_dir}")
        return cls.parse_project(project_file)
