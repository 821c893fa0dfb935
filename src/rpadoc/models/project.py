"""Models for UiPath project.json parsing and representation."""

from typing import Any

from pydantic import BaseModel, Field


class LibraryOptions(BaseModel):
    """UiPath library-specific options."""
    private_workflows: Any = Field(alias="privateWorkflows", default_factory=list)

    model_config = {"populate_by_name": True, "extra": "allow"}


class DesignOptions(BaseModel):
    """UiPath design options."""
    output_type: str | None = Field(alias="outputType", default=None)
    library_options: LibraryOptions | None = Field(alias="libraryOptions", default=None)

    model_config = {"populate_by_name": True, "extra": "allow"}


class UiPathProject(BaseModel):
    """UiPath project.json model.

    Only the fields rpadoc reports on are typed; everything else is kept as
    extra data. Older Studio versions wrote ``projectType`` and
    ``libraryOptions`` at the top level, newer ones nest them under
    ``designOptions``; both layouts are understood.
    """
    name: str = ""
    description: str | None = None
    main: str | None = None
    dependencies: dict[str, str] = Field(default_factory=dict)
    project_version: str | None = Field(alias="projectVersion", default=None)
    project_type: str | None = Field(alias="projectType", default=None)
    library_options: LibraryOptions | None = Field(alias="libraryOptions", default=None)
    design_options: DesignOptions | None = Field(alias="designOptions", default=None)

    @property
    def version(self) -> str:
        """Project version, or an empty string if it is not declared."""
        return self.project_version or ""

    @property
    def output_type(self) -> str:
        """Declared project type, lower case; defaults to ``process``."""
        if self.design_options and self.design_options.output_type:
            return self.design_options.output_type.lower()
        if self.project_type:
            return self.project_type.lower()
        return "process"

    @property
    def is_library(self) -> bool:
        """Check if this is a library project."""
        return self.output_type == "library"

    @property
    def private_workflows(self) -> list[str]:
        """Workflow files a library does not expose."""
        options = self.library_options
        if self.design_options and self.design_options.library_options:
            options = self.design_options.library_options

        if options is None or not isinstance(options.private_workflows, list):
            return []
        return [str(item) for item in options.private_workflows]

    model_config = {"populate_by_name": True, "extra": "allow"}  # Allow additional fields for forward compatibility
