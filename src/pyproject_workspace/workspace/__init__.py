"""Workspace manifest editing: load, upsert dependencies, save."""
from pyproject_workspace.workspace.document import ManifestDocument
from pyproject_workspace.workspace.requirements import RequirementSpec, normalize, parse_requirement
from pyproject_workspace.workspace.schema import BuildSystem, Project, PyProjectToml
from pyproject_workspace.core.errors import (
    InvalidRequirementError,
    ManifestError,
    ManifestIOError,
    ManifestSchemaError,
    ManifestSyntaxError,
)

__all__ = [
    "ManifestDocument",
    "RequirementSpec",
    "normalize",
    "parse_requirement",
    "BuildSystem",
    "Project",
    "PyProjectToml",
    "ManifestError",
    "ManifestSyntaxError",
    "ManifestSchemaError",
    "InvalidRequirementError",
    "ManifestIOError",
]
