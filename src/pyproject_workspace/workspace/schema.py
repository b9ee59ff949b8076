"""Typed view of the recognized pyproject.toml tables."""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class BuildSystem(BaseModel):
    """The ``[build-system]`` table (PEP 518)."""

    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, extra="allow")

    requires: List[str] = Field(..., description="Requirements needed to build the project")
    build_backend: Optional[str] = Field(default=None, description="Import path of the build backend")
    backend_path: Optional[List[str]] = Field(default=None, description="In-tree backend paths")


class Project(BaseModel):
    """The ``[project]`` table (PEP 621).

    Only the fields this tool reads are typed; everything else is accepted
    as-is. ``name`` is optional so that a table holding only
    ``dependencies`` (as written by ``upsert_dependency``) loads again.
    """

    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, extra="allow")

    name: Optional[str] = Field(default=None, description="Distribution name")
    version: Optional[str] = None
    description: Optional[str] = None
    requires_python: Optional[str] = None
    dependencies: Optional[List[str]] = None
    optional_dependencies: Optional[Dict[str, List[str]]] = None
    dynamic: Optional[List[str]] = None


class PyProjectToml(BaseModel):
    """Top-level shape of a pyproject.toml.

    Unlike PEP 518, ``build-system`` is optional here.
    """

    model_config = ConfigDict(
        alias_generator=_kebab,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    build_system: Optional[BuildSystem] = Field(default=None, description="Build-related data")
    project: Optional[Project] = Field(default=None, description="Project metadata")
