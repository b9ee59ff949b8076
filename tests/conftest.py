"""Pytest fixtures for pyproject-workspace tests."""
from pathlib import Path

import pytest


BUILD_SYSTEM_ONLY = """\
# Build configuration only.
[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"
"""

PROJECT_WITHOUT_DEPENDENCIES = """\
[project]
name = "demo"
version = "0.1.0"

[tool.black]
line-length = 100
"""

PROJECT_WITH_DEPENDENCIES = """\
[build-system]
requires = ["setuptools"]

[project]
name = "demo"
version = "0.1.0"
dependencies = ["bar", "foo==1.0", "baz>=2"]
"""

COMMENTED_PROJECT = """\
# Top-level comment, kept verbatim.
[project]
name   =   "demo"   # odd spacing
version = '0.1.0'
dependencies = [
    "bar",  # keep me
    # a standalone comment
    "foo==1.0",
]

[project.optional-dependencies]
dev = ["pytest"]

[tool.other]
key = { a = 1, b = "two" }
"""


@pytest.fixture
def build_system_only() -> str:
    """Manifest with a [build-system] table and no [project]."""
    return BUILD_SYSTEM_ONLY


@pytest.fixture
def project_without_dependencies() -> str:
    """Manifest whose [project] table has no dependencies key."""
    return PROJECT_WITHOUT_DEPENDENCIES


@pytest.fixture
def project_with_dependencies() -> str:
    """Manifest with an inline dependencies array: bar, foo==1.0, baz>=2."""
    return PROJECT_WITH_DEPENDENCIES


@pytest.fixture
def commented_project() -> str:
    """Manifest with comments, odd spacing and extra tables."""
    return COMMENTED_PROJECT


@pytest.fixture
def pyproject_file(tmp_path: Path, project_with_dependencies: str) -> Path:
    """pyproject.toml on disk containing project_with_dependencies."""
    path = tmp_path / "pyproject.toml"
    path.write_bytes(project_with_dependencies.encode("utf-8"))
    return path
