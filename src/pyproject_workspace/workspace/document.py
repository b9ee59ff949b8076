"""Format-preserving editor for a project's pyproject.toml."""
import logging
import tomllib
from pathlib import Path
from typing import Optional, TextIO

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import Array

from pyproject_workspace.core.errors import (
    InvalidRequirementError,
    ManifestIOError,
    ManifestSchemaError,
    ManifestSyntaxError,
)
from pyproject_workspace.workspace.requirements import RequirementSpec, parse_requirement
from pyproject_workspace.workspace.schema import PyProjectToml
from pyproject_workspace.workspace.toml import format_multiline_array

logger = logging.getLogger(__name__)


class ManifestDocument:
    """A pyproject.toml held as a typed view plus an editable syntax tree.

    The typed view (``logical``) only validates the file when it is loaded.
    All edits go to ``tree``, which is also the only thing ever rendered, so
    untouched parts of the file come back byte for byte.

    Instances are not thread-safe; callers serialize access to a document.
    """

    def __init__(self, logical: PyProjectToml, tree: tomlkit.TOMLDocument):
        self._logical = logical
        self._tree = tree

    @property
    def logical(self) -> PyProjectToml:
        """The validated view of the file as it was loaded."""
        return self._logical

    @property
    def tree(self) -> tomlkit.TOMLDocument:
        return self._tree

    @classmethod
    def parse(cls, raw_text: str) -> "ManifestDocument":
        """Parse manifest text into a document.

        Raises:
            ManifestSyntaxError: If raw_text is not valid TOML
            ManifestSchemaError: If build-system or project has the wrong shape
        """
        try:
            data = tomllib.loads(raw_text)
        except tomllib.TOMLDecodeError as e:
            raise ManifestSyntaxError(f"Invalid TOML: {e}") from e

        try:
            logical = PyProjectToml.model_validate(data)
        except ValidationError as e:
            raise ManifestSchemaError(f"Invalid pyproject.toml: {e}") from e

        try:
            tree = tomlkit.parse(raw_text)
        except TOMLKitError as e:
            raise ManifestSyntaxError(f"Invalid TOML: {e}") from e

        return cls(logical, tree)

    @classmethod
    def from_path(cls, path: Path) -> "ManifestDocument":
        """Load a manifest from disk.

        The file is decoded without newline translation so that an unmodified
        document saves back identically.

        Raises:
            ManifestIOError: If the file cannot be read
            ManifestSyntaxError: If the file is not UTF-8 or not valid TOML
            ManifestSchemaError: If the top-level tables have the wrong shape
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ManifestIOError(f"Cannot read {path}: {e}") from e

        try:
            contents = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ManifestSyntaxError(f"{path} is not valid UTF-8: {e}") from e

        document = cls.parse(contents)
        logger.info(f"Loaded {path}")
        return document

    def upsert_dependency(self, dependency: str) -> None:
        """Add a dependency to ``[project.dependencies]``, or replace it.

        An existing entry naming the same package (after name normalization)
        is replaced in place; otherwise the dependency is appended. Entries
        that do not parse are left alone. The list is rewritten one entry
        per line afterwards.

        Raises:
            InvalidRequirementError: If dependency is not a valid specifier.
                The document is unchanged in that case.
        """
        requirement = parse_requirement(dependency)

        project = self._tree.get("project")
        if project is None:
            # No `project` table.
            project = tomlkit.table()
            project.add("dependencies", self._new_dependency_array(dependency))
            self._tree.add("project", project)
            logger.info(f"Created [project] with dependency {dependency}")
            return

        dependencies: Optional[Array] = project.get("dependencies")
        if dependencies is None:
            # No `dependencies` array.
            project["dependencies"] = self._new_dependency_array(dependency)
            logger.info(f"Created project.dependencies with {dependency}")
            return

        index = self._find_dependency(dependencies, requirement)
        if index is not None:
            logger.info(f"Replacing {dependencies[index]} with {dependency}")
            dependencies[index] = dependency
        else:
            logger.info(f"Appending {dependency}")
            dependencies.append(dependency)

        format_multiline_array(dependencies)

    @staticmethod
    def _new_dependency_array(dependency: str) -> Array:
        dependencies = tomlkit.array()
        dependencies.append(dependency)
        return format_multiline_array(dependencies)

    @staticmethod
    def _find_dependency(dependencies: Array, requirement: RequirementSpec) -> Optional[int]:
        """Index of the first entry naming the same package, if any."""
        for index, item in enumerate(dependencies):
            if not isinstance(item, str):
                continue
            try:
                existing = parse_requirement(str(item))
            except InvalidRequirementError as e:
                logger.debug(f"Skipping unparsable dependency {item!r}: {e}")
                continue
            if existing.same_package(requirement):
                return index
        return None

    def render(self) -> str:
        """Serialize the syntax tree back to TOML text."""
        return self._tree.as_string()

    def write(self, stream: TextIO) -> None:
        """Write the document to an open text stream."""
        stream.write(self.render())

    def save(self, path: Path) -> None:
        """Write the document to disk in a single write.

        No temp-file/rename is done here; callers needing atomic replacement
        handle that themselves.

        Raises:
            ManifestIOError: If the file cannot be written
        """
        path = Path(path)
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                self.write(f)
        except OSError as e:
            raise ManifestIOError(f"Cannot write {path}: {e}") from e
        logger.info(f"Saved {path}")
