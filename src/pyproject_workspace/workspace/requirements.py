"""Dependency specifier parsing and package-name normalization."""
from dataclasses import dataclass

from packaging.requirements import InvalidRequirement, Requirement
from packaging.utils import canonicalize_name

from pyproject_workspace.core.errors import InvalidRequirementError


def normalize(name: str) -> str:
    """Normalize a package name: lowercase, separator runs collapsed to ``-``.

    Examples:
        Foo.Bar -> foo-bar
        foo__bar -> foo-bar
    """
    return canonicalize_name(name)


@dataclass(frozen=True)
class RequirementSpec:
    """A parsed dependency declaration plus the text it was parsed from."""

    name: str
    raw: str
    requirement: Requirement

    @property
    def normalized_name(self) -> str:
        return normalize(self.name)

    def same_package(self, other: "RequirementSpec") -> bool:
        """True if both specs name the same package after normalization."""
        return self.normalized_name == other.normalized_name


def parse_requirement(text: str) -> RequirementSpec:
    """Parse a PEP 508 dependency specifier.

    Raises:
        InvalidRequirementError: If text is not a valid specifier
    """
    try:
        requirement = Requirement(text)
    except InvalidRequirement as e:
        raise InvalidRequirementError(f"Invalid requirement '{text}': {e}") from e
    return RequirementSpec(name=requirement.name, raw=text, requirement=requirement)
