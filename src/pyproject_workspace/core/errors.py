"""Core exception types for pyproject-workspace."""


class WorkspaceToolError(Exception):
    """Base exception for all pyproject-workspace errors."""
    pass


class ManifestError(WorkspaceToolError):
    """Raised when a manifest cannot be loaded, edited, or saved."""
    pass


class ManifestSyntaxError(ManifestError):
    """Raised when the manifest is not valid TOML."""
    pass


class ManifestSchemaError(ManifestError):
    """Raised when the manifest's top-level tables have the wrong shape."""
    pass


class InvalidRequirementError(ManifestError):
    """Raised when a dependency specifier cannot be parsed."""
    pass


class ManifestIOError(ManifestError):
    """Raised when reading or writing the manifest fails."""
    pass


class OidParseError(WorkspaceToolError, ValueError):
    """Raised when a Git object id cannot be parsed."""
    pass


class EmptyOidError(OidParseError):
    """Raised for an empty object id."""

    def __init__(self, message: str = "Object ID cannot be parsed from empty string"):
        super().__init__(message)


class OidTooLongError(OidParseError):
    """Raised for an object id longer than a full SHA-1 hex digest."""

    def __init__(self, message: str = "Object ID can be at most 40 hex characters"):
        super().__init__(message)
