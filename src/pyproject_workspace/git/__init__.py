"""Git object identifiers."""
from pyproject_workspace.core.errors import EmptyOidError, OidParseError, OidTooLongError
from pyproject_workspace.git.sha import GitOid, GitSha

__all__ = [
    "GitOid",
    "GitSha",
    "OidParseError",
    "EmptyOidError",
    "OidTooLongError",
]
