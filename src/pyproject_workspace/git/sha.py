"""Git object identifiers with a fixed-capacity buffer."""
import functools
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from pyproject_workspace.core.errors import EmptyOidError, OidParseError, OidTooLongError

# Length of a full SHA-1 hex digest.
OID_CAPACITY = 40

# Characters kept by the short display form.
SHORT_LENGTH = 16


@functools.total_ordering
class GitOid:
    """Unique identity of any Git object (commit, tree, blob, tag).

    The id is stored in a zero-padded buffer of ``OID_CAPACITY`` bytes together
    with its logical length. Only the first ``len`` bytes are ever read, so
    equality, ordering and hashing all work on that slice.

    Note this type does not validate whether the input is a valid hash.
    """

    __slots__ = ("_bytes", "_len")

    def __init__(self, buffer: bytes, length: int):
        if not 0 < length <= OID_CAPACITY or len(buffer) != OID_CAPACITY:
            raise ValueError(f"invalid object id buffer (len={length})")
        object.__setattr__(self, "_bytes", buffer)
        object.__setattr__(self, "_len", length)

    @classmethod
    def parse(cls, value: str) -> "GitOid":
        """Parse an object id from a string.

        Raises:
            EmptyOidError: If value is empty
            OidTooLongError: If value is longer than 40 bytes
        """
        raw = value.encode("utf-8")
        if not raw:
            raise EmptyOidError()
        if len(raw) > OID_CAPACITY:
            raise OidTooLongError()
        return cls(raw.ljust(OID_CAPACITY, b"\x00"), len(raw))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return self._len

    def as_bytes(self) -> bytes:
        """Return the logical slice of the buffer."""
        return self._bytes[: self._len]

    def as_str(self) -> str:
        """Return the string representation of the object id."""
        return self.as_bytes().decode("utf-8")

    def to_short_string(self) -> str:
        """Return at most the first 16 characters of the id."""
        # Clamped: abbreviated ids may be shorter than the short form.
        return self._bytes[: min(self._len, SHORT_LENGTH)].decode("utf-8", errors="ignore")

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"GitOid({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitOid):
            return NotImplemented
        return self.as_bytes() == other.as_bytes()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GitOid):
            return NotImplemented
        return self.as_bytes() < other.as_bytes()

    def __hash__(self) -> int:
        return hash(self.as_bytes())

    def __copy__(self) -> "GitOid":
        return self

    def __deepcopy__(self, memo: dict) -> "GitOid":
        return self

    def __reduce__(self):
        return (GitOid, (self._bytes, self._len))


@functools.total_ordering
class GitSha:
    """A complete Git SHA, i.e., a 40-character hexadecimal representation of a Git commit.

    Usable directly as a pydantic field type: it validates from a string and
    serializes back to its canonical form.
    """

    __slots__ = ("_oid",)

    def __init__(self, oid: GitOid):
        object.__setattr__(self, "_oid", oid)

    @classmethod
    def parse(cls, value: str) -> "GitSha":
        return cls(GitOid.parse(value))

    @classmethod
    def from_oid(cls, oid: GitOid) -> "GitSha":
        return cls(oid)

    @property
    def oid(self) -> GitOid:
        return self._oid

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def to_short_string(self) -> str:
        """Convert the SHA to a truncated representation (first 16 characters)."""
        return self._oid.to_short_string()

    def __str__(self) -> str:
        return str(self._oid)

    def __repr__(self) -> str:
        return f"GitSha({str(self._oid)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitSha):
            return NotImplemented
        return self._oid == other._oid

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GitSha):
            return NotImplemented
        return self._oid < other._oid

    def __hash__(self) -> int:
        return hash(self._oid)

    def __reduce__(self):
        return (GitSha, (self._oid,))

    @classmethod
    def _validate(cls, value: Any) -> "GitSha":
        if isinstance(value, cls):
            return value
        if isinstance(value, GitOid):
            return cls(value)
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        try:
            return cls.parse(value)
        except OidParseError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )
