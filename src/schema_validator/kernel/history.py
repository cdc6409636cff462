"""Registered-history lookup as a tagged result.

"Subject not registered" and "registry failed" are different answers:
the first means the proposed schema is new and passes trivially, the
second means the subject could not be checked.
"""

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple, Union

from schema_validator.errors import NotFoundError, RegistryError


class RegistryReader(Protocol):
    """Read side of a schema registry."""

    def list_versions(self, subject: str) -> List[int]:
        ...

    def get_schema(self, subject: str, version: int) -> str:
        ...


@dataclass(frozen=True)
class Found:
    """Registered versions with their raw schema text, ascending by version."""
    schemas: List[Tuple[int, str]] = field(default_factory=list)


@dataclass(frozen=True)
class NotRegistered:
    """The registry has never seen this subject."""


@dataclass(frozen=True)
class Failed:
    """The registry could not answer."""
    cause: RegistryError


HistoryResult = Union[Found, NotRegistered, Failed]


def fetch_history(registry: RegistryReader, subject: str, latest_only: bool = False) -> HistoryResult:
    """
    Fetch registered versions of `subject` in ascending version order.

    With `latest_only`, only the greatest version is downloaded: older
    versions are never compared by non-transitive modes.
    """
    try:
        versions = registry.list_versions(subject)
    except NotFoundError:
        return NotRegistered()
    except RegistryError as e:
        return Failed(e)

    ordered = sorted(int(version) for version in versions)
    if latest_only:
        ordered = ordered[-1:]

    schemas: List[Tuple[int, str]] = []
    try:
        for version in ordered:
            schemas.append((version, registry.get_schema(subject, version)))
    except RegistryError as e:
        # A subject that disappears between the two calls is also a failure
        return Failed(e)
    return Found(schemas)
