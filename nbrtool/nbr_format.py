"""Header fields shared by every NBR (binary resource) file."""

from __future__ import annotations

from dataclasses import dataclass

from nbrtool.resources import ResourceType

__all__ = [
    "NBR_VALID_IDENTIFIER",
    "NBR_VALID_MAJOR_VERSION",
    "NBR_VALID_MINOR_VERSION",
    "NBRHeader",
    "header_for",
]

NBR_VALID_IDENTIFIER = 107
"""The value at the top of every NBR file: the average of the codes of 'n', 'b' and 'r'."""

NBR_VALID_MAJOR_VERSION = 0
"""The major version of NBR files currently written and accepted."""

NBR_VALID_MINOR_VERSION = 1
"""The minor version of NBR files currently written and accepted."""

_KNOWN_RESOURCE_TYPES = frozenset(int(kind) for kind in ResourceType)


@dataclass(frozen=True)
class NBRHeader:
    """The identifying fields at the start of an NBR file."""

    identifier: int
    major_version: int
    minor_version: int
    resource_type: int

    def is_valid(self) -> bool:
        """Return True if the identifier and version match the current format
        and the resource type is a known one."""
        return (
            self.identifier == NBR_VALID_IDENTIFIER
            and self.major_version == NBR_VALID_MAJOR_VERSION
            and self.minor_version == NBR_VALID_MINOR_VERSION
            and self.resource_type in _KNOWN_RESOURCE_TYPES
        )


def header_for(resource_type: ResourceType | int) -> NBRHeader:
    """Return a current-version header for a resource of `resource_type`.

    Raises ValueError if `resource_type` is not a known resource type.
    """
    kind = ResourceType(resource_type)
    return NBRHeader(
        identifier=NBR_VALID_IDENTIFIER,
        major_version=NBR_VALID_MAJOR_VERSION,
        minor_version=NBR_VALID_MINOR_VERSION,
        resource_type=kind,
    )