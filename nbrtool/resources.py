"""Resource kinds known to the NBR format."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ResourceType", "UnknownResourceTypeError", "resource_type_from_name"]


class ResourceType(IntEnum):
    """Flags identifying a kind of engine resource."""

    BUFFER = 15 << 0
    TEXTURE = 15 << 1
    CUBEMAP = 15 << 2
    SHADER = 15 << 4
    MESH = 15 << 5
    MATERIAL = 15 << 6
    SKYBOX = 15 << 7
    MODEL = 15 << 8
    FONT = 15 << 9


class UnknownResourceTypeError(ValueError):
    """Raised when a resource type name is not recognised."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown resource type given '{name}'")
        self.name = name


_NAMED_TYPES: dict[str, ResourceType] = {
    "TEXTURE": ResourceType.TEXTURE,
    "CUBEMAP": ResourceType.CUBEMAP,
    "SHADER": ResourceType.SHADER,
    "MODEL": ResourceType.MODEL,
    "FONT": ResourceType.FONT,
}


def resource_type_from_name(name: str) -> ResourceType:
    """Return the resource type named on the command line.

    Only the convertible kinds are accepted, and names are case-sensitive.
    """
    try:
        return _NAMED_TYPES[name]
    except KeyError:
        raise UnknownResourceTypeError(name) from None