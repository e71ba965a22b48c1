"""In-memory image resources ready to be written as NBR files."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["CUBEMAP_FACES_MAX", "NBRTexture", "NBRCubemap"]

CUBEMAP_FACES_MAX = 6
"""The maximum number of faces a cubemap may hold."""


@dataclass
class NBRTexture:
    """A decoded texture: its size, source channel count and RGBA pixels."""

    width: int
    height: int
    channels: int
    pixels: bytes = b""


@dataclass
class NBRCubemap:
    """A decoded cubemap: a shared size and channel count, and one RGBA buffer per face."""

    width: int
    height: int
    channels: int
    faces: list[bytes] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.faces) > CUBEMAP_FACES_MAX:
            raise ValueError(
                f"A cubemap holds at most {CUBEMAP_FACES_MAX} faces, got {len(self.faces)}"
            )

    @property
    def faces_count(self) -> int:
        """The number of faces stored in the cubemap."""
        return len(self.faces)