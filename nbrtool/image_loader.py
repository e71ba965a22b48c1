"""Decoding image files into textures and cubemaps."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from PIL import Image

from nbrtool.assets import CUBEMAP_FACES_MAX, NBRCubemap, NBRTexture

__all__ = ["ImageLoadError", "is_valid_extension", "load_texture", "load_cubemap"]

_VALID_EXTENSIONS = frozenset(
    {".png", ".jpg", ".jpeg", ".bmp", ".psd", ".tga", ".gif", ".hdr", ".pic", ".ppm", ".pgm"}
)


class ImageLoadError(Exception):
    """Raised when an image file cannot be used or decoded."""


def is_valid_extension(ext: str) -> bool:
    """Return True if `ext` (with its leading dot) names a supported image format."""
    return ext in _VALID_EXTENSIONS


def _source_channels(image: Image.Image) -> int:
    if image.mode == "P":
        return 4 if "transparency" in image.info else 3
    return len(image.getbands())


def _decode(path: Path, what: str) -> tuple[int, int, int, bytes]:
    if not is_valid_extension(path.suffix):
        raise ImageLoadError(f"Invalid image file at '{path}'")
    try:
        with Image.open(path) as image:
            image.load()
            channels = _source_channels(image)
            rgba = image.convert("RGBA")
            return rgba.width, rgba.height, channels, rgba.tobytes()
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(f"Could not load {what} at '{path}', {exc}") from exc


def load_texture(path: str | PathLike[str]) -> NBRTexture:
    """Decode the image at `path` into an RGBA texture.

    The texture's `channels` is the channel count of the source image.
    """
    width, height, channels, pixels = _decode(Path(path), "texture")
    return NBRTexture(width=width, height=height, channels=channels, pixels=pixels)


def load_cubemap(directory: str | PathLike[str]) -> NBRCubemap:
    """Decode every entry under `directory`, recursively and in name order, as a cubemap face.

    Every entry must be a supported image file; the size is taken from the
    last face and the channel count is always 4.
    """
    root = Path(directory)
    if not root.is_dir():
        raise ImageLoadError(f"Could not open cubemap directory at '{root}'")

    faces: list[bytes] = []
    width = height = 0
    for entry in sorted(root.rglob("*")):
        if len(faces) == CUBEMAP_FACES_MAX:
            raise ImageLoadError(
                f"Too many cubemap faces at '{root}', at most {CUBEMAP_FACES_MAX} allowed"
            )
        width, height, _, pixels = _decode(entry, "cubemap face")
        faces.append(pixels)

    if not faces:
        raise ImageLoadError(f"No cubemap faces found at '{root}'")

    return NBRCubemap(width=width, height=height, channels=4, faces=faces)