"""Reading shader source files."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

__all__ = ["ShaderLoadError", "load_shader"]


class ShaderLoadError(Exception):
    """Raised when a shader file cannot be opened or read."""


def load_shader(path: str | PathLike[str]) -> str:
    """Return the whole text of the shader file at `path`, line endings untouched."""
    source = Path(path)
    try:
        with source.open("r", encoding="utf-8", newline="") as file:
            return file.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ShaderLoadError(f"Could not load shader at '{source}', {exc}") from exc