"""Command-line entry point of the NBR converter."""

from __future__ import annotations

import struct
import sys
from typing import Sequence

from nbrtool.image_loader import ImageLoadError, load_cubemap, load_texture
from nbrtool.lexer import ArgTokenType, tokenize
from nbrtool.nbr_format import header_for
from nbrtool.parser import ArgumentError, ConversionJob, HelpRequested, help_text, parse_tokens
from nbrtool.resources import ResourceType
from nbrtool.shader_loader import ShaderLoadError, load_shader

__all__ = ["main"]

_HEADER = struct.Struct("<Bhhh")
_TEXTURE_FIELDS = struct.Struct("<IIb")
_CUBEMAP_FIELDS = struct.Struct("<IIbB")
_SHADER_LENGTH = struct.Struct("<I")

_MESSAGES = {
    ResourceType.TEXTURE: "Converting '{source}' to '{destination}'...",
    ResourceType.CUBEMAP: "Converting cubemap faces at '{source}' to '{destination}'",
    ResourceType.SHADER: "Converting shader '{source}' to '{destination}'",
}


def _encode_body(job: ConversionJob) -> bytes:
    if job.resource_type is ResourceType.TEXTURE:
        texture = load_texture(job.source)
        return _TEXTURE_FIELDS.pack(texture.width, texture.height, texture.channels) + texture.pixels
    if job.resource_type is ResourceType.CUBEMAP:
        cubemap = load_cubemap(job.source)
        fields = _CUBEMAP_FIELDS.pack(
            cubemap.width, cubemap.height, cubemap.channels, cubemap.faces_count
        )
        return fields + b"".join(cubemap.faces)
    source = load_shader(job.source).encode("utf-8")
    return _SHADER_LENGTH.pack(len(source)) + source


def _convert(job: ConversionJob) -> None:
    """Write the NBR file for `job`: the header, then the resource's fields, little-endian."""
    body = _encode_body(job)
    header = header_for(job.resource_type)
    packed_header = _HEADER.pack(
        header.identifier, header.major_version, header.minor_version, header.resource_type
    )
    job.destination.write_bytes(packed_header + body)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter on `argv` (without the program name) and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    tokens = tokenize(["nbr", *args])

    try:
        request = parse_tokens(tokens)
    except HelpRequested:
        print(help_text(), end="")
        return 1
    except ArgumentError as exc:
        print(f"[NBR-ERROR]: {exc}", file=sys.stderr)
        if tokens[0].type is ArgTokenType.EOF:
            print(help_text(), end="")
        return 1

    failed = False
    for job in request.jobs():
        try:
            _convert(job)
        except (ImageLoadError, ShaderLoadError, OSError) as exc:
            print(f"[NBR-ERROR]: {exc}", file=sys.stderr)
            failed = True
            continue
        print(_MESSAGES[job.resource_type].format(source=job.source, destination=job.destination))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())