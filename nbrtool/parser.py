"""Interpreting lexed command-line tokens as a conversion request."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Iterator, Sequence

from nbrtool.lexer import ArgToken, ArgTokenType
from nbrtool.resources import ResourceType, UnknownResourceTypeError, resource_type_from_name

__all__ = [
    "ArgumentError",
    "HelpRequested",
    "ConversionRequest",
    "ConversionJob",
    "help_text",
    "parse_tokens",
    "output_path",
]

_CONVERTIBLE_TYPES = frozenset({ResourceType.TEXTURE, ResourceType.CUBEMAP, ResourceType.SHADER})

_HELP_TEXT = (
    "\n\n### Welcome to NBR ### \n\n"
    "NBR (Binary Resource) is a tool to convert any\n"
    "resources to the NBR format used by the engine\n\n"
    "[Usage]: nbr [--resource-type -rt] [--dir -d] [--recurse -r] <src_path> <dest_dir>\n\n"
    "  --resource-type, -rt = Specify the resource type you wish to convert\n"
    "  --dir, -d            = Will treat the given src_path as a directory\n"
    "  --recurse, -r        = Recursively go through all of the resources in src_path\n"
)


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be turned into a request."""


class HelpRequested(Exception):
    """Raised when the help option is met while parsing."""


def help_text() -> str:
    """Return the usage text of the tool."""
    return _HELP_TEXT


def output_path(source: str | PathLike[str], output_dir: str | PathLike[str]) -> Path:
    """Return where the NBR file for `source` goes inside `output_dir`."""
    return Path(output_dir) / Path(Path(source).name).with_suffix(".nbr")


@dataclass(frozen=True)
class ConversionJob:
    """One source to convert and the NBR file it becomes."""

    resource_type: ResourceType
    source: Path
    destination: Path


@dataclass
class ConversionRequest:
    """Everything the command line asked for."""

    output_dir: Path
    resource_type: ResourceType | None = None
    sources: list[Path] = field(default_factory=list)
    is_directory: bool = False
    recurse: bool = False

    def jobs(self) -> Iterator[ConversionJob]:
        """Yield a job per source; kinds that cannot be converted yield none."""
        if self.resource_type not in _CONVERTIBLE_TYPES:
            return
        for source in self.sources:
            yield ConversionJob(self.resource_type, source, output_path(source, self.output_dir))


class _TokenStream:
    def __init__(self, tokens: Sequence[ArgToken]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not ArgTokenType.EOF:
            self._tokens.append(ArgToken(ArgTokenType.EOF, ""))
        self._position = 0

    def at_eof(self) -> bool:
        return self._tokens[self._position].type is ArgTokenType.EOF

    def consume(self) -> ArgToken:
        token = self._tokens[self._position]
        if not self.at_eof():
            self._position += 1
        return token


def _collect_sources(root: Path, is_directory: bool, recurse: bool) -> list[Path]:
    if not is_directory:
        return [root]
    if not root.is_dir():
        raise ArgumentError(f"Could not read directory '{root}'")
    try:
        entries = root.rglob("*") if recurse else root.iterdir()
        return sorted(entries)
    except OSError as exc:
        raise ArgumentError(f"Could not read directory '{root}', {exc}") from exc


def parse_tokens(
    tokens: Sequence[ArgToken], cwd: str | PathLike[str] | None = None
) -> ConversionRequest:
    """Build a conversion request from `tokens`.

    Relative paths are taken against `cwd` (the current directory by default),
    which is also the default output directory. Raises HelpRequested when the
    help option appears and ArgumentError for anything malformed.
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    stream = _TokenStream(tokens)
    if stream.at_eof():
        raise ArgumentError("No arguments passed")

    request = ConversionRequest(output_dir=base)
    while not stream.at_eof():
        token = stream.consume()
        if token.type is ArgTokenType.DIRECTORY:
            request.is_directory = True
        elif token.type is ArgTokenType.RECURSE:
            request.recurse = True
        elif token.type is ArgTokenType.HELP:
            raise HelpRequested()
        elif token.type is ArgTokenType.RESOURCE_TYPE:
            literal = stream.consume()
            if literal.type is not ArgTokenType.PARAM:
                raise ArgumentError(f"Expected an argument passed after '{token.arg}'")
            try:
                request.resource_type = resource_type_from_name(literal.arg)
            except UnknownResourceTypeError as exc:
                raise ArgumentError(str(exc)) from exc
        elif token.type is ArgTokenType.PARAM:
            resource_path = base / token.arg
            following = stream.consume()
            request.output_dir = base
            if following.type is not ArgTokenType.EOF:
                request.output_dir = base / following.arg
            request.sources.extend(
                _collect_sources(resource_path, request.is_directory, request.recurse)
            )
    return request