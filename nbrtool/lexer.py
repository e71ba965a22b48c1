"""Turning command-line arguments into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from itertools import islice
from typing import Iterable

__all__ = ["ArgTokenType", "ArgToken", "tokenize"]


class ArgTokenType(Enum):
    """Kinds of command-line token."""

    RESOURCE_TYPE = auto()
    DIRECTORY = auto()
    RECURSE = auto()
    HELP = auto()
    PARAM = auto()
    EOF = auto()


@dataclass(frozen=True)
class ArgToken:
    """A lexed argument: its kind, its text and, for options, the short form."""

    type: ArgTokenType
    arg: str
    alt_arg: str = ""


_OPTIONS: tuple[ArgToken, ...] = (
    ArgToken(ArgTokenType.RESOURCE_TYPE, "--resource-type", "-rt"),
    ArgToken(ArgTokenType.DIRECTORY, "--dir", "-d"),
    ArgToken(ArgTokenType.RECURSE, "--recurse", "-r"),
    ArgToken(ArgTokenType.HELP, "--help", "-h"),
)

_OPTION_LOOKUP: dict[str, ArgToken] = {
    spelling: option
    for option in _OPTIONS
    for spelling in (option.arg, option.alt_arg)
}


def tokenize(argv: Iterable[str]) -> list[ArgToken]:
    """Lex `argv` (program name first) into tokens ending with an EOF token."""
    tokens = [
        _OPTION_LOOKUP.get(arg) or ArgToken(ArgTokenType.PARAM, arg)
        for arg in islice(argv, 1, None)
        if arg != " "
    ]
    tokens.append(ArgToken(ArgTokenType.EOF, ""))
    return tokens