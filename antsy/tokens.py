"""
Token types produced by the decoder.

Each escape sequence or run of plain text decodes to one or more tokens.
Tokens are immutable and compare equal only to tokens of the same type,
so that ``Text('reset')`` is never mistaken for ``Simple('reset')``.
"""
from __future__ import annotations

from dataclasses import dataclass

from typing import NamedTuple, Tuple, Union


@dataclass(frozen=True)
class Text:
    """A run of literal text, never empty."""
    text: str


@dataclass(frozen=True)
class Simple:
    """
    A sequence without parameters.

    :param name: Token name, such as ``'bright'``, ``'red_background'`` or ``'home'``.
    """
    name: str


@dataclass(frozen=True)
class Parameterized:
    """
    A sequence carrying numeric parameters.

    :param name: One of ``'cursor'``, ``'cursor_up'``, ``'cursor_down'``,
        ``'cursor_left'``, ``'cursor_right'``, ``'color'`` or ``'color_background'``.
    :param params: The parameters, ``(line, column)`` for ``'cursor'``, the count
        for relative movement, the 256-color index for colors.
    """
    name: str
    params: Tuple[int, ...]


@dataclass(frozen=True)
class Unknown:
    """A complete escape sequence that is not recognized, kept verbatim."""
    sequence: str


@dataclass(frozen=True)
class Invalid:
    """A recognized sequence with parameters that fail validation."""


INVALID = Invalid()

Token = Union[Text, Simple, Parameterized, Unknown, Invalid]


class Segment(NamedTuple):
    """
    A resolved piece of input and the tokens decoded from it.

    :param source: Verbatim input text of this piece.
    :param tokens: Tokens decoded from ``source``; a combined SGR sequence such
        as ``'\\x1b[1;4m'`` decodes to more than one.
    """
    source: str
    tokens: Tuple[Token, ...]
