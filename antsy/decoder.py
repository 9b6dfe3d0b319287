"""
Decoder of text mixed with ANSI escape sequences.

The scanner walks its input one character at a time, in one of two states:
collecting plain text, or collecting an escape sequence that began with ESC.
An escape sequence is resolved as soon as the character that completes it
arrives, so input may be split anywhere.  A sequence still incomplete at the
end of input is returned verbatim as the remainder, for the caller to prepend
to the next chunk.
"""
from __future__ import annotations

# std imports
import re
import string

from typing import List, Optional, Tuple

# local
from .tokens import INVALID, Parameterized, Segment, Simple, Text, Token, Unknown
from .table_sgr import SGR_CODES

ESC = '\x1b'

# Control Sequence Introducer
CSI = '\x1b['

# Final characters of relative cursor movement: CUU, CUD, CUF, CUB.
# TODO: CNL (E), CPL (F) and CHA (G) decode as Unknown until they are given names.
CURSOR_MOVEMENTS = {
    'A': 'cursor_up',
    'B': 'cursor_down',
    'C': 'cursor_right',
    'D': 'cursor_left',
}

# Final characters of cursor position: CUP and HVP.
CURSOR_POSITION = frozenset('Hf')

# Final character of Select Graphic Rendition.
SGR = 'm'

# Any of these completes an escape sequence.
FINAL_LETTERS = frozenset(string.ascii_letters)

# 256-color foreground and background prefixes of SGR parameters.
_COLOR_PREFIXES = (('38;5;', 'color'), ('48;5;', 'color_background'))

# Strict unsigned number, int() would also accept signs, spaces and underscores.
_NUMBER_PATTERN = re.compile(r'[0-9]+')


def _parse_number(text: str) -> Optional[int]:
    """
    Parse a parameter made entirely of ASCII digits.

    :param text: Parameter text.
    :returns: Its integer value, or None when ``text`` is empty or has any
        other character.
    """
    if _NUMBER_PATTERN.fullmatch(text):
        return int(text)
    return None


def _decode_cursor_position(params: str) -> Token:
    r"""
    Decode parameters of ``\x1b[<line>;<column>H``.

    :param params: Text between the CSI and the final character.
    :returns: ``home`` without parameters, ``cursor`` with exactly two
        numbers, else ``INVALID``.
    """
    if not params:
        return Simple('home')
    values = [_parse_number(param) for param in params.split(';')]
    if len(values) != 2 or None in values:
        return INVALID
    return Parameterized('cursor', tuple(values))


def _decode_cursor_movement(name: str, params: str) -> Token:
    """Decode the count of a relative cursor movement, 1 when omitted."""
    if not params:
        return Parameterized(name, (1,))
    count = _parse_number(params)
    if count is None or count < 1:
        return INVALID
    return Parameterized(name, (count,))


def _decode_mode(param: str) -> Token:
    """Decode one parameter of a combined SGR sequence."""
    code = _parse_number(param)
    name = SGR_CODES.get(code) if code is not None else None
    if name is None:
        return INVALID
    return Simple(name)


def _decode_graphic_rendition(params: str) -> Tuple[Token, ...]:
    r"""
    Decode parameters of ``\x1b[...m``.

    256-color selection is matched first.  Any other parameter list decodes to
    one token per parameter, or to a single ``INVALID`` when any one of them is
    not a known code.
    """
    for prefix, name in _COLOR_PREFIXES:
        if params.startswith(prefix):
            index = _parse_number(params[len(prefix):])
            if index is None or index > 255:
                return (INVALID,)
            return (Parameterized(name, (index,)),)

    tokens = tuple(_decode_mode(param) for param in params.split(';'))
    if INVALID in tokens:
        return (INVALID,)
    return tokens


def _decode_escape(sequence: str, final: str) -> Tuple[Token, ...]:
    """
    Decode a complete escape sequence.

    :param sequence: Escape sequence collected so far, starting with ESC.
    :param final: The letter completing it.
    :returns: Tokens of ``sequence + final``.
    """
    if sequence.startswith(CSI):
        params = sequence[len(CSI):]
        if final in CURSOR_POSITION:
            return (_decode_cursor_position(params),)
        if final in CURSOR_MOVEMENTS:
            return (_decode_cursor_movement(CURSOR_MOVEMENTS[final], params),)
        if final == SGR:
            return _decode_graphic_rendition(params)
    return (Unknown(sequence + final),)


def decode_segments(text: str) -> Tuple[List[Segment], str]:
    r"""
    Split text into decoded segments and an undecoded remainder.

    :param text: Text that may contain terminal escape sequences.
    :raises TypeError: ``text`` is not a string.
    :returns: Tuple of ``(segments, remainder)``.  Each :class:`Segment` holds
        the verbatim source of a text run or a complete escape sequence, with
        the tokens decoded from it.  ``remainder`` is an escape sequence still
        incomplete at the end of ``text``, or an empty string.

    Joining the source of every segment and the remainder always reproduces
    ``text``.

    Example::

        >>> decode_segments('hi\x1b[1;4mthere\x1b[')
        ([Segment(source='hi', tokens=(Text(text='hi'),)),
          Segment(source='\x1b[1;4m', tokens=(Simple(name='bright'), Simple(name='underline'))),
          Segment(source='there', tokens=(Text(text='there'),))], '\x1b[')
    """
    if not isinstance(text, str):
        raise TypeError(f'text must be str, got {type(text).__name__}')

    segments: List[Segment] = []
    # the current state began at text[start]; it is an escape sequence when
    # in_escape, otherwise plain text.
    start = 0
    in_escape = False
    for idx, char in enumerate(text):
        if not in_escape:
            if char == ESC:
                if idx > start:
                    run = text[start:idx]
                    segments.append(Segment(run, (Text(run),)))
                start = idx
                in_escape = True
        elif char in FINAL_LETTERS:
            segments.append(Segment(text[start:idx + 1], _decode_escape(text[start:idx], char)))
            start = idx + 1
            in_escape = False

    if in_escape:
        return segments, text[start:]
    if start < len(text):
        run = text[start:]
        segments.append(Segment(run, (Text(run),)))
    return segments, ''


def decode(text: str) -> Tuple[List[Token], str]:
    r"""
    Decode text containing ANSI escape sequences into tokens.

    :param text: Text that may contain terminal escape sequences.
    :raises TypeError: ``text`` is not a string.
    :returns: Tuple of ``(tokens, remainder)``, where ``remainder`` is an escape
        sequence still incomplete at the end of ``text``, or an empty string.

    Each token is one of:

    - :class:`~.Text`: plain, unescaped text.
    - :class:`~.Simple`: a sequence without parameters, such as ``bright``.
    - :class:`~.Parameterized`: cursor movement and 256-color sequences.
    - :class:`~.Unknown`: a complete sequence that is not recognized.
    - :data:`~.INVALID`: a recognized sequence with invalid parameters.

    When decoding a stream, prepend the remainder to the next chunk of data,
    or use a :class:`Decoder`.

    Example::

        >>> decode('Hello, \x1b[1mworld!\x1b[0m')
        ([Text(text='Hello, '), Simple(name='bright'), Text(text='world!'),
          Simple(name='reset')], '')
    """
    segments, remainder = decode_segments(text)
    return [token for segment in segments for token in segment.tokens], remainder


class Decoder:
    r"""
    Decode a stream of text arriving in chunks.

    Holds the remainder between calls, so that a sequence split across chunks
    is decoded once it completes::

        >>> decoder = Decoder()
        >>> decoder.feed('\x1b[3')
        []
        >>> decoder.feed('1mred')
        [Simple(name='red'), Text(text='red')]

    A plain-text run is emitted as soon as its chunk ends, so it may be split
    into several :class:`~.Text` tokens at chunk boundaries.
    """

    def __init__(self) -> None:
        self._remainder = ''

    @property
    def remainder(self) -> str:
        """Incomplete escape sequence waiting for more input."""
        return self._remainder

    def feed_segments(self, chunk: str) -> List[Segment]:
        """
        Decode the next chunk of the stream.

        :param chunk: Next piece of text.
        :returns: Segments completed by this chunk.
        """
        if not isinstance(chunk, str):
            raise TypeError(f'chunk must be str, got {type(chunk).__name__}')
        segments, self._remainder = decode_segments(self._remainder + chunk)
        return segments

    def feed(self, chunk: str) -> List[Token]:
        """
        Decode the next chunk of the stream.

        :param chunk: Next piece of text.
        :returns: Tokens completed by this chunk.
        """
        return [token for segment in self.feed_segments(chunk) for token in segment.tokens]

    def close(self, strict: bool = False) -> str:
        """
        End the stream.

        :param strict: Raise instead of returning a truncated sequence.
        :raises ValueError: ``strict`` is set and the stream ended inside an
            escape sequence.
        :returns: The escape sequence left incomplete, or an empty string.
            The decoder is empty afterwards and may be reused.
        """
        remainder, self._remainder = self._remainder, ''
        if remainder and strict:
            raise ValueError(f'stream ended inside escape sequence {remainder!r}')
        return remainder
