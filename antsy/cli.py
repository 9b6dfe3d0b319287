"""
Print the tokens decoded from terminal output.

Reads files, or standard input, in chunks and decodes them incrementally,
printing one line for each token::

    $ printf 'hi \033[1;31mthere\033[0m' | antsy
    text 'hi '
    bright
    red
    text 'there'
    reset
"""
from __future__ import annotations

# std imports
import os
import sys
import codecs
import argparse
import functools
import contextlib
import warnings

from typing import BinaryIO, Iterator, List, Optional, Sequence

# 3rd party
import blessed

# local
from .decoder import Decoder
from .tokens import Parameterized, Segment, Simple, Text, Token, Unknown

#: print function alias, flushed so that tokens appear as input arrives.
echo = functools.partial(print, flush=True)

#: number of bytes read from input at a time.
CHUNK_SIZE = int(os.environ.get('ANTSY_CHUNK_SIZE', '4096'))

#: force_styling argument of blessed.Terminal for each --color choice.
FORCE_STYLING = {'auto': False, 'always': True, 'never': None}


def format_token(term: blessed.Terminal, token: Token) -> str:
    """Return a one-line description of token, styled for term."""
    if isinstance(token, Text):
        return f'{term.green("text")} {token.text!r}'
    if isinstance(token, Simple):
        return term.bold(token.name)
    if isinstance(token, Parameterized):
        return f'{term.bold(token.name)} {" ".join(map(str, token.params))}'
    if isinstance(token, Unknown):
        return f'{term.yellow("unknown")} {token.sequence!r}'
    return term.red('invalid')


def format_segment(term: blessed.Terminal, segment: Segment) -> str:
    """Return a one-line description of segment, its source and tokens."""
    tokens = ', '.join(format_token(term, token) for token in segment.tokens)
    return f'{segment.source!r} {term.bright_black("->")} {tokens}'


@contextlib.contextmanager
def open_input(filename: str) -> Iterator[BinaryIO]:
    """Open filename for binary reading, '-' meaning standard input."""
    if filename == '-':
        yield sys.stdin.buffer
    else:
        with open(filename, 'rb') as fin:
            yield fin


def iter_segments(stream: BinaryIO, encoding: str, chunk_size: int,
                  decoder: Decoder) -> Iterator[Segment]:
    """
    Decode a binary stream, chunk by chunk.

    :param stream: Binary input.
    :param encoding: Text encoding of the stream, undecodable bytes are replaced.
    :param chunk_size: Number of bytes to read at a time.
    :param decoder: Holds any escape sequence split between chunks.
    :yields: Each segment as soon as it is complete.
    """
    text_decoder = codecs.getincrementaldecoder(encoding)(errors='replace')
    while True:
        data = stream.read(chunk_size)
        final = not data
        yield from decoder.feed_segments(text_decoder.decode(data, final=final))
        if final:
            break


def run(files: Sequence[str], encoding: str, chunk_size: int, color: str,
        source: bool, strict: bool) -> int:
    """Program entry point, returns exit status."""
    term = blessed.Terminal(stream=sys.stdout, force_styling=FORCE_STYLING[color])
    status = 0
    for filename in files:
        decoder = Decoder()
        with open_input(filename) as stream:
            for segment in iter_segments(stream, encoding, chunk_size, decoder):
                if source:
                    echo(format_segment(term, segment))
                else:
                    for token in segment.tokens:
                        echo(format_token(term, token))
        remainder = decoder.close()
        if remainder:
            name = '<stdin>' if filename == '-' else filename
            warnings.warn(f'{name}: stream ended inside escape sequence {remainder!r}')
            if strict:
                status = 1
    return status


def parse_args(argv: Optional[List[str]] = None) -> dict:
    """Parse command line arguments."""
    args = argparse.ArgumentParser(
        prog='antsy', description='Print the tokens decoded from terminal output.')
    args.add_argument('files', nargs='*', default=['-'],
                      help="Files to decode, '-' for standard input (default).")
    args.add_argument('--encoding', default='utf-8',
                      help='Text encoding of input.')
    args.add_argument('--chunk-size', type=int, default=CHUNK_SIZE,
                      help='Bytes read at a time (environment ANTSY_CHUNK_SIZE).')
    args.add_argument('--color', default='auto', choices=tuple(FORCE_STYLING),
                      help='Style output for a terminal.')
    args.add_argument('--source', action='store_true',
                      help='Print the source text of each sequence with its tokens.')
    args.add_argument('--strict', action='store_true',
                      help='Exit with status 1 when input ends inside an escape sequence.')
    parsed = args.parse_args(argv)
    if parsed.chunk_size < 1:
        args.error('--chunk-size must be positive')
    return vars(parsed)


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    return run(**parse_args(argv))


if __name__ == '__main__':
    sys.exit(main())
