"""
antsy module, decodes ANSI escape sequences.

https://github.com/schrockwell/antsy
"""
# re-export the decoder and token types from the top-level module path, so
# that 'from antsy.decoder import decode' may be written 'from antsy import
# decode'.

# local
from .tokens import (
    Text,
    Simple,
    Parameterized,
    Unknown,
    Invalid,
    INVALID,
    Token,
    Segment)
from .decoder import (
    decode,
    decode_segments,
    Decoder)
from .table_sgr import SGR_CODES, COLORS

# The __all__ attribute defines the items exported from statement, 'from antsy
# import *', but also to say, "This is the public API".
__all__ = ('decode', 'decode_segments', 'Decoder',
           'Text', 'Simple', 'Parameterized', 'Unknown', 'Invalid', 'INVALID',
           'Token', 'Segment', 'SGR_CODES', 'COLORS')
__version__ = '0.2.1'
