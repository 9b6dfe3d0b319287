"""Tests for decode() and decode_segments()."""
import pytest

from antsy import (
    decode,
    decode_segments,
    Segment,
    Text,
    Simple,
    Parameterized,
    Unknown,
    INVALID,
)


def test_remainder_when_sequence_is_incomplete():
    assert decode('hello\x1b[') == ([Text('hello')], '\x1b[')
    assert decode('\x1b') == ([], '\x1b')
    assert decode('\x1b[38;5;12') == ([], '\x1b[38;5;12')
    assert decode('a\x1b[1mb\x1b[0') == ([Text('a'), Simple('bright'), Text('b')], '\x1b[0')


def test_escape_ends_text_run():
    # ESC directly after ESC stays part of the sequence being collected
    assert decode('\x1b\x1b[1m') == ([Unknown('\x1b\x1b[1m')], '')
    # text between two sequences
    assert decode('\x1b[1mx\x1b[0m') == ([Simple('bright'), Text('x'), Simple('reset')], '')
    # consecutive sequences emit no empty text
    assert decode('\x1b[1m\x1b[4m') == ([Simple('bright'), Simple('underline')], '')


class TestCursor:
    """Tests for cursor position and movement sequences."""

    def test_home(self):
        assert decode('\x1b[H') == ([Simple('home')], '')
        assert decode('\x1b[f') == ([Simple('home')], '')

    @pytest.mark.parametrize('final', ['H', 'f'])
    def test_cursor_position(self, final):
        assert decode(f'\x1b[1;2{final}') == ([Parameterized('cursor', (1, 2))], '')
        assert decode(f'\x1b[12;34{final}') == ([Parameterized('cursor', (12, 34))], '')
        assert decode(f'\x1b[0;0{final}') == ([Parameterized('cursor', (0, 0))], '')

    @pytest.mark.parametrize('params', [
        '1',        # single parameter
        '1;2;3',    # three parameters
        ';5',       # empty line
        '5;',       # empty column
        '1;#2',     # not a number
        '-1;2',     # signed
        '+1;2',
        '1; 2',     # whitespace
        '1_0;2',    # underscore
    ])
    def test_cursor_position_invalid(self, params):
        assert decode(f'\x1b[{params}H') == ([INVALID], '')

    @pytest.mark.parametrize('final,name', [
        ('A', 'cursor_up'),
        ('B', 'cursor_down'),
        ('C', 'cursor_right'),
        ('D', 'cursor_left'),
    ])
    def test_cursor_movement(self, final, name):
        assert decode(f'\x1b[{final}') == ([Parameterized(name, (1,))], '')
        assert decode(f'\x1b[1{final}') == ([Parameterized(name, (1,))], '')
        assert decode(f'\x1b[12{final}') == ([Parameterized(name, (12,))], '')
        assert decode(f'\x1b[007{final}') == ([Parameterized(name, (7,))], '')

    @pytest.mark.parametrize('params', ['0', '00', '-1', '+2', '1;2', '?1', ' 1', '1.5'])
    def test_cursor_movement_invalid(self, params):
        assert decode(f'\x1b[{params}A') == ([INVALID], '')

    def test_movement_without_csi_is_unknown(self):
        # ESC A, ESC H and ESC D are not control sequences
        assert decode('\x1bA') == ([Unknown('\x1bA')], '')
        assert decode('\x1bH') == ([Unknown('\x1bH')], '')
        assert decode('\x1bD') == ([Unknown('\x1bD')], '')


class TestGraphicRendition:
    """Tests for SGR sequences."""

    def test_single_codes(self):
        assert decode('\x1b[0m') == ([Simple('reset')], '')
        assert decode('\x1b[1m') == ([Simple('bright')], '')
        assert decode('\x1b[31m') == ([Simple('red')], '')
        assert decode('\x1b[107m') == ([Simple('light_white_background')], '')
        # leading zeros
        assert decode('\x1b[01m') == ([Simple('bright')], '')

    def test_combined_codes_in_order(self):
        assert decode('\x1b[1;4;31;44m') == ([
            Simple('bright'), Simple('underline'), Simple('red'), Simple('blue_background'),
        ], '')
        assert decode('\x1b[4;1m') == ([Simple('underline'), Simple('bright')], '')

    def test_unknown_codes_are_invalid(self):
        assert decode('\x1b[123m') == ([INVALID], '')
        assert decode('\x1b[123;456m') == ([INVALID], '')
        for code in (21, 26, 28, 29, 38, 48, 50, 56, 98, 108):
            assert decode(f'\x1b[{code}m') == ([INVALID], ''), code

    def test_one_invalid_code_invalidates_all(self):
        assert decode('\x1b[1;123;4m') == ([INVALID], '')
        assert decode('\x1b[1;;4m') == ([INVALID], '')
        assert decode('\x1b[1;4;m') == ([INVALID], '')

    def test_empty_parameters_are_invalid(self):
        assert decode('\x1b[m') == ([INVALID], '')

    def test_256_color(self):
        assert decode('\x1b[38;5;123m') == ([Parameterized('color', (123,))], '')
        assert decode('\x1b[48;5;123m') == ([Parameterized('color_background', (123,))], '')
        assert decode('\x1b[38;5;0m') == ([Parameterized('color', (0,))], '')
        assert decode('\x1b[48;5;255m') == ([Parameterized('color_background', (255,))], '')

    @pytest.mark.parametrize('index', ['256', '999', '', '-1', '1.', '1;1', '12 ', '#1'])
    def test_256_color_invalid(self, index):
        assert decode(f'\x1b[38;5;{index}m') == ([INVALID], '')
        assert decode(f'\x1b[48;5;{index}m') == ([INVALID], '')

    def test_truecolor_is_invalid(self):
        assert decode('\x1b[38;2;255;0;0m') == ([INVALID], '')

    def test_sgr_without_csi_is_unknown(self):
        assert decode('\x1bm') == ([Unknown('\x1bm')], '')


class TestUnknown:
    """Tests for sequences that are complete but not recognized."""

    def test_private_mode(self):
        assert decode('\x1b[=0h') == ([Unknown('\x1b[=0h')], '')
        assert decode('\x1b[?25l') == ([Unknown('\x1b[?25l')], '')

    def test_erase(self):
        assert decode('\x1b[2J\x1b[K') == ([Unknown('\x1b[2J'), Unknown('\x1b[K')], '')

    def test_unnamed_cursor_movement(self):
        assert decode('\x1b[2E') == ([Unknown('\x1b[2E')], '')
        assert decode('\x1b[5G') == ([Unknown('\x1b[5G')], '')

    def test_two_character_sequences(self):
        assert decode('\x1bc') == ([Unknown('\x1bc')], '')
        assert decode('\x1bM') == ([Unknown('\x1bM')], '')

    def test_non_letters_continue_sequence(self):
        # '~' is a final byte of ECMA-48, but only letters complete a sequence
        assert decode('\x1b[15~x') == ([Unknown('\x1b[15~x')], '')
        assert decode('\x1b[15~') == ([], '\x1b[15~')
        # as does the text following a character set designation
        assert decode('\x1b(0q') == ([Unknown('\x1b(0q')], '')

    def test_decoding_continues_after_unknown(self):
        assert decode('\x1b[?1049hvim\x1b[1m') == (
            [Unknown('\x1b[?1049h'), Text('vim'), Simple('bright')], '')


def test_decoding_continues_after_invalid():
    assert decode('a\x1b[1;2;3Hb\x1b[0Ac\x1b[999md\x1b[1m') == (
        [Text('a'), INVALID, Text('b'), INVALID, Text('c'), INVALID, Text('d'),
         Simple('bright')], '')


def test_sample_output(sample_output):
    tokens, remainder = decode(sample_output)
    assert remainder == ''
    assert tokens == [
        Simple('bright'), Text('build'), Simple('reset'), Text(': compiling '),
        Parameterized('color', (208,)), Text('antsy'), Simple('reset'), Text('\r\n'),
        Unknown('\x1b[2K'), Simple('bright'), Simple('green'), Text('   ok'),
        Simple('reset'), Text('  tokens.py\r\n'),
        Simple('yellow'), Simple('red_background'), Text('warning'),
        Simple('default_color'), Simple('default_background'), Text(': unused import\r\n'),
        Simple('home'), Parameterized('cursor', (12, 40)),
        Parameterized('cursor_up', (3,)), Parameterized('cursor_left', (1,)),
        Unknown('\x1b[?25l'), Parameterized('color_background', (17,)), Text(' '),
        Simple('reset'), Text('café 中文'), INVALID, Text('!'),
    ]


def test_no_empty_text(sample_output):
    for text in (sample_output, '\x1b[1m\x1b[0m', '\x1b', 'x\x1b[1m', '\x1b[1mx'):
        tokens, _ = decode(text)
        assert Text('') not in tokens


class TestSegments:
    """Tests for decode_segments()."""

    def test_segments(self):
        assert decode_segments('hi\x1b[1;4mthere\x1b[') == ([
            Segment('hi', (Text('hi'),)),
            Segment('\x1b[1;4m', (Simple('bright'), Simple('underline'))),
            Segment('there', (Text('there'),)),
        ], '\x1b[')

    def test_invalid_and_unknown_keep_source(self):
        assert decode_segments('\x1b[1H\x1b[=0h') == ([
            Segment('\x1b[1H', (INVALID,)),
            Segment('\x1b[=0h', (Unknown('\x1b[=0h'),)),
        ], '')

    @pytest.mark.parametrize('text', [
        '',
        'plain',
        '\x1b',
        'hello\x1b[',
        '\x1b[1;2;3H\x1b[123;456m\x1b[=0h',
        '\x1b\x1b\x1b[m',
        'a\x1b[38;5;999mb\x1b[48;5;1mc\x1b[1;31',
    ])
    def test_reconstruction(self, text):
        segments, remainder = decode_segments(text)
        assert ''.join(segment.source for segment in segments) + remainder == text

    def test_reconstruction_of_sample(self, sample_output):
        segments, remainder = decode_segments(sample_output)
        assert ''.join(segment.source for segment in segments) + remainder == sample_output

    def test_agrees_with_decode(self, sample_output):
        segments, remainder = decode_segments(sample_output)
        tokens = [token for segment in segments for token in segment.tokens]
        assert (tokens, remainder) == decode(sample_output)

    def test_segments_are_never_empty(self, sample_output):
        segments, _ = decode_segments(sample_output)
        assert all(segment.source and segment.tokens for segment in segments)


@pytest.mark.parametrize('func', [decode, decode_segments])
@pytest.mark.parametrize('value', [b'\x1b[1m', None, 42, ['\x1b[1m']])
def test_type_error(func, value):
    with pytest.raises(TypeError):
        func(value)
