"""
Select Graphic Rendition code table.

This code generated by antsy/bin/update-tables.py on 2026-10-19 09:41:07 UTC.
"""
COLORS = (
    'black',
    'red',
    'green',
    'yellow',
    'blue',
    'magenta',
    'cyan',
    'white',
)

SGR_CODES = {
    0: 'reset',  # default rendition
    1: 'bright',  # bold or increased intensity
    2: 'faint',  # decreased intensity
    3: 'italic',  # italicized
    4: 'underline',  # singly underlined
    5: 'blink_slow',  # slowly blinking
    6: 'blink_rapid',  # rapidly blinking
    7: 'inverse',  # negative image
    8: 'conceal',  # concealed characters
    9: 'crossed_out',  # crossed-out
    10: 'primary_font',  # primary (default) font
    11: 'font_1',  # alternative font 1
    12: 'font_2',  # alternative font 2
    13: 'font_3',  # alternative font 3
    14: 'font_4',  # alternative font 4
    15: 'font_5',  # alternative font 5
    16: 'font_6',  # alternative font 6
    17: 'font_7',  # alternative font 7
    18: 'font_8',  # alternative font 8
    19: 'font_9',  # alternative font 9
    22: 'normal',  # normal colour or normal intensity
    23: 'not_italic',  # not italicized, not fraktur
    24: 'no_underline',  # not underlined
    25: 'blink_off',  # steady (not blinking)
    27: 'inverse_off',  # positive image
    30: 'black',  # display black
    31: 'red',  # display red
    32: 'green',  # display green
    33: 'yellow',  # display yellow
    34: 'blue',  # display blue
    35: 'magenta',  # display magenta
    36: 'cyan',  # display cyan
    37: 'white',  # display white
    39: 'default_color',  # default display colour
    40: 'black_background',  # black background
    41: 'red_background',  # red background
    42: 'green_background',  # green background
    43: 'yellow_background',  # yellow background
    44: 'blue_background',  # blue background
    45: 'magenta_background',  # magenta background
    46: 'cyan_background',  # cyan background
    47: 'white_background',  # white background
    49: 'default_background',  # default background colour
    51: 'framed',  # framed
    52: 'encircled',  # encircled
    53: 'overlined',  # overlined
    54: 'not_framed_encircled',  # not framed, not encircled
    55: 'not_overlined',  # not overlined
    90: 'light_black',  # bright black
    91: 'light_red',  # bright red
    92: 'light_green',  # bright green
    93: 'light_yellow',  # bright yellow
    94: 'light_blue',  # bright blue
    95: 'light_magenta',  # bright magenta
    96: 'light_cyan',  # bright cyan
    97: 'light_white',  # bright white
    100: 'light_black_background',  # bright black background
    101: 'light_red_background',  # bright red background
    102: 'light_green_background',  # bright green background
    103: 'light_yellow_background',  # bright yellow background
    104: 'light_blue_background',  # bright blue background
    105: 'light_magenta_background',  # bright magenta background
    106: 'light_cyan_background',  # bright cyan background
    107: 'light_white_background',  # bright white background
}
