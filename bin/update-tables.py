#!/usr/bin/env python
"""
Update the SGR code table for antsy.  This is code generation using jinja2.

$ python bin/update-tables.py

https://github.com/schrockwell/antsy
"""
from __future__ import annotations

# std imports
import os
import datetime
from pathlib import Path
from dataclasses import field, dataclass

from typing import Any, Iterator, Sequence

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

# 3rd party
import jinja2

PATH_UP = os.path.relpath(os.path.join(os.path.dirname(__file__), os.path.pardir))
# "antsy/bin/update-tables.py", even on Windows
THIS_FILEPATH = ('antsy/' +
                 Path(__file__).resolve().relative_to(Path(PATH_UP).resolve()).as_posix())

JINJA_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(os.path.join(PATH_UP, 'code_templates')),
    keep_trailing_newline=True)
UTC_NOW = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")

COLORS = ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white')

# Attributes with a single fixed code, named after Elixir's IO.ANSI where it
# has a name for them.  Descriptions follow ECMA-48, 8.3.117.
ATTRIBUTES = (
    (0, 'reset', 'default rendition'),
    (1, 'bright', 'bold or increased intensity'),
    (2, 'faint', 'decreased intensity'),
    (3, 'italic', 'italicized'),
    (4, 'underline', 'singly underlined'),
    (5, 'blink_slow', 'slowly blinking'),
    (6, 'blink_rapid', 'rapidly blinking'),
    (7, 'inverse', 'negative image'),
    (8, 'conceal', 'concealed characters'),
    (9, 'crossed_out', 'crossed-out'),
    (10, 'primary_font', 'primary (default) font'),
    *((10 + n, f'font_{n}', f'alternative font {n}') for n in range(1, 10)),
    (22, 'normal', 'normal colour or normal intensity'),
    (23, 'not_italic', 'not italicized, not fraktur'),
    (24, 'no_underline', 'not underlined'),
    (25, 'blink_off', 'steady (not blinking)'),
    (27, 'inverse_off', 'positive image'),
    (39, 'default_color', 'default display colour'),
    (49, 'default_background', 'default background colour'),
    (51, 'framed', 'framed'),
    (52, 'encircled', 'encircled'),
    (53, 'overlined', 'overlined'),
    (54, 'not_framed_encircled', 'not framed, not encircled'),
    (55, 'not_overlined', 'not overlined'),
)


@dataclass(order=True, frozen=True)
class TableEntry:
    """An entry of the SGR table."""
    code: int
    name: str
    comment: str = ''

    def to_dict(self) -> dict[str, Any]:
        return {'code': self.code, 'name': self.name, 'comment': self.comment}


def color_entries() -> Iterator[TableEntry]:
    """Yield the four codes of each of the eight base colors."""
    for idx, color in enumerate(COLORS):
        yield TableEntry(30 + idx, color, f'display {color}')
        yield TableEntry(40 + idx, f'{color}_background', f'{color} background')
        yield TableEntry(90 + idx, f'light_{color}', f'bright {color}')
        yield TableEntry(100 + idx, f'light_{color}_background', f'bright {color} background')


def fetch_table_sgr_data() -> Sequence[TableEntry]:
    """Return all table entries, sorted by code."""
    table = sorted([TableEntry(*attr) for attr in ATTRIBUTES] + list(color_entries()))
    codes = [entry.code for entry in table]
    names = [entry.name for entry in table]
    assert len(set(codes)) == len(codes), ('duplicate SGR code', codes)
    assert len(set(names)) == len(names), ('duplicate SGR name', names)
    return table


@dataclass
class RenderDefinition:
    """A jinja2 template and the file it renders to."""
    jinja_filename: str
    output_filename: str
    render_context: dict[str, Any]

    _template: jinja2.Template = field(init=False, repr=False)
    _render_context: dict[str, Any] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._template = JINJA_ENV.get_template(self.jinja_filename)
        self._render_context = {
            'utc_now': UTC_NOW,
            'this_filepath': THIS_FILEPATH,
            **self.render_context,
        }

    @classmethod
    def new(cls, filename: str, table: Sequence[TableEntry]) -> Self:
        return cls(
            jinja_filename=f'{filename}.j2',
            output_filename=os.path.join(PATH_UP, 'antsy', filename),
            render_context={
                'colors': COLORS,
                'table': [entry.to_dict() for entry in table],
            },
        )

    def generate(self) -> Iterator[str]:
        """Just like jinja2.Template.generate."""
        return self._template.generate(self._render_context)


def main() -> None:
    """Update the SGR table."""
    render_def = RenderDefinition.new('table_sgr.py', fetch_table_sgr_data())
    with open(render_def.output_filename, 'w', encoding='utf-8', newline='\n') as fout:
        print(f'write {render_def.output_filename}: ', flush=True, end='')
        for data in render_def.generate():
            fout.write(data)
        print('ok')


if __name__ == '__main__':
    main()
