"""
Display styles - colour palettes for highlighted names and tables.
"""

from dataclasses import dataclass
from typing import Optional

from rich import box
from rich.table import Table
from rich.text import Text

# name: (border, odd rows, even rows, highlight)
PALETTES = {
    'red': ('#D32F2F', '#FFCDD2', '#EF9A9A', '#EF9A9A'),
    'magenta': ('#C2185B', '#F8BBD0', '#F48FB1', '#F48FB1'),
    'purple': ('#7B1FA2', '#E1BEE7', '#CE93D8', '#CE93D8'),
    'blue': ('#1976D2', '#E3F2FD', '#BBDEFB', '#1976D2'),
    'cyan': ('#00BFCF', '#E0F7FA', '#B2EBF2', '#00BFCF'),
    'green': ('#43A047', '#E8F5E9', '#C8E6C9', '#43A047'),
    'yellow': ('#FBC02D', '#FFF9C4', '#FFF59D', '#FBC02D'),
    'orange': ('#F57C00', '#FFF3E0', '#FFE0B2', '#F57C00'),
    'white': ('#FFFFFF', '#F0F0F0', '#E0E0E0', '#FFFFFF'),
    'grey': ('#9E9E9E', '#F5F5F5', '#EEEEEE', '#9E9E9E'),
    'navy': ('#001F3F', '#CFE2F3', '#A9CCE3', '#001F3F'),
    'black': ('#000000', '#333333', '#444444', '#000000'),
}

STYLE_NAMES = tuple(PALETTES)


@dataclass(frozen=True)
class Style:
    """An immutable palette. The default instance has no colours at all."""

    name: str = ''
    border: Optional[str] = None
    odd_rows: Optional[str] = None
    even_rows: Optional[str] = None
    highlight_color: Optional[str] = None
    no_border: bool = False
    no_color: bool = False

    @property
    def colored(self) -> bool:
        return bool(self.name) and not self.no_color

    def highlight(self, text) -> Text:
        """Render a name in the highlight colour."""
        if not self.colored:
            return Text(str(text))
        return Text(str(text), style=self.highlight_color)

    def table(self, *columns: tuple[str, str]) -> Table:
        """
        Build an empty table with this style's border and row colours.

        Args:
            columns: (header, justify) pairs, justify being "left",
                "center" or "right"
        """
        table = Table(
            box=None if self.no_border else box.ROUNDED,
            border_style=self.border if self.colored else 'none',
            header_style='bold',
            row_styles=[self.even_rows, self.odd_rows] if self.colored else None,
            padding=(0, 3),
        )
        for header, justify in columns:
            table.add_column(header, justify=justify)
        return table


def style_from_flag(name: str, no_border: bool = False, no_color: bool = False) -> Style:
    """Look up a palette by name; unknown or empty names give the colourless style."""
    palette = PALETTES.get(name or '')
    if palette is None:
        return Style(no_border=no_border, no_color=no_color)

    border, odd_rows, even_rows, highlight = palette
    return Style(
        name=name,
        border=border,
        odd_rows=odd_rows,
        even_rows=even_rows,
        highlight_color=highlight,
        no_border=no_border,
        no_color=no_color,
    )
