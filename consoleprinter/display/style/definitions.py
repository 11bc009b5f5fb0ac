# display/style/definitions.py

from enum import Enum, IntEnum
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

from rich.style import Style

from ...formats import Format, FormatTag


class Color(IntEnum):
    """The eight-color ANSI palette, numbered as SGR numbers them."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class ColorIntensity(Enum):
    DULL = "dull"
    VIVID = "vivid"


@dataclass(frozen=True)
class Intensity:
    """Bold or normal weight."""
    bold: bool = True

    @property
    def code(self) -> str:
        return '1' if self.bold else '22'

    def rich(self) -> Style:
        return Style(bold=self.bold)


@dataclass(frozen=True)
class Italic:
    on: bool = True

    @property
    def code(self) -> str:
        return '3' if self.on else '23'

    def rich(self) -> Style:
        return Style(italic=self.on)


@dataclass(frozen=True)
class Foreground:
    color: Color
    intensity: ColorIntensity = ColorIntensity.DULL

    @property
    def code(self) -> str:
        base = 90 if self.intensity is ColorIntensity.VIVID else 30
        return str(base + self.color)

    def rich(self) -> Style:
        name = self.color.name.lower()
        if self.intensity is ColorIntensity.VIVID:
            name = f"bright_{name}"
        return Style(color=name)


@dataclass(frozen=True)
class Reset:
    """Back to the terminal's default appearance."""

    @property
    def code(self) -> str:
        return '0'

    def rich(self) -> Style:
        return Style.null()


Attribute = Union[Intensity, Italic, Foreground, Reset]
StyleAttributes = Tuple[Attribute, ...]

BOLD = Intensity(bold=True)


class StyleDefinitions:
    """
    Style catalog: the fixed mapping from format tags to SGR attributes.

    Pure data with no terminal dependency. The renderer asks for the escape
    sequence of a tag right before writing a leaf and resets right after.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')

    CATALOG: Dict[FormatTag, StyleAttributes] = {
        FormatTag.TITLE: (BOLD,),
        FormatTag.STATIC: (),
        FormatTag.ACCOUNT: (BOLD, Foreground(Color.WHITE)),
        FormatTag.PUBKEY: (Foreground(Color.MAGENTA),),
        FormatTag.FILE_PATH: (Italic(True), Foreground(Color.WHITE)),
        FormatTag.KEY: (),
        FormatTag.DERIV: (),
        FormatTag.MNEMONIC: (BOLD, Foreground(Color.CYAN)),
        FormatTag.ADDRESS: (BOLD, Foreground(Color.BLUE)),
        FormatTag.INTERNAL_ADDRESS: (BOLD, Foreground(Color.BLACK, ColorIntensity.VIVID)),
        FormatTag.TX_HASH: (Foreground(Color.MAGENTA, ColorIntensity.VIVID),),
        FormatTag.POSITIVE_AMOUNT: (BOLD, Foreground(Color.GREEN)),
        FormatTag.NEGATIVE_AMOUNT: (BOLD, Foreground(Color.RED)),
        FormatTag.FEE: (),
        FormatTag.BOOLEAN_TRUE: (BOLD, Foreground(Color.GREEN)),
        FormatTag.BOOLEAN_FALSE: (BOLD, Foreground(Color.RED)),
        FormatTag.CASH_UNIT: (Foreground(Color.GREEN),),
        FormatTag.BITCOIN_UNIT: (Foreground(Color.CYAN),),
        FormatTag.TESTNET_MARKER: (Foreground(Color.YELLOW, ColorIntensity.VIVID),),
        FormatTag.ERROR: (Foreground(Color.RED),),
    }

    RESET = FMT('0')

    def get_style(self, tag: FormatTag) -> StyleAttributes:
        """Return the ordered attribute list for a tag."""
        return self.CATALOG[tag]

    def get_format(self, fmt: Format) -> str:
        """Return the SGR escape that opens a leaf, or '' for unstyled tags."""
        return self.sgr(self.get_style(fmt.tag))

    def sgr(self, attributes: Sequence[Attribute]) -> str:
        """Combine attributes into a single escape sequence."""
        if not attributes:
            return ''
        return self.FMT(';'.join(attr.code for attr in attributes))

    def get_rich_style(self, tag: FormatTag) -> Style:
        """Return the same presentation as a Rich style, for Rich renderables."""
        style = Style()
        for attr in self.get_style(tag):
            style = attr.rich() if isinstance(attr, Reset) else style + attr.rich()
        return style


def style(tag: FormatTag) -> StyleAttributes:
    """Module-level access to the catalog."""
    return StyleDefinitions.CATALOG[tag]
