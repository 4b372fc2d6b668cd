from colorama import Fore, Style
import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)

COLOR_MAP = {
    "blue": Fore.BLUE,
    "cyan": Fore.CYAN,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "red": Fore.RED,
    "magenta": Fore.MAGENTA,
    "white": Fore.WHITE,
}


def colorize(text: str, color: str = "white") -> str:
    return f"{COLOR_MAP.get(color, Fore.WHITE)}{text}{Style.RESET_ALL}"


def console_print(text, color="white", flush=False):
    print(colorize(text, color), flush=flush)
    logger.debug(f"Console print: {text}")


def _band(value: float, lo: float, span: float, count: int) -> int:
    if span <= 0:
        return 0
    return min(int((value - lo) / span * count), count - 1)


def render_ascii(rows: Sequence[Sequence[float]], glyphs: str = " .:-=+*#%@",
                 colors: Sequence[str] = (), use_color: bool = True) -> List[str]:
    """
    Shade a height map with a glyph ramp, lowest values first.

    Shading is relative to the map's own min/max; the values themselves
    are left untouched.
    """
    if not rows or not rows[0]:
        return []
    if not glyphs:
        raise ValueError("glyph ramp must not be empty")

    lo = min(min(row) for row in rows)
    hi = max(max(row) for row in rows)
    span = hi - lo

    lines = []
    for row in rows:
        chars = []
        for value in row:
            ch = glyphs[_band(value, lo, span, len(glyphs))]
            if use_color and colors:
                ch = colorize(ch, colors[_band(value, lo, span, len(colors))])
            chars.append(ch)
        lines.append("".join(chars))
    return lines
