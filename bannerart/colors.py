"""Named colours and their terminal escape sequences."""

from __future__ import annotations

RESET = "\033[0m"

# name, escape code, rgb form, hex form, hsl form
_TABLE = (
    ("black", "\033[30m", "rgb(0, 0, 0)", "#000000", "hsl(0, 0%, 0%)"),
    ("green", "\033[32m", "rgb(0, 255, 0)", "#00ff00", "hsl(120, 100%, 50%)"),
    ("red", "\033[31m", "rgb(255, 0, 0)", "#ff0000", "hsl(0, 100%, 50%)"),
    ("yellow", "\033[33m", "rgb(255, 255, 0)", "#ffff00", "hsl(60, 100%, 50%)"),
    ("blue", "\033[34m", "rgb(0, 0, 255)", "#0000ff", "hsl(240, 100%, 50%)"),
    ("cyan", "\033[36m", "rgb(0, 255, 255)", "#00ffff", "hsl(180, 100%, 50%)"),
    ("white", "\033[37m", "rgb(255, 255, 255)", "#ffffff", "hsl(0, 0%, 100%)"),
    ("silver", "\033[90m", "rgb(192, 192, 192)", "#c0c0c0", "hsl(0, 0%, 75%)"),
    ("grey", "\033[37;90m", "rgb(128, 128, 128)", "#808080", "hsl(0, 0%, 50%)"),
    ("chartreuse", "\033[92m", "rgb(127, 255, 0)", "#7fff00", "hsl(90, 100%, 50%)"),
    ("brown", "\033[33;22m", "rgb(165, 42, 42)", "#a52a2a", "hsl(0, 60%, 41%)"),
    ("purple", "\033[35;22m", "rgb(128, 0, 128)", "#800080", "hsl(300, 100%, 25%)"),
    ("gold", "\033[33;1m", "rgb(255, 215, 0)", "#ffd700", "hsl(51, 100%, 50%)"),
    ("pink", "\033[95m", "rgb(255, 192, 203)", "#ffc0cb", "hsl(350, 100%, 88%)"),
    ("salmon", "\033[38;2;255;160;122m", "rgb(250, 128, 114)", "#fa8072", "hsl(6, 93%, 71%)"),
    ("olive", "\033[38;2;128;128;0m", "rgb(128, 128, 0)", "#808000", "hsl(60, 100%, 25%)"),
    ("turquoise", "\033[38;2;64;224;208m", "rgb(64, 224, 208)", "#40e0d0", "hsl(174, 72%, 56%)"),
    ("dark-grey", "\033[38;2;64;64;64m", "rgb(64, 64, 64)", "#404040", "hsl(0, 0%, 25%)"),
    ("yellow-green", "\033[38;2;154;205;50m", "rgb(154, 205, 50)", "#9acd32", "hsl(80, 61%, 50%)"),
    ("navy-blue", "\033[38;2;0;0;128m", "rgb(0, 0, 128)", "#000080", "hsl(240, 100%, 25%)"),
    ("fucshia", "\033[38;2;255;0;255m", "rgb(255, 0, 255)", "#ff00ff", "hsl(300, 100%, 50%)"),
    ("olive-green", "\033[38;2;85;107;47m", "rgb(85, 107, 47)", "#556b2f", "hsl(82, 39%, 30%)"),
    ("saffron", "\033[38;2;244;196;48m", "rgb(244, 196, 48)", "#f4c430", "hsl(49, 89%, 59%)"),
    ("sky-blue", "\033[38;2;135;206;235m", "rgb(135, 206, 235)", "#87ceeb", "hsl(197, 71%, 73%)"),
    ("dark-red", "\033[38;2;139;0;0m", "rgb(139, 0, 0)", "#8b0000", "hsl(0, 100%, 27%)"),
    ("orange", "\033[38;5;208m", "rgb(255, 165, 0)", "#ffa500", "hsl(39, 100%, 50%)"),
)

COLOR_NAMES = tuple(row[0] for row in _TABLE)

_CODES = {
    alias: code
    for name, code, rgb, hex_form, hsl in _TABLE
    for alias in (name, rgb, hex_form, hsl)
}

# The validity check accepts orange's hex form only without its leading '#'.
_SUPPORTED = (frozenset(_CODES) - {"#ffa500"}) | {"ffa500"}


def ansi_code(color: str) -> str | None:
    """Return the escape sequence for a colour name or rgb/hex/hsl form."""
    return _CODES.get(color)


def colorize(color: str, text: str) -> str:
    """Wrap ``text`` in the colour's escape sequence.

    A colour with no escape sequence produces an empty string.
    """
    code = ansi_code(color)
    if code is None:
        return ""
    return f"{code}{text}{RESET}"


def is_supported(color: str) -> bool:
    """Tell whether ``color`` is accepted as a --color value."""
    return color in _SUPPORTED