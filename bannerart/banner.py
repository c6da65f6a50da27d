"""Loading banner font files and looking up glyph rows."""

from __future__ import annotations

from pathlib import Path

GLYPH_HEIGHT = 8
FIRST_CHAR = 32
DEFAULT_BANNER = "standard"
DEFAULT_DIRECTORY = "file"

_CRLF_BANNERS = frozenset({"thinkertoy"})

Glyphs = dict[str, list[str]]


def banner_path(name: str = DEFAULT_BANNER, directory: str | Path = DEFAULT_DIRECTORY) -> Path:
    """Return the path of the banner file called ``name``."""
    return Path(directory) / f"{name}.txt"


def parse_banner(text: str, separator: str = "\n") -> Glyphs:
    """Parse banner file contents into a mapping from character to its rows.

    The file opens with a blank line; each glyph is eight rows followed by
    a blank separator line, starting with the space character.
    """
    lines = text.split(separator)
    glyphs: Glyphs = {}
    starts = range(1, len(lines) - GLYPH_HEIGHT, GLYPH_HEIGHT + 1)
    for offset, start in enumerate(starts):
        char = chr((FIRST_CHAR + offset) % 256)
        glyphs[char] = lines[start:start + GLYPH_HEIGHT]
    return glyphs


def load_banner(name: str = DEFAULT_BANNER, directory: str | Path = DEFAULT_DIRECTORY) -> Glyphs:
    """Read and parse the banner file called ``name``.

    Raises FileNotFoundError when the banner file cannot be read.
    """
    path = banner_path(name, directory)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileNotFoundError(f"not an ascii banner file: {path}") from exc
    separator = "\r\n" if name in _CRLF_BANNERS else "\n"
    return parse_banner(raw.decode("utf-8"), separator)


def glyph_row(char: str, row: int, glyphs: Glyphs) -> str:
    """Return row ``row`` of the glyph for ``char``, or "" if it has none."""
    rows = glyphs.get(char)
    if rows is None:
        return ""
    return rows[row]


def split_input(text: str) -> list[str]:
    """Split input on literal backslash-n sequences.

    When every piece is empty (the input is only line breaks) the last
    piece is dropped, so each break yields exactly one blank line.
    """
    parts = text.split("\\n")
    if not any(parts):
        parts = parts[:-1]
    return parts


def is_printable(text: str) -> bool:
    """Tell whether every character lies in the printable ASCII range."""
    return all(32 <= ord(char) <= 126 for char in text)