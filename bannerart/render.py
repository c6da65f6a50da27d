"""Rendering text as banner art, plain, coloured or into a file."""

from __future__ import annotations

from collections.abc import Callable, Container, Iterable
from pathlib import Path

from .banner import GLYPH_HEIGHT, Glyphs, glyph_row, is_printable, split_input
from .colors import colorize, is_supported


class RenderError(ValueError):
    """Raised when text or a colour cannot be rendered.

    ``lines`` holds the input lines that could not be displayed.
    """

    def __init__(self, message: str, lines: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.lines = tuple(lines)


def _check_printable(lines: list[str]) -> None:
    bad = [line for line in lines if not is_printable(line)]
    if bad:
        raise RenderError(f"non-displayable character in {bad[0]!r}", bad)


def _block(line: str, cell: Callable[[str, int], str]) -> str:
    """Render one input line as eight rows, or one blank row if it is empty."""
    if not line:
        return "\n"
    return "".join(
        "".join(cell(char, row) for char in line) + "\n" for row in range(GLYPH_HEIGHT)
    )


def render(text: str, glyphs: Glyphs) -> str:
    """Render ``text`` with ``glyphs``; literal backslash-n starts a new line.

    Raises RenderError if any line holds a non-printable character.
    """
    lines = split_input(text)
    _check_printable(lines)

    def cell(char: str, row: int) -> str:
        return glyph_row(char, row, glyphs)

    return "".join(_block(line, cell) for line in lines)


def render_colored(
    text: str, glyphs: Glyphs, color: str, letters: Container[str] | None = None
) -> str:
    """Render ``text`` with the glyphs of ``letters`` drawn in ``color``.

    When ``letters`` is None every character is coloured. Raises RenderError
    for an unsupported colour or a non-printable character.
    """
    if not is_supported(color):
        raise RenderError(f"unsupported colour {color!r}")
    lines = split_input(text)
    _check_printable(lines)

    def cell(char: str, row: int) -> str:
        if char not in glyphs:
            return ""
        piece = glyphs[char][row]
        if letters is None or char in letters:
            return colorize(color, piece)
        return piece

    return "".join(_block(line, cell) for line in lines)


def render_to_file(text: str, glyphs: Glyphs, path: str | Path) -> str:
    """Render ``text`` into the file at ``path`` and return what was written.

    Lines with non-printable characters are left out; the file is still
    written from the others, then RenderError is raised naming them. When
    the last line renders, one extra blank line ends the file. Nothing is
    written when no line renders.
    """
    if not text:
        return ""
    lines = split_input(text)
    chunks: list[str] = []
    bad: list[str] = []

    def cell(char: str, row: int) -> str:
        return glyph_row(char, row, glyphs)

    for position, line in enumerate(lines, start=1):
        if not is_printable(line):
            bad.append(line)
            continue
        chunks.append(_block(line, cell))
        if position == len(lines):
            chunks.append("\n")
    content = "".join(chunks)
    if chunks:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    if bad:
        raise RenderError(f"non-displayable character in {bad[0]!r}", bad)
    return content