"""Command-line entry point: render text as banner art."""

from __future__ import annotations

import sys
from collections.abc import Callable, Container, Sequence

from .align import JUSTIFY_GAP, align_center, align_left, align_right, justify, terminal_width
from .banner import DEFAULT_BANNER, GLYPH_HEIGHT, load_banner, split_input
from .flags import (
    alignment_option,
    flag_value,
    has_txt_extension,
    is_align_flag,
    is_color_flag,
    is_output_flag,
    is_valid_alignment,
)
from .render import RenderError, render, render_colored, render_to_file

USAGE = (
    "Usage: bannerart [OPTION] [STRING] [BANNER]\n\n"
    "Example: bannerart --align=right something standard"
)
NON_DISPLAYABLE = "Error : Non-displayable character !!!"
COLOR_ERROR = "Error : Non-displayable character or Color not supported!!!"
INVALID_SYNTAX = "Error: invalid syntax"
INVALID_ALIGNMENT = "Error: invalid alignment!"
INVALID_EXTENSION = "Error: invalid extension!"
MISSING_BANNER = "Error : Not an ascii file in the directory"
TOO_WIDE = "Ce texte ne peut pas etre justifie car son ASCII depasse la taille du terminal "


def _print_pieces(text: str, convert: Callable[[str], str], message: str) -> None:
    """Print each line of ``text`` in turn, reporting the ones that fail."""
    if not text:
        return
    for piece in split_input(text):
        try:
            rendered = convert(piece)
        except RenderError:
            print(message)
            continue
        print(rendered if piece else "\n", end="")


def _plain(text: str, banner: str) -> None:
    glyphs = load_banner(banner)
    _print_pieces(text, lambda piece: render(piece, glyphs), NON_DISPLAYABLE)


def _colored(flag: str, text: str, letters: Container[str] | None) -> None:
    glyphs = load_banner()
    color = flag_value(flag)
    _print_pieces(
        text,
        lambda piece: render_colored(piece, glyphs, color, letters),
        COLOR_ERROR,
    )


def _output(flag: str, text: str, banner: str) -> None:
    glyphs = load_banner(banner)
    if not has_txt_extension(flag):
        print(INVALID_EXTENSION)
        return
    try:
        render_to_file(text, glyphs, flag_value(flag))
    except RenderError as exc:
        for _ in exc.lines:
            print(NON_DISPLAYABLE)
    except OSError as exc:
        print(exc)


def _aligned(flag: str, text: str, banner: str) -> None:
    glyphs = load_banner(banner)
    option = alignment_option(flag)
    if option == "justify":
        glyphs = {**glyphs, " ": [JUSTIFY_GAP] * GLYPH_HEIGHT}
    if option is None:
        print(INVALID_SYNTAX)
    if not is_valid_alignment(flag):
        print(INVALID_ALIGNMENT)
        return
    try:
        art = render(text, glyphs) if text else ""
    except RenderError:
        print(NON_DISPLAYABLE)
        return

    if option == "left":
        print(align_left(art, terminal_width()), end="")
    elif option == "right":
        print(align_right(art, terminal_width()), end="")
    elif option == "center":
        print(align_center(art, terminal_width()), end="")
    elif option == "justify":
        if len(text.split(" ")) == 1:
            print(align_left(art, terminal_width()), end="")
            return
        try:
            width = terminal_width()
        except OSError:
            width = 0
        if len(art.split("\n")[0]) > width:
            print(TOO_WIDE)
            return
        print(justify(art, width), end="")


def _dispatch(args: Sequence[str]) -> None:
    count = len(args)
    if not 1 <= count <= 3:
        print(USAGE)
        return
    first = args[0]
    if is_color_flag(first):
        if count == 2:
            _colored(first, args[1], None)
        elif count == 3:
            _colored(first, args[2], args[1])
        else:
            print(USAGE)
    elif is_output_flag(first):
        if count == 2:
            _output(first, args[1], DEFAULT_BANNER)
        elif count == 3:
            _output(first, args[1], args[2])
        else:
            print(USAGE)
    elif is_align_flag(first):
        if count == 2:
            _aligned(first, args[1], DEFAULT_BANNER)
        elif count == 3:
            _aligned(first, args[1], args[2])
        else:
            print(USAGE)
    elif count == 1:
        _plain(first, DEFAULT_BANNER)
    elif count == 2:
        _plain(first, args[1])
    else:
        print(USAGE)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        _dispatch(args)
    except FileNotFoundError:
        print(MISSING_BANNER, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())