"""Recognising and reading command-line option flags."""

from __future__ import annotations

_ALIGNMENTS = frozenset({"left", "right", "justify", "center"})


def is_color_flag(arg: str) -> bool:
    """Tell whether ``arg`` is a --color option."""
    return arg.startswith("--color")


def is_output_flag(arg: str) -> bool:
    """Tell whether ``arg`` is an --output option."""
    return arg.startswith("--output")


def is_align_flag(arg: str) -> bool:
    """Tell whether ``arg`` is an --align option."""
    return arg.startswith("--align")


def flag_value(arg: str) -> str:
    """Return the text after the first '=' in ``arg``, or "" if there is none."""
    return arg.partition("=")[2]


def contains_char(text: str, char: str) -> bool:
    """Tell whether ``char`` occurs in ``text``."""
    return char in text


def alignment_option(arg: str) -> str | None:
    """Return the value of a well-formed --align=VALUE option, else None."""
    if len(arg) > 8 and arg[7] == "=":
        return arg[8:]
    return None


def is_valid_alignment(arg: str) -> bool:
    """Tell whether an --align option names a known alignment.

    Options too short to carry a value are not rejected here.
    """
    return len(arg) <= 8 or arg[8:] in _ALIGNMENTS


def has_txt_extension(arg: str) -> bool:
    """Tell whether the file named by an --output option ends in .txt."""
    name = flag_value(arg)
    return len(name) > 4 and name.endswith(".txt")