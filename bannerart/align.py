"""Aligning rendered banner art to the terminal width."""

from __future__ import annotations

import subprocess
import sys

JUSTIFY_GAP = "$$$$$$"


def terminal_width() -> int:
    """Return the terminal width in columns, as reported by ``stty size``.

    Raises OSError when the size cannot be read.
    """
    try:
        result = subprocess.run(
            ["stty", "size"],
            stdin=sys.stdin,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, ValueError, subprocess.CalledProcessError) as exc:
        raise OSError(f"cannot read terminal size: {exc}") from exc
    fields = result.stdout.split()
    try:
        _height, width = int(fields[0]), int(fields[1])
    except (IndexError, ValueError) as exc:
        raise OSError(f"unexpected terminal size {result.stdout!r}") from exc
    return width


def _lines(text: str) -> list[str]:
    return text.split("\n")


def align_left(text: str, width: int) -> str:
    """Pad every line of ``text`` on the right up to ``width`` columns."""
    return "".join(line + " " * (width - len(line)) + "\n" for line in _lines(text))


def align_right(text: str, width: int) -> str:
    """Pad every line of ``text`` on the left up to ``width`` columns."""
    return "".join(" " * (width - len(line)) + line + "\n" for line in _lines(text))


def align_center(text: str, width: int) -> str:
    """Indent every line of ``text`` by half of the free columns."""
    return "".join(
        " " * max((width - len(line)) // 2, 0) + line + "\n" for line in _lines(text)
    )


def justify_line(line: str, width: int) -> str:
    """Spread the words of ``line``, separated by gap markers, over ``width``.

    Leftover columns go one each to the leftmost gaps. A line with a single
    word is returned unchanged. Raises ValueError if the words do not fit.
    """
    words = line.split(JUSTIFY_GAP)
    if len(words) == 1:
        return line
    gaps = len(words) - 1
    free = width - sum(len(word) for word in words)
    if free < 0:
        raise ValueError(f"line of {len(line)} columns does not fit in {width}")
    base, extra = divmod(free, gaps)
    parts = []
    for index, word in enumerate(words[:-1]):
        parts.append(word)
        parts.append(" " * (base + (1 if index < extra else 0)))
    parts.append(words[-1])
    return "".join(parts)


def justify(text: str, width: int) -> str:
    """Justify every line of ``text`` to ``width`` columns."""
    return "".join(justify_line(line, width) + "\n" for line in _lines(text))