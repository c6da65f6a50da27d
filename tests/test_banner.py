from pathlib import Path

import pytest

from bannerart.banner import (
    banner_path,
    glyph_row,
    is_printable,
    load_banner,
    parse_banner,
    split_input,
)


def _banner_lines():
    lines = [""]
    for code in range(32, ord("L") + 1):
        char = chr(code)
        rows = [f"{char}{row}" for row in range(8)]
        if char == "L":
            rows[0] = " _       "
        lines.extend(rows)
        lines.append("")
    return lines


def _banner_text(separator="\n"):
    return separator.join(_banner_lines())


def test_banner_path_matches_source_case():
    assert banner_path("standard", ".") == Path("./standard.txt")


def test_banner_path_default_directory():
    assert banner_path("shadow") == Path("file") / "shadow.txt"


def test_glyph_row_matches_source_case():
    glyphs = parse_banner(_banner_text())
    assert glyph_row("L", 0, glyphs) == " _       "


def test_parse_banner_starts_at_space():
    glyphs = parse_banner(_banner_text())
    assert glyphs[" "] == [f" {row}" for row in range(8)]
    assert len(glyphs) == ord("L") - 32 + 1


def test_parse_banner_ignores_incomplete_trailing_glyph():
    text = _banner_text() + "\nextra1\nextra2"
    glyphs = parse_banner(text)
    assert "M" not in glyphs


def test_glyph_row_unknown_char_is_empty():
    glyphs = parse_banner(_banner_text())
    assert glyph_row("z", 3, glyphs) == ""


def test_load_banner_reads_file(tmp_path):
    (tmp_path / "standard.txt").write_text(_banner_text())
    glyphs = load_banner("standard", tmp_path)
    assert glyph_row("A", 2, glyphs) == "A2"


def test_load_banner_thinkertoy_uses_crlf(tmp_path):
    (tmp_path / "thinkertoy.txt").write_bytes(_banner_text("\r\n").encode())
    glyphs = load_banner("thinkertoy", tmp_path)
    assert glyph_row("B", 7, glyphs) == "B7"


def test_load_banner_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_banner("nothing", tmp_path)


def test_split_input_all_empty_matches_source_newline_case():
    assert split_input("\\n") == [""]


def test_split_input_keeps_empty_between_text():
    assert split_input("Hello\\n\\nThere") == ["Hello", "", "There"]


def test_split_input_trailing_break_kept_with_text():
    assert split_input("Hi\\n") == ["Hi", ""]


def test_split_input_empty_string():
    assert split_input("") == []


def test_is_printable_matches_source_case():
    assert is_printable("d") is True


@pytest.mark.parametrize("text", ["é", "\t", "a\x7f", "\x1f"])
def test_is_printable_rejects(text):
    assert is_printable(text) is False


def test_is_printable_accepts_range_bounds():
    assert is_printable(" ~") is True