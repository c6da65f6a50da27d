import pytest

from bannerart.banner import GLYPH_HEIGHT
from bannerart.colors import colorize
from bannerart.render import RenderError, render, render_colored, render_to_file

GLYPHS = {char: [f"{char}{row}|" for row in range(GLYPH_HEIGHT)] for char in " AB"}


def test_render_empty_text_is_empty():
    assert render("", GLYPHS) == ""


def test_render_joins_glyph_rows():
    lines = render("AB", GLYPHS).split("\n")
    assert lines[:-1] == [a + b for a, b in zip(GLYPHS["A"], GLYPHS["B"])]
    assert lines[-1] == ""


def test_render_height():
    assert render("AB A", GLYPHS).count("\n") == GLYPH_HEIGHT


def test_render_newline_sequence_splits_blocks():
    assert render("A\\nB", GLYPHS) == render("A", GLYPHS) + render("B", GLYPHS)


def test_render_only_breaks_gives_blank_lines():
    assert render("\\n", GLYPHS) == "\n"
    assert render("\\n\\n", GLYPHS) == "\n\n"


def test_render_empty_line_in_middle():
    assert render("A\\n\\nB", GLYPHS) == render("A", GLYPHS) + "\n" + render("B", GLYPHS)


def test_render_unknown_glyph_is_skipped():
    assert render("AZ", GLYPHS) == render("A", GLYPHS)


def test_render_rejects_non_printable():
    with pytest.raises(RenderError) as info:
        render("A\\né", GLYPHS)
    assert info.value.lines == ("é",)


def test_render_colored_all_letters():
    lines = render_colored("A", GLYPHS, "red", None).split("\n")[:-1]
    assert lines == [colorize("red", row) for row in GLYPHS["A"]]


def test_render_colored_selected_letters():
    lines = render_colored("AB", GLYPHS, "red", "A").split("\n")[:-1]
    expected = [colorize("red", a) + b for a, b in zip(GLYPHS["A"], GLYPHS["B"])]
    assert lines == expected


def test_render_colored_rejects_unknown_colour():
    with pytest.raises(RenderError):
        render_colored("A", GLYPHS, "nocolour", None)


def test_render_colored_rejects_non_printable():
    with pytest.raises(RenderError) as info:
        render_colored("\t", GLYPHS, "blue", None)
    assert info.value.lines == ("\t",)


def test_render_colored_supported_without_code_draws_nothing():
    assert render_colored("A", GLYPHS, "ffa500", None) == "\n" * GLYPH_HEIGHT


def test_render_to_file_writes_with_trailing_blank(tmp_path):
    target = tmp_path / "out.txt"
    content = render_to_file("A\\nB", GLYPHS, target)
    assert content == render("A\\nB", GLYPHS) + "\n"
    assert target.read_text(encoding="utf-8") == content


def test_render_to_file_skips_bad_last_line(tmp_path):
    target = tmp_path / "out.txt"
    with pytest.raises(RenderError) as info:
        render_to_file("A\\né", GLYPHS, target)
    assert info.value.lines == ("é",)
    assert target.read_text(encoding="utf-8") == render("A", GLYPHS)


def test_render_to_file_empty_text_writes_nothing(tmp_path):
    target = tmp_path / "out.txt"
    assert render_to_file("", GLYPHS, target) == ""
    assert not target.exists()


def test_render_to_file_all_bad_writes_nothing(tmp_path):
    target = tmp_path / "out.txt"
    with pytest.raises(RenderError):
        render_to_file("é\\nü", GLYPHS, target)
    assert not target.exists()