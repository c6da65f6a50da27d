# bannerart

Turn a line of text into a large ASCII-art banner in the terminal, drawn
from a banner font file (8 rows per character, covering the printable
ASCII range from space to `~`).

## Installation

```
pip install .
```

## Banner files

Fonts are read from `./file/<name>.txt` relative to the current
directory, for example `./file/standard.txt`. The file begins with a
blank line; after it, each character takes eight rows followed by a
blank separator line, starting with the space character. The font named
`thinkertoy` is read with `\r\n` line endings, every other font with
`\n`.

No font files come with the package: put them in `./file/` yourself.
When the requested font cannot be read, the command prints an error to
standard error and exits with status 1.

## Usage

```
bannerart [OPTION] [STRING] [BANNER]
```

Write `\n` (a backslash and an `n`) inside the string to start a new
banner line. Text holding a character outside the printable ASCII range
is reported with an error message instead of being drawn.

- Plain banner in the standard font:

  ```
  bannerart "Hello\nThere"
  ```

- Choose another font:

  ```
  bannerart "Hello" shadow
  ```

- Colour the whole banner, or only the characters listed in the second
  argument (colour output always uses the standard font):

  ```
  bannerart --color=red "Hello"
  bannerart --color=#00ff00 "lo" "Hello"
  ```

  Colours may be given by name (`red`, `sky-blue`, `orange`, ...), as
  `rgb(255, 0, 0)`, as `#ff0000` or as `hsl(0, 100%, 50%)`. Orange's hex
  form is accepted as `ffa500`, without the `#`.

- Save the banner to a file instead of printing it; the file name must
  end in `.txt`:

  ```
  bannerart --output=banner.txt "Hello" standard
  ```

- Align to the terminal width (`left`, `right`, `center` or `justify`),
  which is read by running `stty size`:

  ```
  bannerart --align=center "Hello" standard
  bannerart --align=justify "how are you"
  ```

  With `justify`, the spaces between words are stretched so that each
  banner row fills the terminal; a text too wide for the terminal is
  refused with a message.

Called with any other arguments, the command prints a usage message.

## Library use

The building blocks live in a few modules:

- `bannerart.banner`: `load_banner`, `parse_banner`, `banner_path`,
  `glyph_row`, `split_input`, `is_printable`
- `bannerart.render`: `render`, `render_colored`, `render_to_file`, and
  `RenderError`, raised for non-printable characters or an unsupported
  colour
- `bannerart.colors`: `is_supported`, `ansi_code`, `colorize`
- `bannerart.align`: `align_left`, `align_right`, `align_center`,
  `justify`, `justify_line`, `terminal_width`
- `bannerart.flags`: helpers that recognise and read the
  `--color`, `--output` and `--align` options
- `bannerart.cli`: `main`, the command-line entry point

```python
from bannerart.banner import load_banner
from bannerart.render import render

glyphs = load_banner("standard", "file")
print(render("Hi", glyphs), end="")
```