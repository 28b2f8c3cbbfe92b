# ftkit

A small toolkit of plain-Python helpers with no third-party dependencies.

## Modules

- `ftkit.xpm` decodes XPM images into 32-bit pixel grids.
  - `parse_xpm(lines)` takes the XPM strings themselves (header, colour
    definitions, pixel rows).
  - `parse_xpm_text(text)` takes the text of an XPM file, blanks out
    `/* */` and `//` comments outside quotes, and reads the quoted strings.
  - `load_xpm(path)` reads a file and decodes it; `OSError` propagates if
    the file cannot be read.
  - Each returns an `XpmImage` with `width`, `height`, `pixels` (rows of
    `0xRRGGBB` integers), `bits_per_pixel` (32), `size_line` (bytes per row)
    and `pixel(x, y)`, which raises `IndexError` outside the image.
  - The colour `None` is stored as `TRANSPARENT` (`0xFF000000`). Unknown
    colour names and characters missing from the palette give 0.
  - Malformed input raises `XpmError`, a subclass of `ValueError`.
  - Helpers `strip_comments(text)`, `split_words(line)` and
    `color_from_text(name, suffix)` are also available.
- `ftkit.colornames.lookup_color(name)` looks up an X11 colour name such as
  `"navy blue"` or `"gray50"`, ignoring ASCII case, and returns an integer
  `0xRRGGBB`. `"none"` gives -1; unknown names raise `KeyError`.
- `ftkit.textutils` has string helpers following the edge-case rules of the
  classic C routines: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strlcpy`, `strlcat`, `strncmp`, `strchr`, `strrchr`,
  `strmapi` and `striteri`. Note that `strchr` and `strrchr` return an
  index (or `None`), `strlcpy(src, size)` and `strlcat(dst, src, size)`
  return a `(text, length)` pair, and `striteri` rewrites a mutable
  sequence in place.
- `ftkit.chars` classifies and converts ASCII characters: `isalnum`,
  `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower` and `toupper`. Each
  accepts a code point or a one-character string.
- `ftkit.memory` works on byte buffers: `memset`, `bzero`, `memcpy`,
  `memchr`, `memcmp`, `calloc`, and `memmove(buf, dest, src, n)`, which
  copies between (possibly overlapping) offsets of one `bytearray`. Counts
  larger than a buffer raise `ValueError`.
- `ftkit.output` writes to text streams: `putchar_fd`, `putstr_fd`,
  `putendl_fd` and `putnbr_fd`.
- `ftkit.lists` has `LinkedList`, a singly linked list of `Node`s each
  tagged with a `NodeType` (`NONE`, `SPHERE`, `PLANE`, `CYLINDER`,
  `DOT_LIGHT`, `CONE`). It offers `push_front`, `push_back`, `last`,
  `clear`, `for_each`, `map`, `nodes`, iteration and `len()`.
- `ftkit.linereader` reads a text or binary stream line by line through a
  fixed-size read buffer (1024 by default): `LineReader(stream).next_line()`
  returns the next line with its newline kept, or `None` at the end;
  `read_lines(stream)` yields every line.

## Install

```
pip install .
```

Install with the test extra and run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.colornames import lookup_color
from ftkit.textutils import split, atoi

lookup_color("Navy Blue")        # 0x000080
split("  a  b c ", " ")          # ['a', 'b', 'c']
atoi("  -42abc")                 # -42
```

```python
from ftkit.xpm import parse_xpm_text

image = parse_xpm_text('''
static char *img[] = {
"2 1 2 1",
"a c red",
"b c #00ff00",
"ab"
};
''')
image.pixel(0, 0)   # 0xff0000
image.pixel(1, 0)   # 0x00ff00
```

```python
import io
from ftkit.linereader import read_lines

list(read_lines(io.StringIO("one\ntwo")))   # ['one\n', 'two']
```

## What it does not do

ftkit only decodes XPM images into pixel values; it does not open windows,
display images, write image files or render scenes. The `NodeType` tags in
`ftkit.lists` name kinds of scene element, but the package holds no scene
parser or renderer. There is no command-line program.