# wireframe

Building blocks for drawing wireframe views of height maps. It is written
in pure Python and has no third-party dependencies.

## What it contains

- `wireframe.fdfmap` reads `.fdf` height maps. Each line is a row of
  space-separated heights. A height may carry a colour, written
  `height,0xRRGGBB`.
  - `load_map(path)` returns an `FdfMap` with `width`, `height`, `grid` and
    `color_grid`. A point with no colour gets 0 in `color_grid`.
  - The width is taken from the last line. Shorter rows are padded with 0.
    A row that is longer than the width raises `ValueError`.
  - `read_height(path)` returns the line count. `read_width(path)` returns
    the number of values on the last line.
  - `parse_line(line)` splits one row into heights and colours.
  - `ViewState` holds the starting view settings, such as zoom, colour and
    shifts. `WIDTH` and `HEIGHT` are 1920 and 1080.
- `wireframe.numbers` holds the integer parsing that the map reader uses.
  - `atoi` reads a decimal number.
  - `atoi_base` reads a number in base 2 (prefix `0b`), base 8 (prefix
    `0`), base 16 (prefix `0x`) or signed base 10. Input without the prefix
    its base needs gives 0. The result wraps to a signed 32-bit value.
  - `count_words` counts the words separated by a given character.
- `wireframe.image` provides pixel buffers.
  - `new_image(width, height, bpp, byte_order)` returns a zero-filled
    `Image`. Rows are padded to 32 bits. `bpp` may be 8, 16, 24 or 32.
    `byte_order` is `LSB_FIRST` (0) or `MSB_FIRST` (1).
  - `Image.set_pixel` and `Image.get_pixel` read and write single pixels.
    Coordinates outside the image raise `IndexError`.
- `wireframe.xpm` decodes XPM pixmaps.
  - `xpm_file_to_image(path)` reads a file. C comments are removed first.
  - `xpm_data_to_image(lines)` reads a list of strings.
  - `parse_xpm(lines, bpp, byte_order)` lets you choose the pixel format.
  - Colours may be written as `#rrggbb`, as X11 colour names, or as `None`.
    `None` is stored as `0xFF000000`. An unknown name gives black.
  - Malformed data raises `XpmError`.
  - The helpers `text_rgb`, `strip_comments` and `extract_quoted_lines` are
    also available.
- `wireframe.colors` provides `color_by_name(name)`. It looks up X11 colour
  names without regard to case. An unknown name raises `KeyError`.
- `wireframe.visual` converts colours for a visual.
  - `rgb_shifts(red_mask, green_mask, blue_mask)` derives the channel
    shifts and widths from the masks.
  - `good_color(color, depth, shifts)` turns a `0xRRGGBB` colour into a
    pixel value. Depths of 24 and above return the colour unchanged.
- `wireframe.wordtab` holds text helpers: `str_to_wordtab`, `find` and
  `find_outside_quotes`.
- `wireframe.events` is an in-memory window and event model.
  - It is made of `Display`, `Window`, `Event`, `EventType` and
    `EventMask`.
  - Windows take key, mouse, expose and generic hooks through
    `Window.hook`, `key_hook`, `mouse_hook` and `expose_hook`.
    `Window.event_mask` returns the union of the masks of the installed
    hooks.
  - A new window is queued an Expose event.
  - `Display.post_event` queues an event.
  - `Display.loop` delivers events until one of these happens: no window is
    left, `Display.loop_end` is called, or the queue is empty and no loop
    hook is set.

## Example

```python
from wireframe.fdfmap import load_map
from wireframe.image import new_image
from wireframe.xpm import xpm_data_to_image

fdf = load_map("maps/42.fdf")
print(fdf.width, fdf.height)

img = new_image(64, 64, 32, 0)
img.set_pixel(3, 4, 0xFF0000)
assert img.get_pixel(3, 4) == 0xFF0000

icon = xpm_data_to_image([
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
])
assert icon.get_pixel(0, 0) == 0xFF0000
```

This example runs the event loop:

```python
from wireframe.events import Display, Event, EventType

display = Display()
win = display.new_window(300, 300, "demo")
win.key_hook(lambda key, param: display.loop_end(), None)
display.post_event(Event(EventType.KEY_RELEASE, win, keysym=0xFF1B))
display.loop()
```

## What it does not do

The package does not open real windows or draw to a screen. Windows and
events exist only in memory, and events reach them only through
`post_event`.

The package also does not project or draw the map as lines. There is no
command-line program: you load maps and fill images from your own code.

## Running the tests

```
pip install -e .[test]
pytest
```