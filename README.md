# tuit

A small toolkit for text user interfaces built from a grid of styled cells.
It does no I/O of its own beyond writing rendered output: you fill cells in a
terminal object and then hand it to a renderer that writes ANSI-styled text to
a stream.

## Installation

```
pip install tuit
```

## Modules

- **`tuit.style`**: `Ansi4` (the 16 ANSI colours; `a | b` packs two of them
  into one byte, `a` in the high nibble), the colour types `Rgb24`, `Luma8`,
  `Ansi16`, `Ansi256` and `TerminalDefault`, and the immutable `Style`.
  `Style` builder methods such as `fg`, `bg`, `fg_ansi4`, `bg_rgb24`,
  `fg_luma8`, `bg_default`, `underlined`, `with_font_weight` and `inverted`
  return a new style; `inherits(fallback)` fills every unset field from
  `fallback`.
- **`tuit.rect`**: `Rectangle`, built from any two corners (they are sorted
  into top-left and bottom-right). It offers edges, vertices, `width`,
  `height`, `area`, `center`, `contains` (right and bottom edges exclusive),
  `contains_rect`, `at`, `offset`, the `*_to` edge movers, `trim_*`, `extend`,
  `index_into` and inclusive `range_x`/`range_y`. Methods that would move an
  edge below zero return `None`. Rectangles order by area.
- **`tuit.terminal`**: `Cell` (one character plus a `Style`), the abstract
  `Terminal` base class and the abstract `Rescalable`. A `Terminal` provides
  `dimensions`, `default_style` and `cells` (row by row, modifiable in place);
  it gets `width`, `height`, `bounding_box`, `cell(x, y)` (returns `None`
  outside the grid), `view(rect)` and `display(renderer)`.
- **`tuit.terminals`**: ready-made terminals.
  - `ConstantSize(width, height)`: fixed size, cells start as spaces.
  - `ConstantBoxed(width, height)`: the same, but cells start as NUL.
  - `ConstantSizeRef(width, height, characters)`: wraps a grid of cells you
    own; the grid is shared, not copied.
  - `MaxSize(max_width, max_height)`: starts at its maximum size; `rescale`
    only accepts a size that lies strictly inside the current bounding box
    and otherwise raises `RescaleRefused` with a size hint.
  - `Rescale(size)`: grows and shrinks freely, keeping the cells that still
    fit. Its `cell` lookup is indexed as `(row, column)`.
  - `DummyTerminal`: no cells, size `(0, 0)`.
- **`tuit.view`**: `View(parent, rect)`, a terminal onto part of another one.
  Coordinates are relative to the rectangle and cells are shared with the
  parent. Raises `OutOfBoundsCoordinate` if `rect` does not fit.
- **`tuit.view_split`**: `ViewSplit(child)` hands out the halves of a terminal
  through `split_left`, `split_right`, `split_top`, `split_bottom` and
  `split(direction)` with `"up"`, `"down"`, `"left"` or `"right"`.
- **`tuit.render`**: `Renderer` (abstract), `DummyTarget` (does nothing),
  `AnsiRenderer(writer)` and `StdoutRenderer(stream=None)`, which also flushes
  the stream. Each row is preceded by a newline and every whitespace or control
  character is written as a space. The helpers `ansi_foreground`,
  `ansi_background`, `style_codes` and `format_cell` produce the escape
  codes. `DebugTerminal(terminal, display)` wraps a terminal: `cell_mut`
  renders the wrapped terminal before returning the cell, and `cells_mut`
  gives every cell it yields a red background.
- **`tuit.interactive`**: input events `CellClicked`, `KeyboardCharacter`,
  `KeyboardInput`, `TimeDelta`, `TerminalResized` and `NoInfo`, with
  `MouseButton`, `AuxiliaryButton`, `KeyState` and the ordered
  `UpdateResult`. `mouse_relative_to(info, rect)` makes a click relative to
  a rectangle, or gives `NoInfo` if it lies above or left of it.
- **`tuit.errors`**: every error derives from `TuitError`; there are
  `IoError`, `RenderError`, `OutOfBoundsIndex`, `OutOfBoundsCoordinate`,
  `RequestRescale`, `GenericDrawError`, `GenericUpdateError`, `TodoError` and
  `RescaleRefused`, plus the shortcuts `oob`, `oob_with`, `oobi`, `rescale`
  and `rescale_to`.

## Example

```python
import io

from tuit.rect import Rectangle
from tuit.render import AnsiRenderer
from tuit.style import Ansi4, Style
from tuit.terminals import ConstantSize

terminal = ConstantSize(20, 5)

view = terminal.view(Rectangle.of_size((5, 1)).at((2, 2)))
for cell, char in zip(view.cells(), "Hello"):
    cell.character = char
    cell.style = Style().fg_ansi4(Ansi4.GREEN).underlined()

out = io.StringIO()
terminal.display(AnsiRenderer(out))
print(out.getvalue())
```

Splitting a terminal in half:

```python
from tuit.terminals import ConstantSize
from tuit.view_split import ViewSplit

split = ViewSplit(ConstantSize(50, 20))
print(split.split_left().dimensions(), split.split_right().dimensions())
# (25, 20) (25, 20)
```

Rescaling:

```python
from tuit.errors import RescaleRefused
from tuit.terminals import MaxSize

terminal = MaxSize(20, 20)
terminal.rescale((10, 10))
try:
    terminal.rescale((21, 10))
except RescaleRefused as refused:
    print(refused.hint)   # (20, 10)
```

## What it does not do

There are no widgets: no text boxes, buttons, checkboxes or layout helpers.
You place characters and styles into cells yourself. Nothing reads the
keyboard or mouse either; the event types in `tuit.interactive` only describe
input that your own program collects.

## Running the tests

```
pip install "tuit[test]"
pytest
```