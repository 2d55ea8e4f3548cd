# microui

Building blocks for a small immediate-mode user-interface toolkit: geometry,
render commands, layout, input collection and container state, together with
a cell-based terminal renderer and a metaball animation that can be drawn
either as terminal half-block characters or as an RGBA pixel grid.

It has no dependencies outside the standard library.

## What is inside

- `microui.geometry` – `Vec2`, `Rect` (with `is_empty()`) and `Color`, an
  RGBA colour whose channels must lie in 0..255 (otherwise `ValueError`).
- `microui.options` – option flags (`Opt`), control responses (`Res`), clip
  results (`Clip`) and colour slots (`ColorId`).
- `microui.commands` – render commands (`Command`, `CommandKind`, `Icon`) and
  `CommandBuffer`, which supports `push`, `reset`, `each_range`, iteration,
  `len()` and indexing.
- `microui.pool` – `GrowPool` (fixed slots first, then growth up to a maximum;
  going past it raises `PoolExhaustedError`), `GrowStack` (whose `pop` and
  `peek` return `None` when empty), and the least-recently-used slot helpers
  `pool_init`, `pool_get` (returns `None` when the id is absent) and
  `pool_update` over `PoolItem`s.
- `microui.container` – the `Container` record kept for a window, panel or
  popup between frames.
- `microui.layout` – `LayoutEngine` with `row`, `next`, `push`, `pop`,
  `set_width`, `set_height`, `set_next`, `begin_column` and `end_column`.
  A width or height of 0 takes the default from `LayoutStyle`; a negative one
  counts back from the right or bottom edge of the body. Also `expand_rect`
  and `expand_rect_xy`.
- `microui.input` – `InputState`, which collects mouse position, held and
  pressed buttons and keys, wheel deltas and typed text, and applies
  `MouseEvent`, `KeyEvent` and `TextEvent` objects either directly with
  `handle` or from its `queue` with `process_queue`.
- `microui.metaballs.field` – the metaball `Field` simulation, configured by
  `MetaballConfig`.
- `microui.metaballs.tui` – `TUIRenderer`, which turns a field into
  half-block `Cell`s in 16-colour, 256-colour or true-colour mode
  (`ColorMode`), and `hsv_to_rgb`.
- `microui.metaballs.pixels` – `PixelMetaballs`, a reduced-resolution RGBA
  grid with an extra ball that follows the mouse, configured by
  `PixelMetaballsConfig`; `render()` returns the pixel bytes. Also `fast_hsv`.
- `microui.terminal.renderer` – the terminal `Renderer`: a double-buffered
  grid of `Cell`s with clipping, rectangles, a 1x1 cursor, box drawing,
  shadows, scrollbars, text, icons, plain (`render_to_string`) and 24-bit ANSI
  (`render_to_ansi`) output, `content_hash`, and `visible_cells` for reading
  the published front buffer. Also `darken_color` and `color_key`.
- `microui.terminal.font` – `MonospaceFont`, one cell per character.
- `microui.terminal.icons` – `icon_to_rune`.
- `microui.terminal.colors` – `ThemeColors`, `tui_theme()`, `borland_theme()`
  and fixed desktop, scrollbar and status-bar colours.

## A short example

```python
from microui.metaballs.field import Field, MetaballConfig
from microui.metaballs.tui import TUIRenderer

field = Field(MetaballConfig())
field.update(1 / 60)

view = TUIRenderer(field, 80, 24)
rows = view.render_window(0, 0, 80, 24)
print("".join(cell.char for cell in rows[12]))
```

Each cell covers two vertical "pixels" of the field, so a 24-row window
samples the field at 48 heights.

## Serving a directory

```
microui-serve [PORT]
```

serves the current directory over HTTP on the given port (8080 when none is
given) and tries to open it in the default web browser. Stop it with Ctrl+C.

## What it does not do

There is no UI context here: nothing begins and ends frames, opens windows or
draws buttons, sliders, checkboxes, headers, tree nodes or text boxes from
these parts. The terminal `Renderer` only fills a cell buffer; it does not
drive a terminal, read keyboard or mouse events, or run an event loop, and
`PixelMetaballs` produces bytes without putting them on a screen.

## Running the tests

```
pip install -e ".[test]"
pytest
```