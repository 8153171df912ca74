# cubray

Building blocks for a grid-based ray-casting maze game, in pure Python with no
third-party dependencies.

## Modules

- **`cubray.scene`**: `load_scene(path)` and `parse_scene(lines)` build a
  `Scene` from a `.cub` description. A `Scene` holds the resolution (`R`,
  capped at 1920x1080), the wall texture paths (`NO`, `SO`, `WE`, `EA`), the
  sprite texture path (`S`), the floor and ceiling colours (`F`, `C`) and the
  map rows in `grid`. `Scene.apply_line(line)` applies one line and
  `Scene.sprite_count()` counts the `2` cells of the map. The helpers
  `parse_resolution`, `parse_color`, `parse_texture_path` and
  `is_valid_map_line` are available on their own. A map line with a character
  other than digits, spaces, tabs or `N`/`S`/`E`/`W`, and malformed `R`, `F`,
  `C` or texture lines, raise `ParseError`. `parse_color` packs the three
  components with the first one in the lowest byte.
- **`cubray.colornames`**: `color_by_name(name)` looks up a named colour as a
  `0xRRGGBB` value, ignoring case; `"none"` gives `-1`, unknown names raise
  `KeyError`.
- **`cubray.xpm`**: `load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm(lines)` decode XPM images into an `XpmImage` (`width`, `height`,
  row-major `pixels`); `XpmImage.pixel(x, y)` returns one pixel. Colours
  declared `None` become `0xFF000000`. Unreadable or malformed data raises
  `XpmError`. Lower-level helpers: `split_words`, `find_outside_quotes`,
  `strip_comments`, `extract_lines` and `text_to_rgb`.
- **`cubray.player`**: `Key` lists the window-system key codes. `Controls`
  records the held keys through `press(keycode)` and `release(keycode)`.
  W/Up and S/Down move, A and D strafe, and Left and Right turn.
  `Player.from_scene(scene)` places the player on the `N`/`S`/`E`/`W` start
  cell and turns that cell into floor. `Player.move(grid, controls, frame_time)`
  moves and turns the player at 3 units per second, one axis at a time, and does
  not step into walls (`1`), sprites (`2`) or outside the grid.
  `Player.rotate(angle)` turns the view.
- **`cubray.texturing`**: `select_face(side, stepx, stepy)` returns the
  `WallFace` a ray hit. `texture_column(...)` returns a `TextureColumn` with the
  texture column and vertical stepping for one screen stripe.
  `load_textures(scene)` loads the four wall textures and the sprite texture and
  raises `TextureError` if one is missing or unreadable.
- **`cubray.sprites`**: `find_sprites(grid)` returns a `Sprite` at the centre of
  each `2` cell. `sort_by_distance(sprites, posx, posy)` orders them from
  farthest to nearest, and `project_sprite(sprite, player, screen_width, screen_height)`
  returns a `SpriteProjection` with the camera-space transform and the clipped
  drawing bounds.
- **`cubray.bitmap`**: `encode_bmp(width, height, pixels)` encodes row-major
  `0xRRGGBB` pixels as an uncompressed 32-bit bottom-up BMP, and `save_bmp`
  writes it to a file.

## Example

```python
from cubray.scene import load_scene
from cubray.player import Controls, Key, Player

scene = load_scene("maps/level.cub")
player = Player.from_scene(scene)
controls = Controls()
controls.press(Key.UP)
player.move(scene.grid, controls, frame_time=0.016)
print(player.posx, player.posy)
```

## What it does not do

The package has no window, event loop or drawing. It does not cast rays through
the grid to find walls, so it does not produce frames. It also has no
command-line program and does not check that a map is closed by walls. It
supplies the parsing, movement, texture-coordinate, sprite-projection and
screenshot pieces that such a program would use.

## Running the tests

```
pip install -e .[test]
pytest
```