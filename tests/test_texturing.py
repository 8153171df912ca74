import pytest

from cubray.scene import Scene
from cubray.texturing import (
    TextureError,
    WallFace,
    load_textures,
    select_face,
    texture_column,
)

XPM_TEXT = '/* XPM */\nstatic char *t[] = {\n"2 1 1 1",\n"a c #FF0000",\n"aa"\n};\n'


@pytest.mark.parametrize(
    "side, stepx, stepy, face",
    [
        (1, -1, 1, WallFace.EAST),
        (1, 1, 1, WallFace.WEST),
        (1, 0, -1, WallFace.WEST),
        (0, 1, -1, WallFace.SOUTH),
        (0, 1, 0, WallFace.SOUTH),
        (0, -1, 1, WallFace.NORTH),
    ],
)
def test_select_face(side, stepx, stepy, face):
    assert select_face(side, stepx, stepy) is face


def test_select_face_bad_side():
    with pytest.raises(ValueError):
        select_face(2, 1, 1)


def _column(side, ray_dirx, ray_diry, **overrides):
    args = dict(
        side=side,
        posx=3.3,
        posy=2.7,
        perp_wall_dist=1.45,
        ray_dirx=ray_dirx,
        ray_diry=ray_diry,
        tex_width=64,
        tex_height=64,
        line_height=64,
        draw_start=100,
        screen_height=264,
    )
    args.update(overrides)
    return texture_column(**args)


@pytest.mark.parametrize("side", [0, 1])
def test_column_ranges(side):
    col = _column(side, 0.4, -0.7)
    assert 0.0 <= col.wall_x < 1.0
    assert 0 <= col.tex_x < 64


def test_column_flips_on_y_side():
    up = _column(0, 0.4, -0.7)
    down = _column(0, 0.4, 0.7)
    assert up.wall_x == down.wall_x
    assert up.tex_x + down.tex_x == 64 - 1


def test_column_flips_on_x_side():
    right = _column(1, 0.4, 0.7)
    left = _column(1, -0.4, 0.7)
    assert right.wall_x == left.wall_x
    assert right.tex_x + left.tex_x == 64 - 1


def test_step_and_start_position():
    col = _column(0, 0.4, -0.7, tex_height=128, line_height=64, draw_start=100, screen_height=264)
    assert col.step == 2.0
    assert col.tex_pos == 0.0


def test_zero_line_height_raises():
    with pytest.raises(ValueError):
        _column(0, 0.4, -0.7, line_height=0)


def _scene_with(tmp_path, **missing):
    paths = {}
    for name in ("north", "south", "west", "east", "sprite"):
        path = tmp_path / f"{name}.xpm"
        path.write_text(XPM_TEXT, encoding="latin-1")
        paths[name] = str(path)
    paths.update(missing)
    return Scene(**paths)


def test_load_textures(tmp_path):
    textures = load_textures(_scene_with(tmp_path))
    assert sorted(textures) == ["east", "north", "south", "sprite", "west"]
    assert textures["north"].width == 2
    assert textures["sprite"].pixel(1, 0) == 0xFF0000


def test_load_textures_missing_file(tmp_path):
    scene = _scene_with(tmp_path, west=str(tmp_path / "absent.xpm"))
    with pytest.raises(TextureError, match="west"):
        load_textures(scene)


def test_load_textures_no_path(tmp_path):
    scene = _scene_with(tmp_path, sprite=None)
    with pytest.raises(TextureError, match="sprite"):
        load_textures(scene)