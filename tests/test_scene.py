import pytest

from cubray.scene import (
    MAX_HEIGHT,
    MAX_WIDTH,
    ParseError,
    Scene,
    is_valid_map_line,
    load_scene,
    parse_color,
    parse_resolution,
    parse_scene,
    parse_texture_path,
)

SAMPLE = [
    "R 800 600",
    "NO ./textures/north.xpm",
    "SO ./textures/south.xpm",
    "WE ./textures/west.xpm",
    "EA ./textures/east.xpm",
    "S ./textures/sprite.xpm",
    "F 10,20,30",
    "C 40,50,60",
    "",
    "111111",
    "100201",
    "10N021",
    "111111",
]


def test_resolution_read():
    assert parse_resolution("R 800 600") == (800, 600)


def test_resolution_capped():
    assert parse_resolution("R 4000 3000") == (MAX_WIDTH, MAX_HEIGHT)
    assert (MAX_WIDTH, MAX_HEIGHT) == (1920, 1080)


def test_resolution_missing_height():
    with pytest.raises(ParseError):
        parse_resolution("R 800")


def test_color_bytes_in_order():
    value = parse_color("F 10,20,30")
    assert value.to_bytes(4, "little") == bytes([10, 20, 30, 0])


def test_color_accepts_spaces():
    assert parse_color("C 40, 50, 60") == parse_color("C 40,50,60")


def test_color_missing_component():
    with pytest.raises(ParseError):
        parse_color("F 10,20")


def test_texture_path_from_first_dot():
    assert parse_texture_path("NO ./textures/north.xpm") == "./textures/north.xpm"


def test_texture_path_without_dot():
    with pytest.raises(ParseError):
        parse_texture_path("NO textures")


@pytest.mark.parametrize("line", ["111", "1 0 2N", "\t10W", "10S0E"])
def test_valid_map_lines(line):
    assert is_valid_map_line(line) is True


@pytest.mark.parametrize("line", ["10x1", "1O1", "1-1"])
def test_invalid_map_lines(line):
    assert is_valid_map_line(line) is False


def test_parse_scene_fields():
    scene = parse_scene(SAMPLE)
    assert (scene.width, scene.height) == (800, 600)
    assert scene.north == "./textures/north.xpm"
    assert scene.south == "./textures/south.xpm"
    assert scene.west == "./textures/west.xpm"
    assert scene.east == "./textures/east.xpm"
    assert scene.sprite == "./textures/sprite.xpm"
    assert scene.floor_color == parse_color("F 10,20,30")
    assert scene.ceiling_color == parse_color("C 40,50,60")
    assert scene.grid == ["111111", "100201", "10N021", "111111"]


def test_sprite_count_matches_grid():
    scene = parse_scene(SAMPLE)
    assert scene.sprite_count() == sum(row.count("2") for row in SAMPLE[9:])


def test_sprite_line_is_not_south():
    scene = Scene()
    scene.apply_line("S ./sprite.xpm")
    assert scene.sprite == "./sprite.xpm"
    assert scene.south is None


def test_unknown_and_empty_lines_ignored():
    scene = Scene()
    scene.apply_line("")
    scene.apply_line("# comment")
    scene.apply_line("X 1 2")
    assert scene == Scene()


def test_wrong_char_on_map():
    with pytest.raises(ParseError):
        parse_scene(["111", "1x1", "111"])


def test_trailing_newlines_stripped():
    scene = parse_scene(["NO ./north.xpm\n", "101\r\n"])
    assert scene.north == "./north.xpm"
    assert scene.grid == ["101"]


def test_load_scene_matches_parse(tmp_path):
    path = tmp_path / "map.cub"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    assert load_scene(path) == parse_scene(SAMPLE)