import pytest

from shapewars.config import (
    FontConfig,
    GameConfig,
    WindowConfig,
    load_config,
    parse_config,
)

SAMPLE = "\n".join(
    [
        "Window 1280 720 60 0",
        "Font fonts/arial.ttf 24 255 255 255",
        "Player 32 32 5 5 5 5 255 0 0 4 8",
        "Enemy 32 32 3 3 255 255 255 2 3 8 90 60",
        "Bullet 10 10 20 255 255 255 255 255 255 2 20 90",
    ]
)


def test_window_section():
    cfg = parse_config(SAMPLE)
    assert cfg.window == WindowConfig(1280, 720, 60, 0)


def test_font_section():
    cfg = parse_config(SAMPLE)
    assert cfg.font == FontConfig("fonts/arial.ttf", 24, 255, 255, 255)


def test_player_section_order():
    p = parse_config(SAMPLE).player
    assert (p.shape_radius, p.collision_radius, p.speed) == (32, 32, 5.0)
    assert (p.fill_r, p.fill_g, p.fill_b) == (5, 5, 5)
    assert (p.outline_r, p.outline_g, p.outline_b) == (255, 0, 0)
    assert (p.outline_thickness, p.vertices) == (4, 8)


def test_enemy_section_order():
    e = parse_config(SAMPLE).enemy
    assert (e.speed_min, e.speed_max) == (3.0, 3.0)
    assert (e.outline_thickness, e.vertices_min, e.vertices_max) == (2, 3, 8)
    assert (e.small_lifespan, e.spawn_interval) == (90, 60)


def test_bullet_section_order():
    b = parse_config(SAMPLE).bullet
    assert (b.shape_radius, b.collision_radius, b.speed) == (10, 10, 20.0)
    assert (b.outline_thickness, b.vertices, b.lifespan) == (2, 20, 90)


def test_empty_text_gives_defaults():
    assert parse_config("") == GameConfig()


def test_keyword_found_anywhere_in_line():
    cfg = parse_config("# size: Window 640 480 30 1")
    assert cfg.window == WindowConfig(640, 480, 30, 1)


def test_short_line_leaves_remaining_fields():
    cfg = parse_config("Window 1 2 3 4\nWindow 9")
    assert cfg.window == WindowConfig(9, 2, 3, 4)


def test_malformed_value_zeroed_and_stops_reading():
    cfg = parse_config("Window 1 2 3 4\nWindow 9 x 7 7")
    assert cfg.window == WindowConfig(9, 0, 3, 4)


def test_float_field_accepts_decimal():
    cfg = parse_config("Player 1 2 2.5")
    assert cfg.player.speed == 2.5


def test_load_config_round_trip(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.txt")