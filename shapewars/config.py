"""Reading the game configuration file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field


@dataclass
class PlayerConfig:
    shape_radius: int = 0
    collision_radius: int = 0
    speed: float = 0.0
    fill_r: int = 0
    fill_g: int = 0
    fill_b: int = 0
    outline_r: int = 0
    outline_g: int = 0
    outline_b: int = 0
    outline_thickness: int = 0
    vertices: int = 0


@dataclass
class EnemyConfig:
    shape_radius: int = 0
    collision_radius: int = 0
    speed_min: float = 0.0
    speed_max: float = 0.0
    outline_r: int = 0
    outline_g: int = 0
    outline_b: int = 0
    outline_thickness: int = 0
    vertices_min: int = 0
    vertices_max: int = 0
    small_lifespan: int = 0
    spawn_interval: int = 0


@dataclass
class BulletConfig:
    shape_radius: int = 0
    collision_radius: int = 0
    speed: float = 0.0
    fill_r: int = 0
    fill_g: int = 0
    fill_b: int = 0
    outline_r: int = 0
    outline_g: int = 0
    outline_b: int = 0
    outline_thickness: int = 0
    vertices: int = 0
    lifespan: int = 0


@dataclass
class WindowConfig:
    width: int = 0
    height: int = 0
    frame_limit: int = 0
    fullscreen: int = 0


@dataclass
class FontConfig:
    path: str = ""
    size: int = 0
    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class GameConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    enemy: EnemyConfig = field(default_factory=EnemyConfig)
    bullet: BulletConfig = field(default_factory=BulletConfig)
    font: FontConfig = field(default_factory=FontConfig)


_INT = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_WORD = re.compile(r"\S+", re.ASCII)
_SPACE = re.compile(r"[ \t\n\v\f\r]*")

_READERS = {int: (_INT, int), float: (_FLOAT, float), str: (_WORD, str)}

# Keyword, attribute of GameConfig, and fields in the order they appear on the line.
_SECTIONS = (
    ("Window", "window", (("width", int), ("height", int), ("frame_limit", int), ("fullscreen", int))),
    ("Player", "player", (
        ("shape_radius", int), ("collision_radius", int), ("speed", float),
        ("fill_r", int), ("fill_g", int), ("fill_b", int),
        ("outline_r", int), ("outline_g", int), ("outline_b", int),
        ("outline_thickness", int), ("vertices", int),
    )),
    ("Enemy", "enemy", (
        ("shape_radius", int), ("collision_radius", int),
        ("speed_min", float), ("speed_max", float),
        ("outline_r", int), ("outline_g", int), ("outline_b", int),
        ("outline_thickness", int), ("vertices_min", int), ("vertices_max", int),
        ("small_lifespan", int), ("spawn_interval", int),
    )),
    ("Bullet", "bullet", (
        ("shape_radius", int), ("collision_radius", int), ("speed", float),
        ("fill_r", int), ("fill_g", int), ("fill_b", int),
        ("outline_r", int), ("outline_g", int), ("outline_b", int),
        ("outline_thickness", int), ("vertices", int), ("lifespan", int),
    )),
    ("Font", "font", (("path", str), ("size", int), ("r", int), ("g", int), ("b", int))),
)


def _read_fields(target: object, layout: tuple, text: str) -> None:
    """Read whitespace-separated values into target, stream style.

    Reading stops at the end of the text, leaving the remaining fields
    untouched, or at the first malformed value, which is set to zero.
    """
    pos = 0
    for name, kind in layout:
        pos = _SPACE.match(text, pos).end()
        if pos >= len(text):
            return
        pattern, convert = _READERS[kind]
        match = pattern.match(text, pos)
        if match is None:
            setattr(target, name, convert(0) if kind is not str else "")
            return
        setattr(target, name, convert(match.group()))
        pos = match.end()


def parse_config(text: str) -> GameConfig:
    """Parse configuration text into a GameConfig.

    Each line is scanned for the section keywords in turn; everything up to
    and including a found keyword is dropped before its values are read.
    """
    config = GameConfig()
    for line in text.split("\n"):
        for keyword, attr, layout in _SECTIONS:
            index = line.find(keyword)
            if index == -1:
                continue
            line = line[index + len(keyword):]
            _read_fields(getattr(config, attr), layout, line)
    return config


def load_config(path: str | os.PathLike[str]) -> GameConfig:
    """Read and parse a configuration file."""
    with open(path, encoding="utf-8") as handle:
        return parse_config(handle.read())