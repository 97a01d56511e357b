"""Game state, the systems that drive it, and the interactive main loop."""

from __future__ import annotations

import argparse
import math
import os
import random
import sys
from typing import Sequence

from shapewars.components import Collision, Color, Input, Lifespan, Score, Shape, Transform
from shapewars.config import GameConfig, load_config
from shapewars.entity import Entity
from shapewars.entity_manager import EntityManager
from shapewars.vec2 import Vec2

_PLAYER_STEP = 5.0
_DECAY = 5.1
_SPECIAL_SPLIT = 8
_MAX_SPECIAL_CHAINS = 8
_KILL_SCORE = 500
_SMALL_LIFESPAN = 255
_PAUSE_FONT_SIZE = 60

_DIRECTIONS = {"w": "up", "a": "left", "s": "down", "d": "right"}


def _color(r: float, g: float, b: float, a: float = 255) -> Color:
    """Build a colour, wrapping each channel to 8 bits."""
    return Color(int(r) % 256, int(g) % 256, int(b) % 256, int(a) % 256)


class Game:
    """The whole game: entities, configuration and per-frame systems."""

    def __init__(
        self,
        config: GameConfig | str | os.PathLike[str] = "config.txt",
        seed: int | None = None,
    ) -> None:
        if isinstance(config, GameConfig):
            self.config = config
        else:
            try:
                self.config = load_config(config)
            except OSError:
                print(f"Failed to open {os.fspath(config)}", file=sys.stderr)
                self.config = GameConfig()
        self.width = self.config.window.width
        self.height = self.config.window.height
        self.entities = EntityManager()
        self.current_frame = 0
        self.enemy_spawn_frame = 0
        self.paused = False
        self.running = True
        self.special_trigger = 0
        self.pause_alpha = 0
        self._random = random.Random(seed)
        self.player: Entity = self.spawn_player()

    # ---- state control -------------------------------------------------

    def set_paused(self, paused: bool) -> None:
        """Pause or resume the game logic; the pause banner follows."""
        self.paused = paused
        self.pause_alpha = 255 if paused else 0

    def toggle_pause(self) -> None:
        self.set_paused(not self.paused)

    def handle_key(self, key: str, pressed: bool) -> None:
        """React to a key ('w', 'a', 's', 'd' or 'p') being pressed or released."""
        key = key.lower()
        if key == "p":
            if pressed:
                self.toggle_pause()
            return
        direction = _DIRECTIONS.get(key)
        if direction is not None and self.player.input is not None:
            setattr(self.player.input, direction, pressed)

    def handle_mouse(self, button: str, x: float, y: float) -> None:
        """Fire on a mouse press: 'left' shoots at (x, y), 'right' fires the special weapon."""
        if self.paused:
            return
        if button == "left":
            self.spawn_bullet(self.player, Vec2(x, y))
        elif button == "right":
            self.spawn_special_weapon(self.player)

    # ---- systems -------------------------------------------------------

    def movement(self) -> None:
        """Set the player's velocity from its input state."""
        transform = self.player.transform
        controls = self.player.input
        transform.velocity = Vec2(0.0, 0.0)
        if controls.up:
            transform.velocity.y = -_PLAYER_STEP
        if controls.down:
            transform.velocity.y = _PLAYER_STEP
        if controls.left:
            transform.velocity.x = -_PLAYER_STEP
        if controls.right:
            transform.velocity.x = _PLAYER_STEP

    def lifespan(self) -> None:
        """Fade and expire bullets, special bullets and enemy fragments."""
        for bullet in self.entities.get_entities("bullet"):
            remaining = self._decay(bullet)
            bullet.shape.fill = _color(255, 255, 255, remaining)
            bullet.shape.outline = _color(255, 0, 0, remaining)
            if remaining <= 0:
                bullet.destroy()

        for bullet in self.entities.get_entities("specialBullet"):
            remaining = self._decay(bullet)
            bullet.shape.fill = _color(255, 0, 0, remaining)
            bullet.shape.outline = _color(255, 255, 255, remaining)
            if remaining <= 0:
                bullet.destroy()
                if self.special_trigger < _MAX_SPECIAL_CHAINS:
                    self.spawn_special_weapon(bullet)
                    self.special_trigger += 1

        for fragment in self.entities.get_entities("smallEnemy"):
            remaining = self._decay(fragment)
            fragment.shape.fill = fragment.shape.fill.with_alpha(remaining)
            fragment.shape.outline = fragment.shape.outline.with_alpha(remaining)
            if remaining <= 0:
                fragment.destroy()

        if not self.entities.has_tag("specialBullet"):
            self.special_trigger = 0

    @staticmethod
    def _decay(entity: Entity) -> int:
        entity.lifespan.remaining = int(entity.lifespan.remaining - _DECAY)
        return entity.lifespan.remaining

    def enemy_spawner(self) -> None:
        """Spawn an enemy when the spawn frame is reached."""
        if self.current_frame == self.enemy_spawn_frame:
            self.spawn_enemy()

    def collision(self) -> None:
        """Bounce enemies off the walls and resolve all hits."""
        enemies = self.entities.get_entities("enemy")
        for enemy in enemies:
            pos, vel, r = enemy.transform.pos, enemy.transform.velocity, enemy.collision.radius
            if pos.x + r >= self.width:
                vel.x = -vel.x
            if pos.x - r <= 0:
                vel.x = -vel.x
            if pos.y + r >= self.height:
                vel.y = -vel.y
            if pos.y - r <= 0:
                vel.y = -vel.y

        for bullet in self.entities.get_entities("bullet"):
            for enemy in enemies:
                if self._touching(bullet, enemy):
                    bullet.destroy()
                    self.spawn_small_enemies(enemy)
                    enemy.destroy()
                    self.player.score.score += _KILL_SCORE

        for bullet in self.entities.get_entities("specialBullet"):
            for enemy in enemies:
                if self._touching(bullet, enemy):
                    self.spawn_small_enemies(enemy)
                    enemy.destroy()
                    self.player.score.score += _KILL_SCORE

        player = self.player
        for enemy in enemies:
            if self._touching(player, enemy):
                player.transform.pos.x = float(self.width // 2)
                player.transform.pos.y = float(self.height // 2)
                self.spawn_small_enemies(enemy)
                enemy.destroy()

        pos, r, controls = player.transform.pos, player.collision.radius, player.input
        if pos.x + r >= self.width:
            controls.right = False
        if pos.x - r <= 0:
            controls.left = False
        if pos.y + r >= self.height:
            controls.down = False
        if pos.y - r <= 0:
            controls.up = False

    @staticmethod
    def _touching(a: Entity, b: Entity) -> bool:
        reach = a.collision.radius + b.collision.radius
        return (a.transform.pos - b.transform.pos).dist_no_sqrt() < reach * reach

    def advance(self) -> None:
        """Spin every entity and, unless paused, move it by its velocity."""
        for entity in self.entities.get_entities():
            transform = entity.transform
            if transform is None:
                continue
            transform.angle += 1.0
            if not self.paused:
                transform.pos += transform.velocity

    def step(self) -> None:
        """Run one frame of game logic without rendering or input polling."""
        self._begin_frame()
        self._prepare_frame()
        self._finish_frame()

    def _begin_frame(self) -> None:
        self.entities.update()
        self.advance()

    def _prepare_frame(self) -> None:
        self.enemy_spawner()
        self.movement()

    def _finish_frame(self) -> None:
        if not self.paused:
            self.collision()
            self.lifespan()
            self.current_frame += 1

    # ---- spawning ------------------------------------------------------

    def spawn_player(self) -> Entity:
        """Create the player in the middle of the window."""
        cfg = self.config.player
        entity = self.entities.add_entity("player")
        entity.transform = Transform(
            Vec2(self.width / 2.0, self.height / 2.0), Vec2(cfg.speed, cfg.speed), 0.0
        )
        entity.shape = Shape(
            cfg.shape_radius,
            cfg.vertices,
            _color(cfg.fill_r, cfg.fill_g, cfg.fill_b),
            _color(cfg.outline_r, cfg.outline_g, cfg.outline_b),
            cfg.outline_thickness,
        )
        entity.input = Input()
        entity.collision = Collision(cfg.collision_radius)
        entity.score = Score(0)
        self.player = entity
        return entity

    def spawn_enemy(self) -> Entity:
        """Create an enemy at a random place with random speed, sides and colour."""
        cfg = self.config.enemy
        rng = self._random
        cr = cfg.collision_radius

        def channel() -> float:
            return rng.uniform(0, cfg.outline_r)

        entity = self.entities.add_entity("enemy")
        pos = Vec2(rng.uniform(cr, self.width - cr), rng.uniform(cr, self.height - cr))
        velocity = Vec2(rng.uniform(cfg.speed_min, cfg.speed_max), rng.uniform(cfg.speed_min, cfg.speed_max))
        entity.transform = Transform(pos, velocity, 0.0)
        points = int(rng.uniform(cfg.vertices_min, cfg.vertices_max))
        fill = _color(channel(), channel(), channel())
        outline = _color(channel(), channel(), channel())
        entity.shape = Shape(cfg.shape_radius, points, fill, outline, cfg.outline_thickness)
        entity.collision = Collision(cr)
        self.enemy_spawn_frame = self.current_frame + int(cfg.spawn_interval)
        return entity

    def spawn_small_enemies(self, entity: Entity) -> list[Entity]:
        """Burst an enemy into one half-size fragment per side, fanned out evenly."""
        shape = entity.shape
        count = int(shape.points)
        if count <= 0:
            return []
        step = float(360 // count)
        fragments = []
        for i in range(count):
            fragment = self.entities.add_entity("smallEnemy")
            fragment.shape = Shape(
                shape.radius / 2, count, shape.fill, shape.outline, shape.thickness / 2
            )
            fragment.lifespan = Lifespan(_SMALL_LIFESPAN)
            fragment.collision = Collision(shape.radius / 2)
            fragment.transform = Transform(
                entity.transform.pos.copy(), Vec2.from_angle(i * step), 0.0
            )
            fragments.append(fragment)
        return fragments

    def spawn_bullet(self, entity: Entity, target: Vec2) -> Entity:
        """Fire a bullet from the entity towards the target point."""
        cfg = self.config.bullet
        diff = target - entity.transform.pos
        length = diff.dist()
        velocity = diff / length * cfg.speed if length else Vec2(0.0, 0.0)
        bullet = self.entities.add_entity("bullet")
        bullet.transform = Transform(entity.transform.pos.copy(), velocity, 0.0)
        bullet.shape = self._bullet_shape(cfg.vertices)
        bullet.lifespan = Lifespan(cfg.lifespan)
        bullet.collision = Collision(cfg.collision_radius)
        return bullet

    def spawn_special_weapon(self, entity: Entity) -> list[Entity]:
        """Fire a ring of slow bullets outward from the entity."""
        cfg = self.config.bullet
        step = float(360 // _SPECIAL_SPLIT)
        bullets = []
        for i in range(_SPECIAL_SPLIT):
            direction = Vec2.from_angle(i * step)
            bullet = self.entities.add_entity("specialBullet")
            bullet.shape = self._bullet_shape(_SPECIAL_SPLIT)
            bullet.lifespan = Lifespan(cfg.lifespan)
            bullet.collision = Collision(cfg.collision_radius)
            bullet.transform = Transform(
                entity.transform.pos.copy(),
                Vec2(direction.x * cfg.speed / 3, direction.y * cfg.speed / 3),
                0.0,
            )
            bullets.append(bullet)
        return bullets

    def _bullet_shape(self, points: int) -> Shape:
        cfg = self.config.bullet
        return Shape(
            cfg.shape_radius,
            points,
            _color(cfg.fill_r, cfg.fill_g, cfg.fill_b),
            _color(cfg.outline_r, cfg.outline_g, cfg.outline_b),
            cfg.outline_thickness,
        )

    # ---- interactive loop ----------------------------------------------

    def run(self) -> None:
        """Open a window and play until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((max(self.width, 1), max(self.height, 1)))
            pygame.display.set_caption("Shape Wars")
            clock = pygame.time.Clock()
            score_font = self._load_font(pygame, self.config.font.size)
            pause_font = self._load_font(pygame, _PAUSE_FONT_SIZE)
            while self.running:
                self._begin_frame()
                self._draw(pygame, screen, score_font, pause_font)
                self._prepare_frame()
                self._poll_events(pygame)
                self._finish_frame()
                clock.tick(max(self.config.window.frame_limit, 0))
        finally:
            pygame.quit()

    def _load_font(self, pygame, size: int):
        size = max(int(size), 1)
        path = self.config.font.path
        if path:
            try:
                return pygame.font.Font(path, size)
            except (OSError, pygame.error):
                pass
        return pygame.font.Font(None, size)

    def _poll_events(self, pygame) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self.handle_key(pygame.key.name(event.key), event.type == pygame.KEYDOWN)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                button = {1: "left", 3: "right"}.get(event.button)
                if button is not None:
                    self.handle_mouse(button, *event.pos)

    def _draw(self, pygame, screen, score_font, pause_font) -> None:
        screen.fill((0, 0, 0))
        layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for entity in self.entities.get_entities():
            shape, transform = entity.shape, entity.transform
            if shape is None or transform is None or shape.points < 3:
                continue
            outer = _polygon(transform.pos, shape.radius + shape.thickness, shape.points, transform.angle)
            inner = _polygon(transform.pos, shape.radius, shape.points, transform.angle)
            pygame.draw.polygon(layer, tuple(_rgba(shape.outline)), outer)
            pygame.draw.polygon(layer, tuple(_rgba(shape.fill)), inner)
        screen.blit(layer, (0, 0))

        score_text = score_font.render(f"Your score : {self.player.score.score}", True, (255, 255, 255))
        screen.blit(score_text, (0, 0))

        font_cfg = self.config.font
        pause_text = pause_font.render("Game Pause", True, tuple(_rgba(_color(font_cfg.r, font_cfg.g, font_cfg.b)))[:3])
        pause_text.set_alpha(self.pause_alpha)
        screen.blit(
            pause_text,
            (self.width / 2 - pause_text.get_width() / 2, self.height / 2 - pause_text.get_height() / 2),
        )
        pygame.display.flip()


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (color.r, color.g, color.b, color.a)


def _polygon(center: Vec2, radius: float, points: int, angle: float) -> list[tuple[float, float]]:
    """Vertices of a regular polygon, first vertex at the top, rotated by angle degrees."""
    rotation = math.radians(angle)
    return [
        (
            center.x + radius * math.cos(2 * math.pi * i / points - math.pi / 2 + rotation),
            center.y + radius * math.sin(2 * math.pi * i / points - math.pi / 2 + rotation),
        )
        for i in range(points)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="shapewars", description="Shoot the shapes.")
    parser.add_argument("config", nargs="?", default="config.txt", help="configuration file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    Game(args.config, args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())