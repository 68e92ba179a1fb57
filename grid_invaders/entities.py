"""
Grid Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from grid_invaders.config import GameConfig


class Outcome(str, Enum):
    WIN = "win"
    LOSE = "lose"


@dataclass
class Player:
    """
    Player ship
    """

    x: float
    y: float
    width: int
    height: int
    speed: int

    def move(self, direction: int, field_width: int) -> None:
        """
        Move the ship and keep it inside the field

        :param direction: -1 for left, 1 for right, 0 to stay
        :type direction: int

        :param field_width: Width of the playing field
        :type field_width: int
        """
        self.x += direction * self.speed
        self.x = max(0, min(field_width - self.width, self.x))

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Projectile:
    """
    Projectile fired by the player
    """

    x: float
    y: float
    width: int
    height: int
    speed: int

    def update(self) -> None:
        self.y -= self.speed

    @property
    def off_screen(self) -> bool:
        return self.y < 0


@dataclass
class EnemySlot:
    """
    One cell of the enemy grid
    """

    row: int
    col: int
    x: float
    y: float
    width: int
    height: int
    alive: bool = True

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        """
        Strict point-in-rect test, edges excluded

        :param x: X coordinate
        :type x: float

        :param y: Y coordinate
        :type y: float

        :return: bool
        :rtype: bool
        """
        return (
            self.x < x < self.x + self.width
            and self.y < y < self.y + self.height
        )


@dataclass
class World:
    """
    State of one play session: the ship, live projectiles and the enemy
    grid. Slots are stored row-major and never removed, only marked dead.
    """

    config: GameConfig
    player: Player
    projectiles: list[Projectile] = field(default_factory=list)
    enemies: list[EnemySlot] = field(default_factory=list)
    direction: int = 1

    @classmethod
    def create(cls, config: GameConfig) -> World:
        """
        Build a fresh session: ship centred, no projectiles, full grid,
        formation heading right.

        :param config: Game configuration
        :type config: GameConfig

        :return: World
        :rtype: World
        """
        player = Player(
            x=config.width / 2 - config.player_width / 2,
            y=config.player_y,
            width=config.player_width,
            height=config.player_height,
            speed=config.player_speed,
        )
        world = cls(config=config, player=player)

        for r in range(config.enemy_rows):
            for c in range(config.enemy_columns):
                world.enemies.append(
                    EnemySlot(
                        row=r,
                        col=c,
                        x=config.enemy_offset_left
                        + c * (config.enemy_width + config.enemy_padding),
                        y=config.enemy_offset_top
                        + r * (config.enemy_height + config.enemy_padding),
                        width=config.enemy_width,
                        height=config.enemy_height,
                    )
                )

        return world

    def alive_enemies(self) -> Iterator[EnemySlot]:
        return (e for e in self.enemies if e.alive)

    def enemy_at(self, row: int, col: int) -> EnemySlot:
        return self.enemies[row * self.config.enemy_columns + col]

    def spawn_projectile(self) -> Projectile:
        """
        Fire a projectile from the horizontal centre of the ship
        """
        cfg = self.config
        projectile = Projectile(
            x=self.player.center_x - cfg.projectile_width / 2,
            y=self.player.y,
            width=cfg.projectile_width,
            height=cfg.projectile_height,
            speed=cfg.projectile_speed,
        )
        self.projectiles.append(projectile)
        return projectile
