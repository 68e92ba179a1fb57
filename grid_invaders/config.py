"""
Game configuration.

Every size, speed and colour the game uses lives on :class:`GameConfig`.
The config is validated once at construction so a malformed layout fails
before a window is opened.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Union

import pygame

from grid_invaders import constants

ColorValue = Union[str, tuple]


class ConfigError(ValueError):
    """
    Raised when a configuration value is invalid.
    """


@dataclass(frozen=True)
class GameConfig:  # pylint: disable=too-many-instance-attributes
    """
    Game configuration
    """

    width: int = constants.WIDTH
    height: int = constants.HEIGHT
    fps: int = constants.FPS
    caption: str = constants.CAPTION

    player_width: int = constants.PLAYER_WIDTH
    player_height: int = constants.PLAYER_HEIGHT
    player_speed: int = constants.PLAYER_SPEED
    player_bottom_margin: int = constants.PLAYER_BOTTOM_MARGIN

    projectile_width: int = constants.PROJECTILE_WIDTH
    projectile_height: int = constants.PROJECTILE_HEIGHT
    projectile_speed: int = constants.PROJECTILE_SPEED

    enemy_rows: int = constants.ENEMY_ROWS
    enemy_columns: int = constants.ENEMY_COLUMNS
    enemy_width: int = constants.ENEMY_WIDTH
    enemy_height: int = constants.ENEMY_HEIGHT
    enemy_padding: int = constants.ENEMY_PADDING
    enemy_offset_top: int = constants.ENEMY_OFFSET_TOP
    enemy_offset_left: int = constants.ENEMY_OFFSET_LEFT
    enemy_dx: int = constants.ENEMY_DX
    enemy_drop: int = constants.ENEMY_DROP

    background_color: ColorValue = constants.BACKGROUND_COLOR
    player_color: ColorValue = constants.PLAYER_COLOR
    projectile_color: ColorValue = constants.PROJECTILE_COLOR
    enemy_color: ColorValue = constants.ENEMY_COLOR
    text_color: ColorValue = constants.TEXT_COLOR

    def __post_init__(self) -> None:
        self._validate()

    @property
    def player_y(self) -> int:
        """
        Fixed row of the player ship
        """
        return self.height - self.player_height - self.player_bottom_margin

    @property
    def formation_width(self) -> int:
        """
        Width of the full grid at its starting position
        """
        return (
            self.enemy_columns * self.enemy_width
            + (self.enemy_columns - 1) * self.enemy_padding
        )

    @property
    def formation_height(self) -> int:
        """
        Height of the full grid at its starting position
        """
        return (
            self.enemy_rows * self.enemy_height
            + (self.enemy_rows - 1) * self.enemy_padding
        )

    def _validate(self) -> None:
        positive = (
            "width",
            "height",
            "fps",
            "player_width",
            "player_height",
            "player_speed",
            "projectile_width",
            "projectile_height",
            "projectile_speed",
            "enemy_rows",
            "enemy_columns",
            "enemy_width",
            "enemy_height",
            "enemy_dx",
            "enemy_drop",
        )
        for name in positive:
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        non_negative = (
            "player_bottom_margin",
            "enemy_padding",
            "enemy_offset_top",
            "enemy_offset_left",
        )
        for name in non_negative:
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")

        if self.player_width > self.width:
            raise ConfigError("player is wider than the field")
        if self.player_y < 0:
            raise ConfigError("player does not fit in the field")
        if self.enemy_offset_left + self.formation_width > self.width:
            raise ConfigError("enemy grid is wider than the field")
        if self.enemy_offset_top + self.formation_height >= self.player_y:
            raise ConfigError("enemy grid starts on or below the player row")

        for name in (
            "background_color",
            "player_color",
            "projectile_color",
            "enemy_color",
            "text_color",
        ):
            value = getattr(self, name)
            try:
                pygame.Color(value)
            except (ValueError, TypeError) as e:
                raise ConfigError(f"{name} is not a valid color: {value!r}") from e

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        """
        Build a config from a nested settings dict

        Sections map onto prefixed fields, e.g. ``{"player": {"speed": 3}}``
        sets ``player_speed``. ``window`` and ``colors`` are special cased.

        :param data: Settings
        :type data: dict

        :raise ConfigError: On unknown keys or invalid values

        :return: GameConfig
        :rtype: GameConfig
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for section, value in data.items():
            if section == "window":
                items = dict(value)
            elif section == "colors":
                items = {f"{k}_color": v for k, v in value.items()}
            elif section in ("player", "projectile"):
                items = {f"{section}_{k}": v for k, v in value.items()}
            elif section == "formation":
                items = {f"enemy_{k}": v for k, v in value.items()}
            else:
                items = {section: value}

            for key, item in items.items():
                if key not in known:
                    raise ConfigError(f"Unknown setting {section}.{key}")
                kwargs[key] = item

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """
        Nested settings dict accepted by :meth:`from_dict`
        """
        flat = asdict(self)
        data: dict[str, Any] = {
            "window": {},
            "player": {},
            "projectile": {},
            "formation": {},
            "colors": {},
        }
        for key, value in flat.items():
            if key.endswith("_color"):
                data["colors"][key[: -len("_color")]] = value
            elif key.startswith("player_"):
                data["player"][key[len("player_"):]] = value
            elif key.startswith("projectile_"):
                data["projectile"][key[len("projectile_"):]] = value
            elif key.startswith("enemy_"):
                data["formation"][key[len("enemy_"):]] = value
            else:
                data["window"][key] = value
        return data
