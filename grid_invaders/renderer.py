"""
Draw the world onto a pygame surface
"""

from __future__ import annotations

import pygame

from grid_invaders.config import GameConfig
from grid_invaders.constants import OVERLAY_COLOR
from grid_invaders.entities import World
from grid_invaders.overlay import Overlay, StartButton


class Renderer:
    """
    Paints entities as flat coloured rectangles. Reads the world, never
    changes it.
    """

    def __init__(self, surface: pygame.Surface, config: GameConfig):
        """
        :param surface: Surface to draw on
        :type surface: pygame.Surface

        :param config: Game configuration, for colours
        :type config: GameConfig
        """
        self._surface = surface
        self._background = pygame.Color(config.background_color)
        self._player_color = pygame.Color(config.player_color)
        self._projectile_color = pygame.Color(config.projectile_color)
        self._enemy_color = pygame.Color(config.enemy_color)
        self._text_color = pygame.Color(config.text_color)
        self._font: pygame.font.Font | None = None
        self._button_font: pygame.font.Font | None = None

    def draw(self, world: World) -> None:
        """
        Clear the surface and draw the ship, projectiles and alive enemies

        :param world: Current state
        :type world: World
        """
        self._surface.fill(self._background)

        p = world.player
        pygame.draw.rect(
            self._surface,
            self._player_color,
            pygame.Rect(int(p.x), int(p.y), p.width, p.height),
        )

        for b in world.projectiles:
            pygame.draw.rect(
                self._surface,
                self._projectile_color,
                pygame.Rect(int(b.x), int(b.y), b.width, b.height),
            )

        for e in world.alive_enemies():
            pygame.draw.rect(
                self._surface,
                self._enemy_color,
                pygame.Rect(int(e.x), int(e.y), e.width, e.height),
            )

    def draw_overlay(self, overlay: Overlay, button: StartButton) -> None:
        """
        Draw the message panel and start button if the overlay is visible

        :param overlay: Overlay state
        :type overlay: Overlay

        :param button: Start button
        :type button: StartButton
        """
        if not overlay.visible:
            return

        if self._font is None:
            self._font = pygame.font.Font(None, 64)
            self._button_font = pygame.font.Font(None, 36)

        width, height = self._surface.get_size()

        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        self._surface.blit(shade, (0, 0))

        if overlay.message:
            text = self._font.render(overlay.message, True, self._text_color)
            self._surface.blit(
                text, text.get_rect(center=(width // 2, height // 2 - 40))
            )

        rect = pygame.Rect(button.x, button.y, button.width, button.height)
        pygame.draw.rect(self._surface, self._text_color, rect, width=2)
        label = self._button_font.render(button.label, True, self._text_color)
        self._surface.blit(label, label.get_rect(center=rect.center))

    @staticmethod
    def present() -> None:
        pygame.display.flip()
