"""
Grid Invaders game
"""

from __future__ import annotations

import pygame

from grid_invaders.config import GameConfig
from grid_invaders.controller import GameController
from grid_invaders.input import Action
from grid_invaders.renderer import Renderer
from grid_invaders.utils import logger, set_screen

KEY_BINDINGS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_SPACE: Action.FIRE,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class GridInvaders:
    """
    Grid Invaders window: binds pygame events to the controller and paces
    ticks with the clock.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        :param config: Game configuration, defaults to the stock layout
        :type config: GameConfig
        """
        self._config = config or GameConfig()
        logger.debug(f"Initializing {self._config.caption}")

        self._clock = pygame.time.Clock()
        self._carry_on = True
        pygame.init()

        logger.debug("Setting screen")
        self._screen = set_screen(
            self._config.caption, self._config.width, self._config.height
        )
        self._controller = GameController(self._config)
        self._renderer = Renderer(self._screen, self._config)

    @property
    def controller(self) -> GameController:
        return self._controller

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Translate one pygame event into input state or a start trigger

        :param event: pygame event
        :type event: pygame.event.Event
        """
        if event.type == pygame.QUIT:
            logger.info("Quitting the game")
            self._carry_on = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                logger.info("Quitting the game")
                self._carry_on = False
            elif event.key in START_KEYS and not self._controller.running:
                self._controller.start()
            else:
                self._controller.input_state.press(KEY_BINDINGS.get(event.key))
        elif event.type == pygame.KEYUP:
            self._controller.input_state.release(KEY_BINDINGS.get(event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self._controller.running and self._controller.button.contains(
                *event.pos
            ):
                self._controller.start()

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_game_logic(self):
        """
        Handle the game logic
        """
        outcome = self._controller.tick()
        if outcome is not None:
            logger.debug(f"Game over: {outcome.value}")

    def draw_stuff(self):
        """
        Draw the stuff
        """
        self._renderer.draw(self._controller.world)
        self._renderer.draw_overlay(self._controller.overlay, self._controller.button)
        self._renderer.present()

    def run(self):
        """
        Run the game
        """
        logger.debug("Running the game")

        try:
            while self._carry_on:
                self._clock.tick(self._config.fps)
                self.handle_events()
                self.handle_game_logic()
                self.draw_stuff()
        except Exception as e:
            logger.error(f"Game crashed: {e}")
            raise
        finally:
            pygame.quit()
