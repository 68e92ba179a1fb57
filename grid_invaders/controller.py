"""
Game lifecycle
"""

from __future__ import annotations

from enum import Enum

from grid_invaders.config import GameConfig
from grid_invaders.constants import LOSE_MESSAGE, RESTART_LABEL, WIN_MESSAGE
from grid_invaders.entities import Outcome, World
from grid_invaders.input import InputState
from grid_invaders.overlay import Overlay, StartButton
from grid_invaders.systems import Simulation
from grid_invaders.utils import logger


class GameState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class GameController:
    """
    Owns the session state and drives it through Idle, Running and Ended.
    """

    def __init__(
        self,
        config: GameConfig,
        overlay: Overlay | None = None,
        button: StartButton | None = None,
        simulation: Simulation | None = None,
    ):
        """
        :param config: Game configuration
        :type config: GameConfig

        :param overlay: Overlay to hide on start and show on game over
        :type overlay: Overlay

        :param button: Start button, relabelled after the first game
        :type button: StartButton

        :param simulation: Tick systems, defaults to the standard pipeline
        :type simulation: Simulation
        """
        self.config = config
        self.overlay = overlay or Overlay()
        self.button = button or StartButton()
        self.button.center_on(config.width / 2, config.height / 2 + 40)
        self.simulation = simulation or Simulation()

        self.input_state = InputState()
        self.world = World.create(config)
        self.state = GameState.IDLE
        self.outcome: Outcome | None = None

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def start(self) -> None:
        """
        Start or restart the game with a freshly built world
        """
        if self.running:
            raise RuntimeError("Game is already running")

        logger.info("Starting game")

        self.world = World.create(self.config)
        self.input_state.reset_fire()
        self.outcome = None
        self.overlay.hide()
        self.state = GameState.RUNNING

    def tick(self) -> Outcome | None:
        """
        Advance one frame while running

        :return: The outcome if this tick ended the game
        :rtype: Outcome | None
        """
        if not self.running:
            return None

        outcome = self.simulation.step(self.world, self.input_state)
        if outcome is not None:
            self.end(outcome)
        return outcome

    def end(self, outcome: Outcome) -> None:
        """
        Stop the game and show the result

        :param outcome: Win or lose
        :type outcome: Outcome
        """
        if not self.running:
            raise RuntimeError("Game is not running")

        self.state = GameState.ENDED
        self.outcome = outcome

        message = WIN_MESSAGE if outcome is Outcome.WIN else LOSE_MESSAGE
        logger.info(message)

        self.overlay.show(message)
        self.button.set_label(RESTART_LABEL)
