"""
Grid Invaders utils
"""

import logging

import pygame


class Logger:
    """
    Logger class for Grid Invaders
    """

    def __init__(self, name: str = "grid_invaders", level: int = logging.DEBUG) -> None:

        logging.basicConfig(level=level)
        self._logger = logging.getLogger(name)

    def debug(self, message: str) -> None:
        """
        Log a debug message.
        """

        self._logger.debug(message)

    def info(self, message: str) -> None:
        """
        Log an info message.
        """

        self._logger.info(message)

    def error(self, message: str) -> None:
        """
        Log an error message.
        """

        self._logger.error(message)


logger = Logger()


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """

    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
