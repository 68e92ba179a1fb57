"""
Overlay and start button shown outside of play
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_invaders.constants import START_LABEL


@dataclass
class Overlay:
    """
    Panel covering the field before the first start and after the game ends
    """

    visible: bool = True
    message: str = ""

    def show(self, message: str) -> None:
        self.message = message
        self.visible = True

    def hide(self) -> None:
        self.visible = False


@dataclass
class StartButton:
    """
    Start / restart trigger drawn on the overlay
    """

    label: str = START_LABEL
    x: int = 0
    y: int = 0
    width: int = 200
    height: int = 50

    def set_label(self, label: str) -> None:
        self.label = label

    def center_on(self, cx: float, cy: float) -> None:
        self.x = int(cx - self.width / 2)
        self.y = int(cy - self.height / 2)

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )
