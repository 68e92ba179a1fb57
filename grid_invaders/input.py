"""
Player input state
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Action(Enum):
    """Actions the player can hold or press."""

    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()


@dataclass
class InputState:
    """
    Held movement keys and the one-shot fire latch.

    A fire press is honoured only while ``fire_ready`` is set. Honouring it
    queues a shot and clears the latch; only releasing the fire key arms it
    again, so holding the key down yields a single shot. Several taps between
    two ticks queue several shots.
    """

    left: bool = False
    right: bool = False
    fire_ready: bool = True
    pending_shots: int = 0

    def press(self, action: Action | None) -> None:
        """
        Apply a key-down

        :param action: Bound action, ``None`` for unbound keys
        :type action: Action | None
        """
        if action is Action.LEFT:
            self.left = True
        elif action is Action.RIGHT:
            self.right = True
        elif action is Action.FIRE and self.fire_ready:
            self.pending_shots += 1
            self.fire_ready = False

    def release(self, action: Action | None) -> None:
        """
        Apply a key-up

        :param action: Bound action, ``None`` for unbound keys
        :type action: Action | None
        """
        if action is Action.LEFT:
            self.left = False
        elif action is Action.RIGHT:
            self.right = False
        elif action is Action.FIRE:
            self.fire_ready = True

    def consume_fire(self) -> int:
        """Return the number of shots queued since the last call and drain them."""
        shots = self.pending_shots
        self.pending_shots = 0
        return shots

    def reset_fire(self) -> None:
        """
        Drop queued shots and re-arm the latch. Held movement keys are kept.
        """
        self.fire_ready = True
        self.pending_shots = 0
