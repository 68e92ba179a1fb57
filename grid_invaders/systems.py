"""
Per-tick simulation systems
"""

from __future__ import annotations

from dataclasses import dataclass, field

from grid_invaders.entities import Outcome, World
from grid_invaders.input import InputState
from grid_invaders.utils import logger


@dataclass
class TickContext:
    """
    State shared by the systems during one tick
    """

    world: World
    input_state: InputState
    outcome: Outcome | None = None


@dataclass
class BulletSpawnSystem:
    """
    Fire one projectile per shot queued by the input latch.
    """

    name: str = "grid_invaders_bullet_spawn"

    def step(self, ctx: TickContext):
        for _ in range(ctx.input_state.consume_fire()):
            projectile = ctx.world.spawn_projectile()
            logger.debug(f"Shooting projectile at ({projectile.x}, {projectile.y})")


@dataclass
class ShipSystem:
    """
    Move ship based on the held direction keys.
    """

    name: str = "grid_invaders_ship"

    def step(self, ctx: TickContext):
        move_x = int(ctx.input_state.right) - int(ctx.input_state.left)
        if move_x:
            ctx.world.player.move(move_x, ctx.world.config.width)


@dataclass
class BulletMoveSystem:
    """
    Advance projectiles and drop the ones that left the top of the field.
    """

    name: str = "grid_invaders_bullet_move"

    def step(self, ctx: TickContext):
        for p in ctx.world.projectiles:
            p.update()

        ctx.world.projectiles = [
            p for p in ctx.world.projectiles if not p.off_screen
        ]


@dataclass
class FormationSystem:
    """
    Move enemies as a formation:
    - Move horizontally
    - If any alive enemy touches the wall -> drop down, nudge and reverse
    """

    name: str = "grid_invaders_formation"

    def step(self, ctx: TickContext):
        w = ctx.world
        vw = w.config.width
        dx = w.direction * w.config.enemy_dx

        # 1) detect, no mutation
        hit_wall = False
        for e in w.alive_enemies():
            if w.direction > 0 and e.x + e.width >= vw:
                hit_wall = True
                break
            if w.direction < 0 and e.x <= 0:
                hit_wall = True
                break

        # 2) apply uniformly
        if hit_wall:
            for e in w.alive_enemies():
                e.y += w.config.enemy_drop
                e.x += dx
            w.direction = -w.direction
            logger.debug(f"Formation hit the wall, direction now {w.direction}")
        else:
            for e in w.alive_enemies():
                e.x += dx


@dataclass
class LoseCheckSystem:
    """
    End the game once any alive enemy reaches the player's row.
    """

    name: str = "grid_invaders_lose_check"

    def step(self, ctx: TickContext):
        player_y = ctx.world.player.y
        for e in ctx.world.alive_enemies():
            if e.bottom >= player_y:
                logger.debug(f"Enemy ({e.row}, {e.col}) reached the player row")
                ctx.outcome = Outcome.LOSE
                return


@dataclass
class CollisionSystem:
    """
    Resolve at most one projectile / enemy hit per tick.

    Projectiles are scanned in firing order and enemies row-major; the
    projectile's top-left point has to lie strictly inside the enemy.
    """

    name: str = "grid_invaders_collision"

    def step(self, ctx: TickContext):
        w = ctx.world
        for i, p in enumerate(w.projectiles):
            for e in w.alive_enemies():
                if e.contains(p.x, p.y):
                    e.alive = False
                    del w.projectiles[i]
                    logger.debug(f"Hit enemy ({e.row}, {e.col})")
                    return


@dataclass
class WinCheckSystem:
    name: str = "grid_invaders_win_check"

    def step(self, ctx: TickContext):
        if not any(True for _ in ctx.world.alive_enemies()):
            ctx.outcome = Outcome.WIN


def default_systems() -> list:
    """
    Systems in tick order
    """
    return [
        BulletSpawnSystem(),
        ShipSystem(),
        BulletMoveSystem(),
        FormationSystem(),
        LoseCheckSystem(),
        CollisionSystem(),
        WinCheckSystem(),
    ]


@dataclass
class Simulation:
    """
    Runs the systems in order until one of them decides the outcome.
    """

    systems: list = field(default_factory=default_systems)

    def step(self, world: World, input_state: InputState) -> Outcome | None:
        """
        Advance the world by one tick

        :param world: Session state, mutated in place
        :type world: World

        :param input_state: Current input
        :type input_state: InputState

        :return: The outcome if the tick ended the game
        :rtype: Outcome | None
        """
        ctx = TickContext(world=world, input_state=input_state)
        for system in self.systems:
            system.step(ctx)
            if ctx.outcome is not None:
                break
        return ctx.outcome


def simulate(world: World, input_state: InputState) -> Outcome | None:
    """
    Advance the world by one tick with the default systems
    """
    return Simulation().step(world, input_state)
