from grid_invaders.entities import EnemySlot, World


def test_world_starts_centred_with_full_grid(config, world):
    assert world.player.x == 380
    assert world.player.y == 570
    assert world.projectiles == []
    assert world.direction == 1
    assert len(world.enemies) == config.enemy_rows * config.enemy_columns
    assert all(e.alive for e in world.enemies)


def test_grid_layout_is_row_major(world):
    first = world.enemies[0]
    assert (first.row, first.col, first.x, first.y) == (0, 0, 30, 30)

    slot = world.enemy_at(2, 3)
    assert (slot.row, slot.col) == (2, 3)
    assert slot.x == 30 + 3 * 40
    assert slot.y == 30 + 2 * 30


def test_player_move_is_clamped(world):
    for _ in range(500):
        world.player.move(1, 800)
    assert world.player.x == 760

    for _ in range(500):
        world.player.move(-1, 800)
    assert world.player.x == 0


def test_spawn_projectile_from_ship_centre(world):
    projectile = world.spawn_projectile()

    assert projectile.x == 380 + 20 - 2
    assert projectile.y == world.player.y
    assert world.projectiles == [projectile]


def test_enemy_contains_is_strict():
    slot = EnemySlot(row=0, col=0, x=10, y=10, width=30, height=20)

    assert slot.contains(11, 11)
    assert slot.contains(39, 29)
    assert not slot.contains(10, 15)
    assert not slot.contains(40, 15)
    assert not slot.contains(20, 10)
    assert not slot.contains(20, 30)


def test_alive_enemies_skips_destroyed(world):
    world.enemies[0].alive = False

    alive = list(world.alive_enemies())

    assert world.enemies[0] not in alive
    assert len(alive) == len(world.enemies) - 1


def test_two_fresh_worlds_are_equal(config):
    assert World.create(config) == World.create(config)
