import pytest

from grid_invaders.config import ConfigError, GameConfig


def test_defaults():
    config = GameConfig()

    assert (config.width, config.height) == (800, 600)
    assert config.player_y == 570
    assert config.formation_width == 390
    assert config.formation_height == 140


@pytest.mark.parametrize(
    "overrides",
    [
        {"enemy_rows": 0},
        {"player_speed": -1},
        {"fps": 0},
        {"enemy_padding": -5},
        {"enemy_columns": 30},
        {"player_width": 900},
        {"enemy_offset_top": 500},
        {"enemy_color": "not-a-colour"},
    ],
)
def test_invalid_config_fails_fast(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides)


def test_from_dict_maps_sections():
    config = GameConfig.from_dict(
        {
            "window": {"width": 640, "height": 480, "caption": "Test"},
            "player": {"speed": 3},
            "formation": {"rows": 3, "columns": 8},
            "colors": {"enemy": "purple"},
            "fps": 30,
        }
    )

    assert (config.width, config.height, config.caption) == (640, 480, "Test")
    assert config.player_speed == 3
    assert (config.enemy_rows, config.enemy_columns) == (3, 8)
    assert config.enemy_color == "purple"
    assert config.fps == 30


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigError):
        GameConfig.from_dict({"player": {"lives": 3}})


def test_to_dict_is_accepted_by_from_dict():
    config = GameConfig(enemy_rows=2, player_color="blue")

    assert GameConfig.from_dict(config.to_dict()) == config
