import pytest

from snake.config import Config
from snake.main import parse_args


def test_defaults_match_classic_board() -> None:
    cfg = Config()
    assert (cfg.grid_w, cfg.grid_h, cfg.tile_size) == (40, 30, 16)
    assert cfg.cells == 1200
    assert cfg.screen_size == (640, 480)


@pytest.mark.parametrize(
    "overrides",
    [
        {"grid_w": 3},
        {"grid_h": 0},
        {"tile_size": 0},
        {"base_tick_speed": 0},
        {"speed_up_every": 0},
        {"speed_delta": -1},
        {"fps": 0},
        {"max_food_attempts": 0},
        {"min_tick_speed": 9},
    ],
)
def test_invalid_config_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        Config(**overrides)


def test_cli_overrides() -> None:
    args = parse_args(["--grid-w", "20", "--seed", "3", "--log-level", "DEBUG"])
    assert args.grid_w == 20
    assert args.grid_h == 30
    assert args.seed == 3
    assert args.log_level == "DEBUG"
