from snake.config import Config, BG, BODY, HEAD, FOOD
from snake.game import Snapshot
from snake.render import Fill, Text, Tile, render, GAME_OVER_TEXT, CONTROLS_HINT


def make_snapshot(**overrides) -> Snapshot:
    fields = dict(
        snake=((20, 15), (19, 15), (18, 15)),
        head_index=0,
        food=(3, 4),
        score=7,
        tick_speed=6,
        game_over=False,
        grid_w=40,
        grid_h=30,
    )
    fields.update(overrides)
    return Snapshot(**fields)


def test_render_draws_background_food_then_snake() -> None:
    commands = render(make_snapshot())

    assert commands[:5] == [
        Fill(BG),
        Tile(3, 4, FOOD),
        Tile(20, 15, HEAD),
        Tile(19, 15, BODY),
        Tile(18, 15, BODY),
    ]


def test_render_hud_lines() -> None:
    texts = [c.text for c in render(make_snapshot()) if isinstance(c, Text)]
    assert texts == ["Score: 7", "Speed (frames/move): 6", CONTROLS_HINT]


def test_render_game_over_banner_is_centered_on_screen() -> None:
    cfg = Config(grid_w=20, grid_h=10, tile_size=10)
    commands = render(make_snapshot(game_over=True, snake=((5, 5),), food=(1, 1)), cfg)

    assert commands[-1] == Text(GAME_OVER_TEXT, 100 - 120, 50)
    assert not any(isinstance(c, Text) and c.text == GAME_OVER_TEXT for c in render(make_snapshot()))
