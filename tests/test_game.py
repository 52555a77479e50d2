from gridsnake.config import Config, RIGHT
from gridsnake.game import new_game_state, update
from gridsnake.ticker import Ticker


def test_ticker_fires_only_after_interval():
    ticker = Ticker(tick_ms=100, last_tick=0)
    assert not ticker.due(50)
    assert not ticker.due(100)
    assert ticker.due(101)
    assert ticker.last_tick == 101
    assert not ticker.due(150)
    assert ticker.due(202)


def test_new_game_state_uses_config(small_cfg):
    state = new_game_state(small_cfg, now_ms=500)
    assert (state.world.row_count, state.world.col_count) == (8, 10)
    assert state.ticker.tick_ms == 100
    assert state.ticker.last_tick == 500
    assert state.world.in_bounds(state.food.food)


def test_update_steps_at_tick_rate_not_frame_rate(small_cfg):
    state = new_game_state(small_cfg)
    state.food.food = (7, 7)
    heads = []
    # 30 polls at ~16ms apart, tick every 100ms
    for now in range(16, 16 * 31, 16):
        assert update(state, now)
        heads.append(state.world.head)
    moves = sum(1 for a, b in zip(heads, heads[1:]) if a != b)
    assert 3 <= moves <= 5


def test_update_grows_on_same_frame_head_reaches_food(small_cfg):
    state = new_game_state(small_cfg)
    state.world.snake = [(2, 1), (2, 2), (2, 3)]
    state.world.set_direction(RIGHT)
    state.food.food = (2, 4)

    assert update(state, 101)
    assert state.world.head == (2, 4)
    assert len(state.world.snake) == 4
    assert state.food.food not in state.world.snake


def test_update_while_paused_leaves_snake(small_cfg):
    state = new_game_state(small_cfg)
    state.food.food = (7, 7)
    state.world.toggle_running()
    before = list(state.world.snake)
    for now in (200, 400, 600):
        update(state, now)
    assert state.world.snake == before


def test_update_reports_full_grid():
    cfg = Config(width=30, height=10, cell_size=10, seed=1)  # 1 x 3 grid
    state = new_game_state(cfg)
    state.world.toggle_running()
    state.food.food = state.world.head
    assert not update(state, 0)


def test_first_step_waits_one_tick_after_start(small_cfg):
    state = new_game_state(small_cfg, now_ms=1000)
    state.food.food = (7, 7)
    update(state, 1010)
    assert state.world.head == (0, 2)
    update(state, 1101)
    assert state.world.head == (0, 1)
