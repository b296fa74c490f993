import pytest

from pixi.context import BLACK, WHITE, Key, StateContext
from pixi.menu import Menu
from pixi.snake import Snake
from pixi.stacker import N_ROW, Stacker


@pytest.fixture
def ctx():
    context = StateContext()
    context.load()
    return context


@pytest.fixture
def menu(ctx):
    state = Menu()
    state.context = ctx
    return state


def _press(ctx, state, key):
    ctx.press(key)
    state.tick(0.0)
    ctx._pressed.clear()


def test_games_listed_in_order():
    games = Menu().games
    assert [name for name, _ in games] == ["Stacker", "Snake"]
    built = [factory() for _, factory in games]
    assert (built[0].x, built[0].y, built[0].size) == (2, N_ROW - 1, 3)
    assert list(built[1].body) == [(2, 4), (2, 3), (2, 2)]


def test_down_and_up_wrap(ctx, menu):
    assert menu.selected_index() == 0
    _press(ctx, menu, Key.DOWN)
    assert menu.selected_index() == 1
    _press(ctx, menu, Key.DOWN)
    assert menu.selected_index() == 0
    _press(ctx, menu, Key.UP)
    assert menu.selected_index() == 1


def test_enter_starts_stacker(ctx, menu, capsys):
    _press(ctx, menu, Key.ENTER)
    upcoming = ctx.upcoming_state
    assert isinstance(upcoming, Stacker)
    assert (upcoming.x, upcoming.y, upcoming.size) == (2, N_ROW - 1, 3)
    assert "Playing: Stacker" in capsys.readouterr().out


def test_enter_starts_snake(ctx, menu, capsys):
    _press(ctx, menu, Key.DOWN)
    _press(ctx, menu, Key.ENTER)
    upcoming = ctx.upcoming_state
    assert isinstance(upcoming, Snake)
    assert list(upcoming.body) == [(2, 4), (2, 3), (2, 2)]
    assert "Playing: Snake" in capsys.readouterr().out


def test_escape_quits(ctx, menu):
    _press(ctx, menu, Key.ESCAPE)
    assert ctx.running is False
    assert ctx.on_user_update(0.0) is False


def test_enter_takes_precedence_over_escape(ctx, menu):
    ctx.press(Key.ENTER)
    ctx.press(Key.ESCAPE)
    menu.tick(0.0)
    assert ctx.running is True
    assert isinstance(ctx.upcoming_state, Stacker)


def test_render_white_background_with_marker(ctx, menu):
    menu.render()
    assert tuple(ctx.screen.get_at((0, 0)))[:3] == WHITE
    marker_pixels = [
        tuple(ctx.screen.get_at((x, y)))[:3]
        for x in range(10, 20)
        for y in range(20, 32)
    ]
    assert BLACK in marker_pixels


def test_tick_without_context_raises():
    with pytest.raises(RuntimeError):
        Menu().tick(0.0)