import time

import pytest

from darkframe.game import (
    DEFAULT_MAX_ELAPSED_TIME,
    DEFAULT_TARGET_ELAPSED_TIME,
    KEY_COUNT,
    KEY_ESCAPE,
    Game,
    Rect,
    get_ticks,
)


class FakeClock:
    def __init__(self, step=0):
        self.now = 0
        self.step = step
        self.sleeps = []

    def __call__(self):
        value = self.now
        self.now += self.step
        return value

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += int(round(seconds * 10_000_000))


class Recorder(Game):
    def __init__(self, clock, stop_after=None, suppress=False):
        super().__init__("Recorder", 640, 480, clock=clock, sleep=clock.sleep)
        self.calls = []
        self.stop_after = stop_after
        self.suppress = suppress
        self.updates = 0

    def initialize(self):
        self.calls.append("initialize")

    def load_content(self):
        self.calls.append("load_content")

    def update(self):
        self.calls.append("update")
        self.updates += 1
        if self.suppress:
            self.suppress_draw = True
        if self.stop_after is not None and self.updates >= self.stop_after:
            self.should_exit = True

    def draw(self):
        self.calls.append("draw")


def test_rect_fields():
    r = Rect(1, 2, 3, 4)
    assert (r.x, r.y, r.w, r.h) == (1, 2, 3, 4)
    assert Rect() == Rect(0, 0, 0, 0)


def test_str_is_title():
    game = Game("Space", 10, 20, clock=FakeClock())
    assert str(game) == "Space"
    assert game.width == 10 and game.height == 20


def test_key_event_tracks_state():
    game = Game("t", 1, 1, clock=FakeClock())
    game.key_event(65, True)
    assert game.keys[65] is True
    game.key_event(65, False)
    assert game.keys[65] is False


def test_key_event_out_of_range_ignored():
    game = Game("t", 1, 1, clock=FakeClock())
    game.key_event(KEY_COUNT + 5, True)
    game.key_event(-1, True)
    assert not any(game.keys)
    assert len(game.keys) == KEY_COUNT


def test_escape_stops_game():
    clock = FakeClock(step=DEFAULT_TARGET_ELAPSED_TIME)
    game = Recorder(clock)
    Game.start(game)
    Game.key_event(game, KEY_ESCAPE, True)
    Game.run_loop(game)
    assert game.should_exit is True
    assert game.is_running is False
    assert game.updates == 0


def test_one_fixed_step_per_target_interval():
    clock = FakeClock(step=DEFAULT_TARGET_ELAPSED_TIME)
    game = Recorder(clock)
    Game.tick(game)
    assert game.calls == ["update", "draw"]
    assert game.total_game_time == DEFAULT_TARGET_ELAPSED_TIME
    assert game.accumulated_elapsed_time == 0
    assert game.elapsed_game_time == DEFAULT_TARGET_ELAPSED_TIME
    assert game.delta == pytest.approx(DEFAULT_TARGET_ELAPSED_TIME * 1e-7)


def test_short_interval_sleeps_then_draws_without_update():
    clock = FakeClock()
    game = Recorder(clock)
    Game.tick(game)
    assert clock.sleeps == [pytest.approx(0.016)]
    assert game.updates == 0
    assert game.calls == ["draw"]
    assert game.elapsed_game_time == 0


def test_large_jump_is_clamped_and_marks_slow():
    clock = FakeClock()
    game = Recorder(clock)
    clock.now = 10 * DEFAULT_MAX_ELAPSED_TIME
    Game.tick(game)
    assert game.updates * DEFAULT_TARGET_ELAPSED_TIME <= DEFAULT_MAX_ELAPSED_TIME
    assert game.total_game_time == game.updates * DEFAULT_TARGET_ELAPSED_TIME
    assert game.accumulated_elapsed_time < DEFAULT_TARGET_ELAPSED_TIME
    assert game.is_running_slowly is True
    assert game.update_frame_lag == game.updates - 1


def test_slow_flag_clears_after_steady_ticks():
    clock = FakeClock()
    game = Recorder(clock)
    clock.now = 10 * DEFAULT_MAX_ELAPSED_TIME
    Game.tick(game)
    clock.step = DEFAULT_TARGET_ELAPSED_TIME
    for _ in range(60):
        Game.tick(game)
    assert game.update_frame_lag == 0
    assert game.is_running_slowly is False


def test_variable_step_uses_whole_elapsed_time():
    clock = FakeClock()
    game = Recorder(clock)
    game.is_fixed_time_step = False
    clock.now = 12345
    Game.tick(game)
    assert game.elapsed_game_time == 12345
    assert game.total_game_time == 12345
    assert game.accumulated_elapsed_time == 0
    assert game.delta == pytest.approx(12345 * 1e-7)
    assert game.calls == ["update", "draw"]


def test_suppressed_draw_is_skipped_once():
    clock = FakeClock(step=DEFAULT_TARGET_ELAPSED_TIME)
    game = Recorder(clock, suppress=True)
    Game.tick(game)
    assert game.calls == ["update"]
    assert game.suppress_draw is False


def test_run_calls_hooks_in_order_until_exit():
    clock = FakeClock(step=DEFAULT_TARGET_ELAPSED_TIME)
    game = Recorder(clock, stop_after=3)
    Game.run(game)
    assert game.calls == ["initialize", "load_content"] + ["update", "draw"] * 3
    assert game.is_running is False


def test_get_ticks_tracks_wall_clock():
    before = time.time_ns() // 100
    ticks = get_ticks()
    after = time.time_ns() // 100
    assert ticks % 10 == 0
    assert before - 10 <= ticks <= after
    assert get_ticks() >= ticks