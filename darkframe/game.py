"""A fixed-timestep game loop with keyboard state and overridable hooks."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

TICKS_PER_MILLISECOND = 10000
TICKS_PER_SECOND = TICKS_PER_MILLISECOND * 1000
MILLISECONDS_PER_TICK = 1.0 / TICKS_PER_MILLISECOND
SECONDS_PER_TICK = 1.0 / TICKS_PER_SECOND

KEY_COUNT = 1024
KEY_ESCAPE = 256

DEFAULT_TARGET_ELAPSED_TIME = 166667
DEFAULT_MAX_ELAPSED_TIME = 500 * TICKS_PER_MILLISECOND

_LAG_THRESHOLD = 5

Hook = Callable[["Game"], None]


def get_ticks() -> int:
    """Wall-clock time in ticks of 100 nanoseconds, at microsecond resolution."""
    return (time.time_ns() // 1000) * 10


@dataclass
class Rect:
    """An integer rectangle: position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class GameHooks:
    """Callbacks a game dispatches its lifecycle steps to."""

    initialize: Optional[Hook] = None
    load_content: Optional[Hook] = None
    update: Optional[Hook] = None
    draw: Optional[Hook] = None


class Game:
    """Runs update and draw hooks on a fixed or variable timestep.

    The lifecycle steps initialize, load_content, update and draw are
    dispatched to the callbacks in ``hooks``; subclasses may override the
    methods instead. Time is measured in ticks of 100 nanoseconds; ``clock``
    supplies the current tick count and ``sleep`` waits for a number of
    seconds.
    """

    def __init__(
        self,
        title: str,
        width: int,
        height: int,
        *,
        hooks: Optional[GameHooks] = None,
        clock: Callable[[], int] = get_ticks,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.title = title
        self.width = width
        self.height = height
        self.hooks = hooks if hooks is not None else GameHooks()
        self.keys = [False] * KEY_COUNT
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_down = False
        self.frame_skip = 0
        self.is_running = False
        self.is_fixed_time_step = True
        self.is_running_slowly = False
        self.should_exit = False
        self.suppress_draw = False
        self.close_requested = False
        self.update_frame_lag = 0
        self.delta = 0.0
        self.max_elapsed_time = DEFAULT_MAX_ELAPSED_TIME
        self.target_elapsed_time = DEFAULT_TARGET_ELAPSED_TIME
        self.accumulated_elapsed_time = 0
        self.total_game_time = 0
        self.elapsed_game_time = 0
        self.previous_ticks = 0
        self._clock = clock
        self._sleep = sleep
        self.current_time = clock()

    def key_event(self, key: int, pressed: bool) -> None:
        """Record a key press or release; escape also asks the game to close."""
        if key == KEY_ESCAPE and pressed:
            self.close_requested = True
        if 0 <= key < KEY_COUNT:
            self.keys[key] = bool(pressed)

    def start(self) -> None:
        """Mark the game as running."""
        self.is_running = True

    def handle_events(self) -> None:
        """React to held keys: escape ends the game."""
        if self.keys[KEY_ESCAPE]:
            self.close_requested = True
            self.should_exit = True

    def _advance_clock(self) -> None:
        while True:
            current_ticks = self._clock() - self.current_time
            self.accumulated_elapsed_time += current_ticks - self.previous_ticks
            self.previous_ticks = current_ticks
            if (
                self.is_fixed_time_step
                and self.accumulated_elapsed_time < self.target_elapsed_time
            ):
                remaining = self.target_elapsed_time - self.accumulated_elapsed_time
                sleep_ms = int(remaining * MILLISECONDS_PER_TICK)
                if sleep_ms < 1:
                    break
                self._sleep(sleep_ms / 1000)
            else:
                break

    def tick(self) -> None:
        """Advance the clock, run due updates, then draw once."""
        self._advance_clock()

        if self.accumulated_elapsed_time > self.max_elapsed_time:
            self.accumulated_elapsed_time = self.max_elapsed_time

        if self.is_fixed_time_step:
            self.elapsed_game_time = self.target_elapsed_time
            step_count = 0
            while (
                self.accumulated_elapsed_time >= self.target_elapsed_time
                and not self.should_exit
            ):
                self.total_game_time += self.target_elapsed_time
                self.accumulated_elapsed_time -= self.target_elapsed_time
                step_count += 1
                self.delta = self.elapsed_game_time * SECONDS_PER_TICK
                self.update()

            self.update_frame_lag += max(0, step_count - 1)
            if self.is_running_slowly:
                if self.update_frame_lag == 0:
                    self.is_running_slowly = False
            elif self.update_frame_lag >= _LAG_THRESHOLD:
                self.is_running_slowly = True
            if step_count == 1 and self.update_frame_lag > 0:
                self.update_frame_lag -= 1

            self.elapsed_game_time = self.target_elapsed_time * step_count
        else:
            self.elapsed_game_time = self.accumulated_elapsed_time
            self.total_game_time += self.accumulated_elapsed_time
            self.accumulated_elapsed_time = 0
            self.delta = self.elapsed_game_time * SECONDS_PER_TICK
            self.update()

        if self.suppress_draw:
            self.suppress_draw = False
        else:
            self.draw()

        if self.should_exit or self.close_requested:
            self.is_running = False

    def run_loop(self) -> None:
        """One pass of the main loop: events, then a tick."""
        self.handle_events()
        self.tick()

    def run(self) -> None:
        """Initialize, load content and loop until the game stops."""
        self.initialize()
        self.load_content()
        self.start()
        while self.is_running:
            self.run_loop()

    @staticmethod
    def _dispatch(hook: Optional[Hook], game: Game) -> None:
        if hook is not None:
            hook(game)

    def initialize(self) -> None:
        """Run the initialize callback, once before content is loaded."""
        self._dispatch(self.hooks.initialize, self)

    def load_content(self) -> None:
        """Run the load_content callback, once before the loop starts."""
        self._dispatch(self.hooks.load_content, self)

    def update(self) -> None:
        """Run the update callback for one timestep."""
        self._dispatch(self.hooks.update, self)

    def draw(self) -> None:
        """Run the draw callback, once per tick unless drawing was suppressed."""
        self._dispatch(self.hooks.draw, self)

    def __str__(self) -> str:
        return self.title