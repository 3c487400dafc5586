"""Frame pacing and keyboard state for the simulator's main loop."""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional, Union

DEFAULT_FRAMES_PER_SECOND = 30.0


class Key(enum.Enum):
    """Keys the simulator responds to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    SPACE = " "


def _as_key(key: Union[Key, str]) -> Optional[Key]:
    if isinstance(key, Key):
        return key
    try:
        return Key(key)
    except ValueError:
        return None


class Interface:
    """Tracks which keys are held and when the next frame is due.

    Arrow keys report how many frames they have been held (0 when
    released); space is a one-frame flag that clears after every frame.
    """

    def __init__(
        self,
        frames_per_second: float = DEFAULT_FRAMES_PER_SECOND,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._time_period = 0.0
        self.set_frames_per_second(frames_per_second)
        self._next_tick = 0.0
        self._down = 0
        self._up = 0
        self._left = 0
        self._right = 0
        self._space = False

    def key_event(self, key: Union[Key, str], down: bool) -> None:
        """Record a key being pressed or released; unknown keys are ignored."""
        resolved = _as_key(key)
        pressed = 1 if down else 0
        if resolved is Key.DOWN:
            self._down = pressed
        elif resolved is Key.UP:
            self._up = pressed
        elif resolved is Key.RIGHT:
            self._right = pressed
        elif resolved is Key.LEFT:
            self._left = pressed
        elif resolved in (Key.HOME, Key.SPACE):
            self._space = bool(down)

    def end_frame(self) -> None:
        """Count one more frame for every held arrow key and clear space."""
        if self._down:
            self._down += 1
        if self._up:
            self._up += 1
        if self._left:
            self._left += 1
        if self._right:
            self._right += 1
        self._space = False

    def is_time_to_draw(self) -> bool:
        """True once the clock has reached the next scheduled frame."""
        return self._clock() >= self._next_tick

    def set_next_draw_time(self) -> None:
        """Schedule the next frame one period from now."""
        self._next_tick = self._clock() + self._time_period

    @property
    def next_tick(self) -> float:
        """Clock time at which the next frame is due."""
        return self._next_tick

    def set_frames_per_second(self, value: float) -> None:
        """Set the frame rate; it must be positive."""
        if value <= 0:
            raise ValueError(f"frames per second must be positive, got {value}")
        self._time_period = 1.0 / value

    def frame_rate(self) -> float:
        """Seconds between frames."""
        return self._time_period

    def is_down(self) -> int:
        """Frames the down arrow has been held, or 0."""
        return self._down

    def is_up(self) -> int:
        """Frames the up arrow has been held, or 0."""
        return self._up

    def is_left(self) -> int:
        """Frames the left arrow has been held, or 0."""
        return self._left

    def is_right(self) -> int:
        """Frames the right arrow has been held, or 0."""
        return self._right

    def is_space(self) -> bool:
        """Whether space (or home) was pressed this frame."""
        return self._space

    def run(
        self,
        callback: Callable[[Interface], None],
        frames: Optional[int] = None,
    ) -> None:
        """Call callback once per frame, pacing frames to the frame rate.

        Runs forever when frames is None.
        """
        count = 0
        while frames is None or count < frames:
            callback(self)
            if not self.is_time_to_draw():
                wait = self._next_tick - self._clock()
                if wait > 0:
                    time.sleep(wait)
            self.set_next_draw_time()
            self.end_frame()
            count += 1