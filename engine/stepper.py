"""
stepper.py — Frame Playback Engine
===================================
The Stepper is the only object the UI interacts with during playback.
It holds one recorded frame sequence and exposes a play/pause/next/prev/
seek/speed API over it.

State machine:
    IDLE  →  load()   →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last frame reached) → FINISHED
    FINISHED → play()  →  PLAYING from frame 0
    any     →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe and owns no timer.  The caller drives
  tick() from its own loop (or one request at a time in the web app).
"""

import time
from enum import Enum
from typing import Callable, List, Optional

from animation.frame import Frame
from config import CONFIG


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


def clamp_speed(multiplier: float) -> float:
    return max(CONFIG.SPEED_MIN, min(CONFIG.SPEED_MAX, multiplier))


def frame_interval(multiplier: float) -> float:
    """Seconds between auto-advance ticks at the given speed."""
    return CONFIG.BASE_INTERVAL_MS / clamp_speed(multiplier) / 1000.0


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        frames      : The loaded frame sequence.
        current_idx : Index into `frames` that is currently displayed.
        speed       : Playback multiplier (0.25x … 2x).
        on_frame    : Optional callback(Frame) fired every time the current
                      frame changes.  The UI hooks its re-render here.
    """

    def __init__(self, on_frame: Optional[Callable[[Frame], None]] = None):
        self.frames:      List[Frame]  = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = CONFIG.DEFAULT_SPEED
        self.on_frame:    Optional[Callable[[Frame], None]] = on_frame

        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, frames: List[Frame], autoplay: bool = False) -> None:
        """Attach a fresh frame sequence and show frame 0."""
        self.frames      = list(frames)
        self.current_idx = -1
        self.state       = StepperState.PAUSED
        if self.frames:
            self._goto(0)
        if autoplay:
            self.play()

    def reset(self) -> None:
        """Back to IDLE; caller must load() again."""
        self.frames      = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    def resume_at(self, idx: int, playing: bool = False) -> None:
        """Restore a saved position (e.g. from the web session)."""
        if not self.frames:
            return
        idx = max(0, min(idx, len(self.frames) - 1))
        self._goto(idx)
        last = idx == len(self.frames) - 1
        if playing and not last:
            self.state = StepperState.PLAYING
            self._last_tick = time.monotonic()
        else:
            self.state = StepperState.FINISHED if last and playing else StepperState.PAUSED

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one frame.  Returns False if already at the end."""
        if self.current_idx >= len(self.frames) - 1:
            if self.frames:
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.current_idx == len(self.frames) - 1 and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one frame.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary frame index."""
        if not (0 <= idx < len(self.frames)):
            return False
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        self._goto(idx)
        return True

    def rewind(self) -> None:
        """Jump back to frame 0 and pause."""
        if not self.frames:
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def jump_to_end(self) -> None:
        if not self.frames:
            return
        self._goto(len(self.frames) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if not self.frames:
            return
        # restart when played from the end
        if self.state == StepperState.FINISHED or self.current_idx >= len(self.frames) - 1:
            self._goto(0)
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  If playing and a full frame interval has elapsed,
        advances one frame.  Returns True if a frame was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < frame_interval(self.speed):
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, multiplier: float) -> None:
        self.speed = clamp_speed(multiplier)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_frame(self) -> Optional[Frame]:
        if 0 <= self.current_idx < len(self.frames):
            return self.frames[self.current_idx]
        return None

    @property
    def total_frames(self) -> int:
        return len(self.frames)

    @property
    def progress(self) -> float:
        """0.0 … 1.0 through the sequence."""
        if len(self.frames) <= 1:
            return 1.0 if self.frames else 0.0
        return self.current_idx / (len(self.frames) - 1)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_frame:
            self.on_frame(self.frames[idx])
