"""Pomodoro timer state: modes, durations and the countdown cycle."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields

POMODOROS_PER_LONG_BREAK = 4
MAX_DURATION = 59 * 60 + 59

PAUSE_LABEL = "PAUSE"
RESUME_LABEL = "RESUME"


class TimerMode(enum.Enum):
    """The kind of session the timer is counting down."""

    POMODORO = "pomodoro"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


STATUS_TEXT = {
    TimerMode.POMODORO: "Pomodoro Time!",
    TimerMode.SHORT_BREAK: "Short Break!",
    TimerMode.LONG_BREAK: "Long Break!",
}


@dataclass(frozen=True)
class Durations:
    """Length of each session kind, in seconds (at most 59:59)."""

    pomodoro: int = 25 * 60
    short_break: int = 5 * 60
    long_break: int = 15 * 60

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value <= MAX_DURATION:
                raise ValueError(
                    f"{field.name} must be between 0 and {MAX_DURATION} seconds, got {value}"
                )

    def seconds_for(self, mode: TimerMode) -> int:
        """Return the configured length of a session of the given mode."""
        return {
            TimerMode.POMODORO: self.pomodoro,
            TimerMode.SHORT_BREAK: self.short_break,
            TimerMode.LONG_BREAK: self.long_break,
        }[mode]


def format_clock(seconds: int) -> str:
    """Render a number of seconds as zero-padded ``mm:ss``."""
    if seconds < 0:
        raise ValueError(f"seconds must not be negative, got {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class PomodoroSession:
    """The timer's state machine, driven by button presses and one-second ticks."""

    def __init__(self, durations: Durations | None = None) -> None:
        self.durations = durations if durations is not None else Durations()
        self.mode = TimerMode.POMODORO
        self.pomodoro_count = 0
        self.is_paused = False
        self.is_running = False
        self.total_seconds = self.durations.pomodoro
        self.remaining_seconds = self.durations.pomodoro
        self.display = format_clock(self.durations.pomodoro)
        self.progress = 0
        self.status = ""
        self.start_enabled = True
        self.pause_enabled = False
        self.pause_label = PAUSE_LABEL
        self._session_ended = False

    def start(self) -> None:
        """Restart the cycle from a fresh pomodoro."""
        self.mode = TimerMode.POMODORO
        self.pomodoro_count = 0
        self._session_ended = False
        self._begin_next_session()

    def toggle_pause(self) -> None:
        """Pause a running countdown, or resume a paused one."""
        if not self.pause_enabled:
            raise RuntimeError("the timer has not been started")
        if self.is_paused:
            self.is_running = True
            self.pause_label = PAUSE_LABEL
            self.is_paused = False
        else:
            self.is_running = False
            self.pause_label = RESUME_LABEL
            self.is_paused = True

    def reset(self) -> None:
        """Stop the countdown and restore the pomodoro length."""
        self.is_running = False
        seconds = self.durations.pomodoro
        self.remaining_seconds = self.total_seconds = seconds
        self.display = format_clock(seconds)
        self.progress = 0
        self.start_enabled = True
        self.pause_enabled = False
        self.pause_label = PAUSE_LABEL
        self.is_paused = False

    def apply_settings(self, durations: Durations) -> None:
        """Take new durations; an inactive countdown restarts from the new length."""
        self.durations = durations
        seconds = durations.seconds_for(self.mode)
        self.display = format_clock(seconds)
        if not self.is_running:
            self.total_seconds = self.remaining_seconds = seconds
            self.progress = 0

    def tick(self) -> bool:
        """Advance one second; return True when a session ended and the next began."""
        if not self.is_running:
            raise RuntimeError("the timer is not running")
        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1
            self.display = format_clock(self.remaining_seconds)
            elapsed = self.total_seconds - self.remaining_seconds
            self.progress = 100 * elapsed // self.total_seconds
            return False
        self.is_running = False
        self._session_ended = True
        self._begin_next_session()
        return True

    def _begin_next_session(self) -> None:
        self.is_running = False
        if self._session_ended:
            if self.mode is TimerMode.POMODORO:
                self.pomodoro_count += 1
                if self.pomodoro_count % POMODOROS_PER_LONG_BREAK == 0:
                    self.mode = TimerMode.LONG_BREAK
                else:
                    self.mode = TimerMode.SHORT_BREAK
            else:
                self.mode = TimerMode.POMODORO
            self._session_ended = False

        seconds = self.durations.seconds_for(self.mode)
        self.total_seconds = self.remaining_seconds = seconds
        self.display = format_clock(seconds)
        self.progress = 0
        self.start_enabled = False
        self.pause_enabled = True
        self.pause_label = PAUSE_LABEL
        self.is_paused = False
        self.is_running = True
        self.status = STATUS_TEXT[self.mode]