"""Names and loading of the per-mode stylesheets."""

from __future__ import annotations

from pathlib import Path

from pomodoro_timer.session import TimerMode

APP_STYLESHEET = "styles.qss"

_MODE_STYLESHEETS = {
    TimerMode.POMODORO: "pomodoro.qss",
    TimerMode.SHORT_BREAK: "shortbreak.qss",
    TimerMode.LONG_BREAK: "longbreak.qss",
}


def stylesheet_name(mode: TimerMode) -> str:
    """Return the stylesheet file name used while in the given mode."""
    return _MODE_STYLESHEETS[mode]


def load_stylesheet(directory: str | Path, name: str) -> str:
    """Read the stylesheet ``name`` from ``directory``; raises OSError if unreadable."""
    return (Path(directory) / name).read_text(encoding="utf-8")