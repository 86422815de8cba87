"""Tkinter front end for the pomodoro timer."""

from __future__ import annotations

import argparse
import logging
import re
import sys
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk

from pomodoro_timer.session import Durations, PomodoroSession, format_clock
from pomodoro_timer.styles import APP_STYLESHEET, load_stylesheet, stylesheet_name

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 450
BACKGROUND_IMAGE = Path("resources/images/background.png")
BACKGROUND_MAX_SIZE = 300
TICK_MS = 1000

_DURATION_RE = re.compile(r"(\d{1,2}):(\d{2})")
_COLOR_RE = re.compile(r"(?<![\w-])(background-color|color)\s*:\s*([^;}\s]+)")


def parse_duration(text: str) -> int:
    """Parse an ``mm:ss`` duration into seconds."""
    match = _DURATION_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"expected a duration as mm:ss, got {text!r}")
    minutes, seconds = int(match.group(1)), int(match.group(2))
    if minutes > 59 or seconds > 59:
        raise ValueError(f"minutes and seconds must each be below 60, got {text!r}")
    return minutes * 60 + seconds


def _application_dir() -> Path:
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    return Path(script).resolve().parent if script else Path.cwd()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line into durations (seconds) and a stylesheet directory."""
    defaults = Durations()
    parser = argparse.ArgumentParser(description="A pomodoro timer.")
    parser.add_argument(
        "--pomodoro", type=parse_duration, default=defaults.pomodoro,
        help="pomodoro length as mm:ss (default 25:00)",
    )
    parser.add_argument(
        "--short-break", type=parse_duration, default=defaults.short_break,
        help="short break length as mm:ss (default 05:00)",
    )
    parser.add_argument(
        "--long-break", type=parse_duration, default=defaults.long_break,
        help="long break length as mm:ss (default 15:00)",
    )
    parser.add_argument(
        "--style-dir", type=Path, default=None,
        help="directory holding the .qss stylesheets (default: the program's directory)",
    )
    args = parser.parse_args(argv)
    if args.style_dir is None:
        args.style_dir = _application_dir()
    return args


def _extract_colors(text: str) -> dict[str, str]:
    colors: dict[str, str] = {}
    for prop, value in _COLOR_RE.findall(text):
        colors.setdefault(prop, value)
    return colors


class PomodoroApp:
    """Main window: a timer page and a settings page over one session."""

    def __init__(self, root: tk.Misc, session: PomodoroSession, style_dir: str | Path) -> None:
        self.root = root
        self.session = session
        self.style_dir = Path(style_dir)
        self._job: str | None = None
        self._background: tk.PhotoImage | None = None

        root.title("Pomodoro")
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.resizable(False, False)

        self._timer_page = tk.Frame(root)
        self._config_page = tk.Frame(root)
        for page in (self._timer_page, self._config_page):
            page.place(relx=0, rely=0, relwidth=1, relheight=1)

        self._build_timer_page()
        self._build_config_page()
        self._load_background()

        self._apply_stylesheet(APP_STYLESHEET)
        self._show(self._timer_page)
        self._refresh()

    def _build_timer_page(self) -> None:
        page = self._timer_page
        self._status = tk.Label(page, font=("TkDefaultFont", 16))
        self._status.pack(pady=(40, 10))
        self._clock = tk.Label(page, font=("TkDefaultFont", 48, "bold"))
        self._clock.pack(pady=10)
        self._progress_value = tk.IntVar(value=0)
        self._progress = ttk.Progressbar(
            page, maximum=100, length=400, variable=self._progress_value
        )
        self._progress.pack(pady=10)

        self._buttons = tk.Frame(page)
        self._buttons.pack(pady=20)
        self._start_button = tk.Button(self._buttons, text="START", command=self._on_start)
        self._pause_button = tk.Button(self._buttons, text="PAUSE", command=self._on_pause)
        self._reset_button = tk.Button(self._buttons, text="RESET", command=self._on_reset)
        self._config_button = tk.Button(self._buttons, text="CONFIG", command=self._on_config)
        for button in (
            self._start_button, self._pause_button, self._reset_button, self._config_button
        ):
            button.pack(side=tk.LEFT, padx=5)

    def _build_config_page(self) -> None:
        page = self._config_page
        durations = self.session.durations
        self._entries: dict[str, tk.StringVar] = {}
        rows = (
            ("pomodoro", "Pomodoro", durations.pomodoro),
            ("short_break", "Short break", durations.short_break),
            ("long_break", "Long break", durations.long_break),
        )
        form = tk.Frame(page)
        form.pack(pady=60)
        for row, (key, title, seconds) in enumerate(rows):
            tk.Label(form, text=f"{title} (mm:ss)").grid(row=row, column=0, sticky="w", pady=5)
            var = tk.StringVar(value=format_clock(seconds))
            tk.Entry(form, textvariable=var, width=8).grid(row=row, column=1, padx=10)
            self._entries[key] = var
        tk.Button(page, text="GO BACK", command=self._on_go_back).pack(pady=10)

    def _load_background(self) -> None:
        try:
            image = tk.PhotoImage(master=self.root, file=str(BACKGROUND_IMAGE))
        except tk.TclError:
            return
        factor = -(-max(image.width(), image.height()) // BACKGROUND_MAX_SIZE)
        if factor > 1:
            image = image.subsample(factor)
        self._background = image
        label = tk.Label(self._timer_page, image=image, borderwidth=0)
        label.place(relx=1.0, y=50, anchor="ne")

    def _show(self, page: tk.Frame) -> None:
        page.tkraise()

    def _apply_stylesheet(self, name: str) -> None:
        try:
            text = load_stylesheet(self.style_dir, name)
        except OSError:
            logger.warning("could not open stylesheet %s", self.style_dir / name)
            return
        logger.debug("stylesheet loaded from %s", self.style_dir / name)
        colors = _extract_colors(text)
        widgets = [
            self.root, self._timer_page, self._config_page, self._buttons,
            self._status, self._clock,
        ]
        options = {}
        if "background-color" in colors:
            options["bg"] = colors["background-color"]
        if "color" in colors:
            options["fg"] = colors["color"]
        for widget in widgets:
            for option, value in options.items():
                try:
                    widget.configure(**{option: value})
                except tk.TclError:
                    pass

    def _apply_mode_style(self) -> None:
        self._apply_stylesheet(stylesheet_name(self.session.mode))

    def _refresh(self) -> None:
        session = self.session
        self._clock.configure(text=session.display)
        self._status.configure(text=session.status)
        self._progress_value.set(session.progress)
        self._start_button.configure(state=tk.NORMAL if session.start_enabled else tk.DISABLED)
        self._pause_button.configure(
            text=session.pause_label,
            state=tk.NORMAL if session.pause_enabled else tk.DISABLED,
        )

    def _schedule(self) -> None:
        if self._job is not None:
            self.root.after_cancel(self._job)
            self._job = None
        if self.session.is_running:
            self._job = self.root.after(TICK_MS, self._on_tick)

    def _on_tick(self) -> None:
        self._job = None
        if not self.session.is_running:
            return
        if self.session.tick():
            self._apply_mode_style()
            self.root.bell()
        self._refresh()
        self._schedule()

    def _on_start(self) -> None:
        self.session.start()
        self._apply_mode_style()
        self._refresh()
        self._schedule()

    def _on_pause(self) -> None:
        self.session.toggle_pause()
        self._refresh()
        self._schedule()

    def _on_reset(self) -> None:
        self.session.reset()
        self._refresh()
        self._schedule()

    def _on_config(self) -> None:
        self._show(self._config_page)

    def _on_go_back(self) -> None:
        try:
            durations = Durations(
                **{key: parse_duration(var.get()) for key, var in self._entries.items()}
            )
        except ValueError as exc:
            messagebox.showerror("Invalid duration", str(exc), parent=self.root)
            return
        self.session.apply_settings(durations)
        self._refresh()
        self._show(self._timer_page)


def main(argv: list[str] | None = None) -> int:
    """Start the timer window."""
    logging.basicConfig(level=logging.WARNING)
    args = parse_args(argv)
    durations = Durations(
        pomodoro=args.pomodoro, short_break=args.short_break, long_break=args.long_break
    )
    root = tk.Tk()
    PomodoroApp(root, PomodoroSession(durations), args.style_dir)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())