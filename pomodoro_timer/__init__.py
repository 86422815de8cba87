"""Pomodoro timer: a countdown session model, per-mode stylesheets and a Tkinter window."""

__version__ = "0.1.0"
__all__ = ["__version__"]