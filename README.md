# pomodoro-timer

This is a small desktop Pomodoro timer built on Tkinter. It counts down a work
session and then starts a break. After every fourth finished Pomodoro the break
is a long one. All other breaks are short.

## Installation

```
pip install .
```

Tkinter ships with most Python installations. No other packages are needed.
To run the tests, install the `test` extra:

```
pip install .[test]
pytest
```

## Usage

```
pomodoro-timer
```

You can also start the window with `python -m pomodoro_timer.gui`.

### Command-line options

| Option                | Meaning                                   | Default                  |
|-----------------------|-------------------------------------------|--------------------------|
| `--pomodoro mm:ss`    | length of a Pomodoro                      | `25:00`                  |
| `--short-break mm:ss` | length of a short break                   | `05:00`                  |
| `--long-break mm:ss`  | length of a long break                    | `15:00`                  |
| `--style-dir DIR`     | directory that holds the `.qss` files     | the program's directory  |

A duration has one or two digits for the minutes and two digits for the
seconds. Minutes and seconds must each be below 60, so the longest duration is
`59:59`.

### The window

The timer page has these controls:

- **START** starts a new cycle with a Pomodoro and sets the count of finished
  Pomodoros back to zero.
- **PAUSE / RESUME** stops the countdown and starts it again. It is disabled
  until the timer has been started.
- **RESET** stops the timer and shows the Pomodoro length again.
- **CONFIG** opens the settings page.

On the settings page you enter the three lengths as `mm:ss`. **GO BACK** applies
them and returns to the timer page. An invalid entry opens an error dialog and
keeps you on the settings page. If the countdown is not running, it restarts
from the new length of the current mode.

When a session reaches zero, the next one starts by itself and the window bell
rings. A progress bar shows how much of the current session has passed.

If `resources/images/background.png` exists under the working directory, it is
shown in the top-right corner of the timer page. It is scaled down to fit within
300 pixels.

## Stylesheets

`styles.qss` is read from the style directory at startup. When a mode begins,
its own file is read:

- `pomodoro.qss`
- `shortbreak.qss`
- `longbreak.qss`

Only the first `background-color` and the first `color` declaration in a file
are used. They set the background and text colours of the window. If a file is
missing or cannot be read, a warning is logged and the file is skipped.

## Using the timer logic in code

The countdown logic in `pomodoro_timer.session` works without the window:

```python
from pomodoro_timer.session import Durations, PomodoroSession, TimerMode, format_clock

session = PomodoroSession(Durations())
session.start()
session.tick()
print(format_clock(session.remaining_seconds))  # 24:59
print(session.mode is TimerMode.POMODORO)        # True
```

- `Durations(pomodoro, short_break, long_break)` holds the three lengths in
  seconds. Each length must be between 0 and 3599, or `ValueError` is raised.
  `seconds_for(mode)` returns the length for a `TimerMode`.
- `PomodoroSession` has these methods:
  - `start()`
  - `toggle_pause()`, which raises `RuntimeError` before the timer has started
  - `reset()`
  - `apply_settings(durations)`
  - `tick()`

  `tick()` moves the countdown on by one second. It raises `RuntimeError` if the
  timer is not running. It returns `True` when a session ended and the next one
  began. The session also exposes the state the window shows: `display`,
  `progress`, `status`, `pause_label`, `start_enabled` and `pause_enabled`.
- `format_clock(seconds)` renders seconds as `mm:ss`.

`pomodoro_timer.styles` has two functions:

- `stylesheet_name(mode)` gives the file name for a mode.
- `load_stylesheet(directory, name)` reads a stylesheet and raises `OSError` if
  it cannot.

## Limitations

- The timer does not save settings. Lengths changed on the settings page last
  only until the window closes.
- Stylesheets are not fully interpreted. Only the two colour properties
  described above have any effect.
- The only alert at the end of a session is the window bell. The timer plays
  no other sound.