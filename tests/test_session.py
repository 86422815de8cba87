import pytest

from pomodoro_timer.session import (
    Durations,
    PomodoroSession,
    TimerMode,
    format_clock,
)


def finish_session(session, limit=10_000):
    for _ in range(limit):
        if session.tick():
            return
    raise AssertionError("session never ended")


def test_default_durations():
    durations = Durations()
    assert durations.seconds_for(TimerMode.POMODORO) == 25 * 60
    assert durations.seconds_for(TimerMode.SHORT_BREAK) == 5 * 60
    assert durations.seconds_for(TimerMode.LONG_BREAK) == 15 * 60


@pytest.mark.parametrize("field", ["pomodoro", "short_break", "long_break"])
@pytest.mark.parametrize("value", [-1, 60 * 60])
def test_durations_reject_out_of_range(field, value):
    with pytest.raises(ValueError):
        Durations(**{field: value})


def test_format_clock_pins():
    assert format_clock(0) == "00:00"
    assert format_clock(25 * 60) == "25:00"


def test_format_clock_round_trip():
    for seconds in range(0, 3600, 37):
        text = format_clock(seconds)
        minutes, secs = text.split(":")
        assert len(text) == 5
        assert int(minutes) * 60 + int(secs) == seconds


def test_format_clock_rejects_negative():
    with pytest.raises(ValueError):
        format_clock(-1)


def test_initial_state():
    durations = Durations()
    session = PomodoroSession(durations)
    assert session.mode is TimerMode.POMODORO
    assert session.is_running is False
    assert session.display == format_clock(durations.pomodoro)
    assert session.progress == 0
    assert session.start_enabled is True
    assert session.pause_enabled is False


def test_start_begins_pomodoro():
    durations = Durations(pomodoro=3, short_break=1, long_break=2)
    session = PomodoroSession(durations)
    session.start()
    assert session.is_running is True
    assert session.status == "Pomodoro Time!"
    assert session.remaining_seconds == durations.pomodoro
    assert session.pause_label == "PAUSE"
    assert session.start_enabled is False
    assert session.pause_enabled is True


def test_tick_counts_down_and_updates_display():
    session = PomodoroSession(Durations(pomodoro=5, short_break=1, long_break=2))
    session.start()
    previous = session.remaining_seconds
    while session.remaining_seconds > 0:
        assert session.tick() is False
        assert session.remaining_seconds == previous - 1
        assert session.display == format_clock(session.remaining_seconds)
        previous = session.remaining_seconds


def test_progress_is_monotonic_and_reaches_full():
    session = PomodoroSession(Durations(pomodoro=7, short_break=1, long_break=2))
    session.start()
    seen = [session.progress]
    while session.remaining_seconds > 0:
        session.tick()
        seen.append(session.progress)
    assert seen[0] == 0
    assert seen == sorted(seen)
    assert seen[-1] == 100


def test_modes_cycle_with_long_break_every_fourth_pomodoro():
    durations = Durations(pomodoro=2, short_break=1, long_break=3)
    session = PomodoroSession(durations)
    session.start()
    modes = []
    for _ in range(9):
        finish_session(session)
        modes.append(session.mode)
        assert session.status == {
            TimerMode.POMODORO: "Pomodoro Time!",
            TimerMode.SHORT_BREAK: "Short Break!",
            TimerMode.LONG_BREAK: "Long Break!",
        }[session.mode]
        assert session.remaining_seconds == durations.seconds_for(session.mode)
        assert session.is_running is True
    P, S, L = TimerMode.POMODORO, TimerMode.SHORT_BREAK, TimerMode.LONG_BREAK
    assert modes == [S, P, S, P, S, P, L, P, S]
    assert session.pomodoro_count == 5


def test_zero_length_session_ends_on_first_tick():
    session = PomodoroSession(Durations(pomodoro=0, short_break=1, long_break=1))
    session.start()
    assert session.tick() is True
    assert session.mode is TimerMode.SHORT_BREAK


def test_toggle_pause_and_resume():
    session = PomodoroSession(Durations(pomodoro=10, short_break=1, long_break=2))
    session.start()
    session.tick()
    remaining = session.remaining_seconds
    session.toggle_pause()
    assert session.is_paused is True
    assert session.is_running is False
    assert session.pause_label == "RESUME"
    with pytest.raises(RuntimeError):
        session.tick()
    session.toggle_pause()
    assert session.is_paused is False
    assert session.is_running is True
    assert session.pause_label == "PAUSE"
    assert session.remaining_seconds == remaining


def test_toggle_pause_before_start_raises():
    with pytest.raises(RuntimeError):
        PomodoroSession().toggle_pause()


def test_tick_before_start_raises():
    with pytest.raises(RuntimeError):
        PomodoroSession().tick()


def test_reset_restores_pomodoro_length_in_any_mode():
    durations = Durations(pomodoro=4, short_break=2, long_break=3)
    session = PomodoroSession(durations)
    session.start()
    finish_session(session)
    assert session.mode is TimerMode.SHORT_BREAK
    session.tick()
    session.reset()
    assert session.mode is TimerMode.SHORT_BREAK
    assert session.remaining_seconds == durations.pomodoro
    assert session.total_seconds == durations.pomodoro
    assert session.display == format_clock(durations.pomodoro)
    assert session.progress == 0
    assert session.is_running is False
    assert session.start_enabled is True
    assert session.pause_enabled is False
    assert session.pause_label == "PAUSE"


def test_apply_settings_while_stopped_updates_countdown():
    session = PomodoroSession()
    new = Durations(pomodoro=90, short_break=30, long_break=60)
    session.apply_settings(new)
    assert session.remaining_seconds == new.pomodoro
    assert session.total_seconds == new.pomodoro
    assert session.display == format_clock(new.pomodoro)


def test_apply_settings_while_running_keeps_countdown():
    session = PomodoroSession(Durations(pomodoro=10, short_break=1, long_break=2))
    session.start()
    session.tick()
    remaining = session.remaining_seconds
    new = Durations(pomodoro=40, short_break=1, long_break=2)
    session.apply_settings(new)
    assert session.remaining_seconds == remaining
    assert session.display == format_clock(new.pomodoro)
    assert session.durations == new


def test_apply_settings_while_paused_restarts_countdown():
    session = PomodoroSession(Durations(pomodoro=10, short_break=1, long_break=2))
    session.start()
    session.tick()
    session.toggle_pause()
    new = Durations(pomodoro=40, short_break=1, long_break=2)
    session.apply_settings(new)
    assert session.remaining_seconds == new.pomodoro
    assert session.progress == 0


def test_start_restarts_cycle():
    session = PomodoroSession(Durations(pomodoro=1, short_break=1, long_break=1))
    session.start()
    finish_session(session)
    finish_session(session)
    finish_session(session)
    assert session.pomodoro_count == 2
    session.start()
    assert session.mode is TimerMode.POMODORO
    assert session.pomodoro_count == 0