import pytest

from icon_browser.animation import AnimationState, CopyKind, InvalidConfiguration, is_done, start, tick


def _ticks(state, n):
    for _ in range(n):
        state = tick(state)
    return state


def test_start_is_fresh():
    s = start(CopyKind.NAME, 5)
    assert s.copy_kind is CopyKind.NAME
    assert s.total_steps == 5
    assert s.progress == 0.0
    assert not is_done(s)


def test_five_steps_finish_on_fifth_tick():
    s = start(CopyKind.HEX_CODEPOINT, 5)
    assert not is_done(_ticks(s, 4))
    done = _ticks(s, 5)
    assert done.progress == 1.0
    assert is_done(done)


@pytest.mark.parametrize("steps", [1, 3, 7, 10, 100, 333])
def test_finishes_exactly_after_total_steps(steps):
    s = start(CopyKind.CODEPOINT, steps)
    assert not is_done(_ticks(s, steps - 1))
    assert _ticks(s, steps).progress == 1.0


def test_progress_is_monotonic_and_saturates():
    s = start(CopyKind.NAME, 4)
    seen = [s.progress]
    for _ in range(8):
        s = tick(s)
        seen.append(s.progress)
    assert seen == sorted(seen)
    assert seen[-1] == 1.0
    assert max(seen) == 1.0


def test_tick_is_pure():
    s = start(CopyKind.NAME, 2)
    nxt = tick(s)
    assert s.progress == 0.0
    assert nxt.progress == 0.5
    assert nxt.copy_kind is s.copy_kind


@pytest.mark.parametrize("steps", [0, -1])
def test_zero_steps_is_invalid(steps):
    with pytest.raises(InvalidConfiguration):
        start(CopyKind.NAME, steps)


def test_restart_replaces_previous_state():
    first = tick(start(CopyKind.NAME, 10))
    second = start(CopyKind.CODEPOINT, 10)
    assert isinstance(second, AnimationState)
    assert second.copy_kind is CopyKind.CODEPOINT
    assert second.progress == 0.0
    assert first.progress > second.progress
