"""CaptureState transition tests."""

from __future__ import annotations

import pytest

from rotoscope.recording.state import CapturePhase, CaptureState


def test_initial_state_is_idle():
    st = CaptureState()
    assert st.phase is CapturePhase.IDLE
    assert not st.tracing
    assert st.remaining is None


def test_start_and_stop():
    st = CaptureState()
    st.start()
    assert st.tracing
    assert st.remaining is None
    st.stop()
    assert not st.tracing
    st.stop()
    assert not st.tracing


def test_restart_while_tracing_resets_limit():
    st = CaptureState()
    st.start(5)
    st.frame_captured()
    assert st.remaining == 4
    st.start(2)
    assert st.tracing
    assert st.remaining == 2


def test_limit_counts_down_and_auto_stops():
    st = CaptureState()
    st.start(3)
    assert st.frame_captured() is False
    assert st.remaining == 2
    assert st.frame_captured() is False
    assert st.frame_captured() is True
    assert not st.tracing
    assert st.remaining is None


def test_unbounded_never_auto_stops():
    st = CaptureState()
    st.start()
    for _ in range(100):
        assert st.frame_captured() is False
    assert st.tracing


def test_reset_forces_idle():
    st = CaptureState()
    st.start(4)
    st.reset()
    assert not st.tracing
    assert st.remaining is None


@pytest.mark.parametrize("bad", [0, -1, 1.5, True])
def test_invalid_limit_rejected(bad):
    st = CaptureState()
    with pytest.raises(ValueError):
        st.start(bad)
    assert not st.tracing
