import pytest

from heartfield.pointer import HoldState


def test_move_stages_position_and_spiral_window(tracker):
    tracker.move(12, 34, now=3.0)
    p = tracker.pointer
    assert (p.x, p.y) == (12.0, 34.0)
    assert p.active and p.has_position
    assert p.last_move_at == 3.0
    assert p.spiral_until == pytest.approx(4.0)


def test_leave_deactivates_but_keeps_position(tracker):
    tracker.move(5, 6, now=0.0)
    tracker.leave()
    assert not tracker.pointer.active
    assert (tracker.pointer.x, tracker.pointer.y) == (5.0, 6.0)


def test_release_requests_one_burst(tracker):
    tracker.down(now=1.0)
    assert tracker.hold.holding
    assert tracker.hold.hold_start == 1.0
    tracker.up(now=2.0)
    assert not tracker.hold.holding
    assert tracker.pointer.consume_burst() is True
    assert tracker.pointer.consume_burst() is False


def test_up_without_down_does_nothing(tracker):
    tracker.up()
    assert tracker.pointer.burst_requested is False


def test_tap_is_a_click(tracker):
    tracker.tap(40, 50, now=0.5)
    assert tracker.pointer.burst_requested
    assert not tracker.hold.holding
    assert tracker.pointer.x == 40.0


def test_hug_eases_toward_target():
    hold = HoldState()
    hold.holding = True
    values = [hold.ease(1 / 60) for _ in range(120)]
    assert all(b > a for a, b in zip(values, values[1:]))
    assert values[-1] == pytest.approx(1 - 0.001**2)

    hold.holding = False
    values = [hold.ease(1 / 60) for _ in range(120)]
    assert all(b < a for a, b in zip(values, values[1:]))
    assert values[-1] < 0.01


def test_hug_ease_is_frame_rate_independent():
    fine = HoldState()
    coarse = HoldState()
    fine.holding = coarse.holding = True
    for _ in range(60):
        fine.ease(1 / 60)
    for _ in range(20):
        coarse.ease(1 / 20)
    assert fine.intensity == pytest.approx(coarse.intensity)


def test_zero_dt_leaves_hug_unchanged():
    hold = HoldState()
    hold.holding = True
    assert hold.ease(0.0) == 0.0
