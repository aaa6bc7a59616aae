from heartfield.gestures import DOWN, LEAVE, MOVE, TAP, UP, GestureEvent, GestureScript, default_tour


def test_plays_due_events_in_order(tracker):
    script = GestureScript(
        [
            GestureEvent(2.0, UP),
            GestureEvent(0.5, MOVE, 0.5, 0.25),
            GestureEvent(1.0, DOWN),
        ]
    )
    assert script.play(tracker, 0.4, 200, 100) == 0
    assert script.play(tracker, 1.0, 200, 100) == 2
    assert (tracker.pointer.x, tracker.pointer.y) == (100.0, 25.0)
    assert tracker.pointer.spiral_until == 1.5
    assert tracker.hold.holding
    assert tracker.hold.hold_start == 1.0

    assert script.play(tracker, 5.0, 200, 100) == 1
    assert tracker.pointer.burst_requested
    assert script.finished


def test_tap_and_leave(tracker):
    script = GestureScript([GestureEvent(0.0, TAP, 0.1, 0.2), GestureEvent(0.1, LEAVE)])
    script.play(tracker, 1.0, 100, 100)
    assert tracker.pointer.burst_requested
    assert not tracker.pointer.active


def test_default_tour_covers_every_gesture():
    kinds = {event.kind for event in default_tour()}
    assert kinds == {MOVE, TAP, DOWN, UP, LEAVE}
    times = [event.time for event in GestureScript().events]
    assert times == sorted(times)
