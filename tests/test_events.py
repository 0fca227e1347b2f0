import random

import pytest

from wireframe.events import Display, Event, EventMask, EventType


def _drain(display):
    display.loop()


def test_new_window_is_listed_first_with_initial_expose():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == [second, first]
    assert display.pending == 2
    assert (second.width, second.height, second.title) == (600, 600, "win2")


def test_new_window_rejects_bad_size():
    display = Display()
    with pytest.raises(ValueError):
        display.new_window(0, 10, "bad")


def test_mouse_hook_replaces_window():
    # Mouse events destroy the window and open a new one of random size.
    rng = random.Random(0)
    display = Display()
    state = {}

    def gere_mouse(button, x, y, param):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(rng.randrange(1, 500), rng.randrange(1, 500), "new win")
        state["win1"].mouse_hook(gere_mouse, None)
        state["clicks"] = state.get("clicks", 0) + 1

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    original = state["win1"]
    original.mouse_hook(gere_mouse, None)
    win2.mouse_hook(gere_mouse, None)
    display.post_event(Event(EventType.BUTTON_PRESS, original, button=1, x=3, y=4))
    display.loop()
    assert state["clicks"] == 1
    assert len(display.windows) == 2
    assert original not in display.windows
    assert state["win1"].title == "new win"
    assert display.windows[0] is state["win1"]


def test_key_hook_receives_keysym_on_release_only():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []
    win.key_hook(lambda key, p: calls.append((key, p)), "param")
    display.post_event(Event(EventType.KEY_PRESS, win, keysym=0x61))
    display.post_event(Event(EventType.KEY_RELEASE, win, keysym=0xFF1B))
    _drain(display)
    assert calls == [(0xFF1B, "param")]


def test_mouse_hook_arguments():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []
    win.mouse_hook(lambda b, x, y, p: calls.append((b, x, y, p)), 7)
    display.post_event(Event(EventType.BUTTON_PRESS, win, button=3, x=5, y=6))
    _drain(display)
    assert calls == [(3, 5, 6, 7)]


def test_motion_hook_arguments():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []
    win.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION, lambda x, y, p: calls.append((x, y, p)), None)
    display.post_event(Event(EventType.MOTION_NOTIFY, win, x=8, y=9))
    _drain(display)
    assert calls == [(8, 9, None)]


def test_expose_only_when_count_zero():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []
    win.expose_hook(lambda p: calls.append(p), "x")
    display.post_event(Event(EventType.EXPOSE, win, count=2))
    display.post_event(Event(EventType.EXPOSE, win, count=0))
    _drain(display)
    # The initial expose from window creation plus the one with count 0.
    assert calls == ["x", "x"]


def test_generic_hook_gets_param():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []
    win.hook(EventType.FOCUS_IN, EventMask.FOCUS_CHANGE, lambda p: calls.append(p), 42)
    display.post_event(Event(EventType.FOCUS_IN, win))
    _drain(display)
    assert calls == [42]


def test_delete_window_message_calls_destroy_hook():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []
    win.hook(EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY, lambda p: calls.append(p), "bye")
    display.post_event(Event(EventType.CLIENT_MESSAGE, win, delete_window=True))
    display.post_event(Event(EventType.CLIENT_MESSAGE, win))
    _drain(display)
    assert calls == ["bye"]


def test_events_for_unknown_window_ignored():
    display = Display()
    win = display.new_window(10, 10, "w")
    other = Display().new_window(10, 10, "other")
    calls = []
    win.mouse_hook(lambda *a: calls.append(a), None)
    other.mouse_hook(lambda *a: calls.append(a), None)
    display.post_event(Event(EventType.BUTTON_PRESS, other, button=1))
    _drain(display)
    assert calls == []
    assert display.pending == 0


def test_event_mask_combines_hooks():
    display = Display()
    win = display.new_window(10, 10, "w")
    assert win.event_mask() == EventMask.NO_EVENT
    win.key_hook(lambda *a: None)
    win.mouse_hook(lambda *a: None)
    win.expose_hook(lambda *a: None)
    assert win.event_mask() == EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.EXPOSURE


def test_loop_applies_event_mask_and_stops_flushing():
    display = Display()
    win = display.new_window(10, 10, "w")
    assert win.selected_mask == 0xFFFFFF
    win.key_hook(lambda *a: None)
    display.loop()
    assert win.selected_mask == int(EventMask.KEY_RELEASE)
    assert display.do_flush is False


def test_hook_rejects_out_of_range_event():
    display = Display()
    win = display.new_window(10, 10, "w")
    with pytest.raises(ValueError):
        win.hook(EventType.LAST_EVENT, 0, lambda p: None, None)


def test_destroy_unknown_window_raises():
    display = Display()
    stranger = Display().new_window(5, 5, "s")
    with pytest.raises(ValueError):
        display.destroy_window(stranger)


def test_loop_hook_runs_until_loop_end():
    display = Display()
    display.new_window(10, 10, "w")
    counter = {"n": 0}

    def tick(param):
        counter["n"] += 1
        if counter["n"] == 3:
            display.loop_end()

    display.loop_hook(tick, None)
    display.loop()
    assert counter["n"] == 3
    assert display.end_loop is True


def test_loop_without_windows_returns_immediately():
    display = Display()
    counter = []
    display.loop_hook(lambda p: counter.append(p), None)
    display.loop()
    assert counter == []


def test_loop_stops_when_last_window_destroyed():
    display = Display()
    win = display.new_window(10, 10, "w")
    ticks = []
    win.key_hook(lambda key, p: display.destroy_window(win))
    display.loop_hook(lambda p: ticks.append(p), "t")
    display.post_event(Event(EventType.KEY_RELEASE, win, keysym=0xFF1B))
    display.loop()
    assert display.windows == []
    assert ticks == ["t"]