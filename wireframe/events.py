"""Windows, event hooks and the event loop of an in-memory display."""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any

__all__ = ["EventType", "EventMask", "Event", "Window", "Display"]


class EventType(IntEnum):
    """Core event codes; ``LAST_EVENT`` bounds the hook table."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35
    LAST_EVENT = 36


class EventMask(IntFlag):
    """Event selection mask bits."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


_ALL_EVENTS = 0xFFFFFF

HookFunc = Callable[..., Any]


@dataclass
class Event:
    """An event addressed to a window.

    ``delete_window`` marks a client message asking the window to close.
    """

    type: int
    window: Window | None = None
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False


@dataclass
class _HookSlot:
    mask: int = 0
    func: HookFunc | None = None
    param: Any = None


@dataclass(eq=False)
class Window:
    """A window with one hook slot per event type."""

    id: int
    width: int
    height: int
    title: str
    hooks: list[_HookSlot] = field(
        default_factory=lambda: [_HookSlot() for _ in range(EventType.LAST_EVENT)]
    )
    selected_mask: int = _ALL_EVENTS

    def hook(self, event: int, mask: int, func: HookFunc | None, param: Any = None) -> None:
        """Install ``func`` as the handler for ``event``, selecting ``mask``."""
        if not 0 <= event < EventType.LAST_EVENT:
            raise ValueError(f"event type out of range: {event}")
        slot = self.hooks[event]
        slot.func = func
        slot.param = param
        slot.mask = int(mask)

    def key_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(keysym, param)`` on key release."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` on button press."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(param)`` when the window is exposed."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> EventMask:
        """Return the union of the masks of all installed hooks."""
        combined = 0
        for slot in self.hooks:
            combined |= slot.mask
        return EventMask(combined)


def _call_key(win: Window, ev: Event) -> None:
    slot = win.hooks[ev.type]
    slot.func(ev.keysym, slot.param)


def _call_button(win: Window, ev: Event) -> None:
    slot = win.hooks[ev.type]
    slot.func(ev.button, ev.x, ev.y, slot.param)


def _call_motion(win: Window, ev: Event) -> None:
    slot = win.hooks[ev.type]
    slot.func(ev.x, ev.y, slot.param)


def _call_expose(win: Window, ev: Event) -> None:
    if ev.count == 0:
        slot = win.hooks[ev.type]
        slot.func(slot.param)


def _call_generic(win: Window, ev: Event) -> None:
    slot = win.hooks[ev.type]
    slot.func(slot.param)


_DISPATCH: dict[int, Callable[[Window, Event], None]] = {
    EventType.KEY_PRESS: _call_key,
    EventType.KEY_RELEASE: _call_key,
    EventType.BUTTON_PRESS: _call_button,
    EventType.BUTTON_RELEASE: _call_button,
    EventType.MOTION_NOTIFY: _call_motion,
    EventType.EXPOSE: _call_expose,
}


class Display:
    """A connection holding windows, a queue of pending events and a loop hook."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self.do_flush = True
        self.end_loop = False
        self._queue: deque[Event] = deque()
        self._loop_func: HookFunc | None = None
        self._loop_param: Any = None
        self._ids = itertools.count(1)

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Create a window; it is listed first and gets an initial Expose event."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        window = Window(next(self._ids), width, height, title)
        self.windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Remove ``window`` from the display."""
        for index, candidate in enumerate(self.windows):
            if candidate is window:
                del self.windows[index]
                return
        raise ValueError(f"window {window.id} does not belong to this display")

    def loop_hook(self, func: HookFunc | None, param: Any = None) -> None:
        """Call ``func(param)`` after each batch of pending events."""
        self._loop_func = func
        self._loop_param = param

    def post_event(self, event: Event) -> None:
        """Queue an event for delivery by :meth:`loop`."""
        self._queue.append(event)

    def loop_end(self) -> None:
        """Make :meth:`loop` return at its next check."""
        self.end_loop = True

    def loop(self) -> None:
        """Deliver events to window hooks until no window is left or the loop ends.

        Without a loop hook the loop also returns once the queue is empty,
        as nothing else could ever arrive.
        """
        for window in self.windows:
            window.selected_mask = int(window.event_mask())
        self.do_flush = False
        while self.windows and not self.end_loop:
            while not self.end_loop and (self._loop_func is None or self._queue):
                if not self._queue:
                    return
                self._dispatch(self._queue.popleft())
            if self._loop_func is not None:
                self._loop_func(self._loop_param)

    def _dispatch(self, ev: Event) -> None:
        win = next((w for w in self.windows if w is ev.window), None)
        if win is None:
            return
        if ev.type == EventType.CLIENT_MESSAGE and ev.delete_window:
            slot = win.hooks[EventType.DESTROY_NOTIFY]
            if slot.func is not None:
                slot.func(slot.param)
        if 0 <= ev.type < EventType.LAST_EVENT and win.hooks[ev.type].func is not None:
            _DISPATCH.get(ev.type, _call_generic)(win, ev)