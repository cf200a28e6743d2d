"""Keyboard, mouse and touch state, fed by window events and queried each frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Hashable

from quadkit.conf import UpdateTrigger
from quadkit.geometry import Vec2


class TouchPhase(enum.Enum):
    """Stage of a touch in its lifetime."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    """A mouse button."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Touch:
    """One touch point; ``position`` is in pixels unless converted."""

    id: int
    phase: TouchPhase
    position: Vec2


@dataclass(frozen=True)
class InputEvent:
    """A recorded input event, replayed to subscribers.

    ``kind`` is one of ``mouse_motion``, ``mouse_wheel``, ``mouse_button_down``,
    ``mouse_button_up``, ``char``, ``key_down``, ``key_up`` or ``touch``; only
    the fields that belong to that kind are set.
    """

    kind: str
    x: float = 0.0
    y: float = 0.0
    button: MouseButton | None = None
    character: str | None = None
    keycode: Hashable | None = None
    modifiers: Any = None
    repeat: bool = False
    phase: TouchPhase | None = None
    touch_id: int | None = None


_FINISHED_PHASES = (TouchPhase.ENDED, TouchPhase.CANCELLED)
_ACTIVE_PHASES = (TouchPhase.STARTED, TouchPhase.MOVED)


class InputState:
    """Collects window input events and answers per-frame input queries."""

    def __init__(
        self,
        screen_width: float = 800.0,
        screen_height: float = 600.0,
        update_on: UpdateTrigger | None = None,
        dpi_scale: float = 1.0,
        blocking_event_loop: bool = False,
    ) -> None:
        if dpi_scale <= 0:
            raise ValueError(f"dpi_scale must be positive, got {dpi_scale!r}")
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.update_on = update_on if update_on is not None else UpdateTrigger()
        self.dpi_scale = dpi_scale
        self.blocking_event_loop = blocking_event_loop

        self._simulate_mouse_with_touch = True
        self._keys_down: set[Hashable] = set()
        self._keys_pressed: set[Hashable] = set()
        self._keys_released: set[Hashable] = set()
        self._mouse_down: set[MouseButton] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_released: set[MouseButton] = set()
        self._touches: dict[int, Touch] = {}
        self._chars: list[str] = []
        self._chars_ui: list[str] = []
        self._mouse_position = Vec2(0.0, 0.0)
        self._last_mouse_position: Vec2 | None = None
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._prevent_quit = False
        self._quit_requested = False
        self._cursor_grabbed = False
        self._subscribers: list[list[InputEvent]] = []
        self._update_requested = False

    # -- event intake -------------------------------------------------

    def _broadcast(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    def _request_update(self) -> None:
        self._update_requested = True

    def resize_event(self, width: float, height: float) -> None:
        """Record a new window size."""
        self.screen_width = width
        self.screen_height = height
        if self.blocking_event_loop:
            self._request_update()

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Accumulate raw mouse movement while the cursor is grabbed."""
        if self._cursor_grabbed:
            self._mouse_position = self._mouse_position + Vec2(x, y)
            self._broadcast(
                InputEvent("mouse_motion", self._mouse_position.x, self._mouse_position.y)
            )

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Record the cursor moving to (x, y) unless the cursor is grabbed."""
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(InputEvent("mouse_motion", x, y))
        if self.update_on.mouse_motion:
            self._request_update()

    def mouse_wheel_event(self, x: float, y: float) -> None:
        """Record a wheel movement for this frame."""
        self._mouse_wheel = Vec2(x, y)
        self._broadcast(InputEvent("mouse_wheel", x, y))
        if self.update_on.mouse_wheel:
            self._request_update()

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        """Record a mouse button being pressed at (x, y)."""
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        self._broadcast(InputEvent("mouse_button_down", x, y, button=button))
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(x, y)
        if self.update_on.mouse_down:
            self._request_update()

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        """Record a mouse button being released at (x, y)."""
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        self._broadcast(InputEvent("mouse_button_up", x, y, button=button))
        if not self._cursor_grabbed:
            self._mouse_position = Vec2(x, y)
        if self.update_on.mouse_up:
            self._request_update()

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        """Record a touch; with mouse simulation on it also drives the left button."""
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))
        if self._simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)
        elif self.update_on.touch:
            self._request_update()
        self._broadcast(InputEvent("touch", x, y, phase=phase, touch_id=touch_id))

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        """Queue a typed character."""
        self._chars.append(character)
        self._chars_ui.append(character)
        self._broadcast(
            InputEvent("char", character=character, modifiers=modifiers, repeat=repeat)
        )

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        """Record a key going down; auto-repeats do not count as new presses."""
        self._keys_down.add(keycode)
        if not repeat:
            self._keys_pressed.add(keycode)
        self._broadcast(
            InputEvent("key_down", keycode=keycode, modifiers=modifiers, repeat=repeat)
        )
        if self.update_on.should_update_on_key(keycode):
            self._request_update()

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        """Record a key being released."""
        self._keys_down.discard(keycode)
        self._keys_released.add(keycode)
        self._broadcast(InputEvent("key_up", keycode=keycode, modifiers=modifiers))

    def quit_requested_event(self) -> bool:
        """Handle a request to close; returns True if the quit may proceed."""
        if self._prevent_quit:
            self._quit_requested = True
            return False
        return True

    def end_frame(self) -> None:
        """Reset per-frame state and age touches at the end of a frame."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._last_mouse_position = self.mouse_position_local()
        self._quit_requested = False
        self._touches = {
            touch_id: (
                replace(touch, phase=TouchPhase.STATIONARY)
                if touch.phase in _ACTIVE_PHASES
                else touch
            )
            for touch_id, touch in self._touches.items()
            if touch.phase not in _FINISHED_PHASES
        }

    def take_update_request(self) -> bool:
        """True if an event asked for another frame since the last call; resets the request."""
        requested = self._update_requested
        self._update_requested = False
        return requested

    # -- queries ------------------------------------------------------

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window."""
        self._cursor_grabbed = grab

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in logical pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def _to_local(self, pixels: Vec2) -> Vec2:
        return (
            Vec2(pixels.x / self.screen_width, pixels.y / self.screen_height) * 2.0
            - Vec2(1.0, 1.0)
        )

    def mouse_position_local(self) -> Vec2:
        """Mouse position mapped to the range [-1, 1] on both axes."""
        x, y = self.mouse_position()
        return self._to_local(Vec2(x, y))

    def mouse_delta_position(self) -> Vec2:
        """Previous frame's local mouse position minus the current one."""
        current = self.mouse_position_local()
        last = self._last_mouse_position if self._last_mouse_position is not None else current
        return last - current

    def simulate_mouse_with_touch(self, option: bool) -> None:
        """Choose whether touches also raise mouse events (on by default)."""
        self._simulate_mouse_with_touch = option

    def is_simulating_mouse_with_touch(self) -> bool:
        """True if touches also raise mouse events."""
        return self._simulate_mouse_with_touch

    def touches(self) -> list[Touch]:
        """Current touches with positions in pixels."""
        return list(self._touches.values())

    def touches_local(self) -> list[Touch]:
        """Current touches with positions mapped to [-1, 1]."""
        return [
            replace(touch, position=self._to_local(touch.position))
            for touch in self._touches.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        """Wheel movement recorded this frame."""
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """True if the key went down this frame."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """True while the key is held."""
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """True if the key was released this frame."""
        return keycode in self._keys_released

    def get_char_pressed(self) -> str | None:
        """Take the most recently typed character from the queue, or None."""
        return self._chars.pop() if self._chars else None

    def get_last_key_pressed(self) -> Hashable | None:
        """One of the keys pressed this frame, or None; which one is unspecified."""
        return next(iter(self._keys_pressed), None)

    def get_keys_pressed(self) -> set[Hashable]:
        """Keys that went down this frame."""
        return set(self._keys_pressed)

    def get_keys_down(self) -> set[Hashable]:
        """Keys currently held."""
        return set(self._keys_down)

    def get_keys_released(self) -> set[Hashable]:
        """Keys released this frame."""
        return set(self._keys_released)

    def clear_input_queue(self) -> None:
        """Drop every queued character."""
        self._chars.clear()
        self._chars_ui.clear()

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        """True while the button is held."""
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """True if the button went down this frame."""
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        """True if the button was released this frame."""
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        """Turn close requests into :meth:`is_quit_requested` instead of quitting."""
        self._prevent_quit = True

    def is_quit_requested(self) -> bool:
        """True if a close was requested and prevented this frame."""
        return self._quit_requested

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber and return its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def drain_events(self, subscriber: int) -> list[InputEvent]:
        """Every event recorded for ``subscriber`` since its last drain, oldest first."""
        if not 0 <= subscriber < len(self._subscribers):
            raise IndexError(f"unknown input subscriber {subscriber}")
        events = list(self._subscribers[subscriber])
        self._subscribers[subscriber].clear()
        return events