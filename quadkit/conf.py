"""Window and frame-loop configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Hashable, Sequence

DEFAULT_DRAW_CALL_VERTEX_CAPACITY = 10000
DEFAULT_DRAW_CALL_INDEX_CAPACITY = 5000


class FilterMode(enum.Enum):
    """How textures are sampled when scaled."""

    LINEAR = "linear"
    NEAREST = "nearest"


@dataclass
class UpdateTrigger:
    """Which input events wake a blocking event loop for another frame.

    All triggers are off by default. When ``specific_key`` is set, only those
    keys wake the loop and ``key_down`` is not consulted.
    """

    key_down: bool = False
    mouse_down: bool = False
    mouse_up: bool = False
    mouse_motion: bool = False
    mouse_wheel: bool = False
    specific_key: Sequence[Hashable] | None = None
    touch: bool = False

    def should_update_on_key(self, keycode: Hashable) -> bool:
        """True if pressing ``keycode`` should schedule an update."""
        if self.specific_key is not None:
            return keycode in self.specific_key
        return self.key_down


@dataclass
class Conf:
    """Configuration of a window and its drawing batches.

    ``update_on`` tells a blocking event loop when to proceed; None means no
    input wakes it, the same as an all-off :class:`UpdateTrigger`.
    ``draw_call_vertex_capacity`` and ``draw_call_index_capacity`` size the
    buffer each batched draw call is collected into.
    """

    window_title: str = ""
    update_on: UpdateTrigger | None = field(default_factory=UpdateTrigger)
    default_filter_mode: FilterMode = FilterMode.LINEAR
    draw_call_vertex_capacity: int = DEFAULT_DRAW_CALL_VERTEX_CAPACITY
    draw_call_index_capacity: int = DEFAULT_DRAW_CALL_INDEX_CAPACITY

    def __post_init__(self) -> None:
        for name in ("draw_call_vertex_capacity", "draw_call_index_capacity"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.default_filter_mode, FilterMode):
            raise TypeError(
                f"default_filter_mode must be a FilterMode, got {self.default_filter_mode!r}"
            )

    @classmethod
    def for_title(cls, title: str) -> Conf:
        """A default configuration whose window carries ``title``."""
        return cls(window_title=title)