"""A slot storage whose ids go stale once their slot is freed and reused."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """Slot index together with the generation it was issued for."""

    index: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """Stores values in reusable slots; each reuse bumps the slot's generation."""

    def __init__(self) -> None:
        self._cells: list[_Cell[T] | None] = []
        self._free: list[tuple[int, int]] = []

    def push(self, data: T) -> GenerationalId:
        """Store ``data`` and return its id, reusing a freed slot if one exists."""
        if self._free:
            index, old_generation = self._free.pop()
            if self._cells[index] is not None:
                raise RuntimeError(f"free slot {index} is still occupied")
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            generation = 0
            self._cells.append(_Cell(generation, data))
            index = len(self._cells) - 1
        return GenerationalId(index, generation)

    def _cell(self, gen_id: GenerationalId) -> _Cell[T] | None:
        if not 0 <= gen_id.index < len(self._cells):
            return None
        cell = self._cells[gen_id.index]
        if cell is None or cell.generation != gen_id.generation:
            return None
        return cell

    def get(self, gen_id: GenerationalId) -> T | None:
        """Value stored under ``gen_id``, or None if it is gone or stale."""
        cell = self._cell(gen_id)
        return None if cell is None else cell.state

    def set(self, gen_id: GenerationalId, data: T) -> None:
        """Replace the value stored under a live ``gen_id``."""
        cell = self._cell(gen_id)
        if cell is None:
            raise KeyError(gen_id)
        cell.state = data

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Free every value for which ``predicate`` returns false, in slot order."""
        for index, cell in enumerate(self._cells):
            if cell is None:
                continue
            if not predicate(cell.state):
                self._free.append((index, cell.generation))
                self._cells[index] = None

    def count(self) -> int:
        """Number of occupied slots."""
        return sum(1 for cell in self._cells if cell is not None)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[tuple[GenerationalId, T]]:
        for index, cell in enumerate(self._cells):
            if cell is not None:
                yield GenerationalId(index, cell.generation), cell.state

    def clear(self) -> None:
        """Drop every value and forget all slots."""
        self._cells.clear()
        self._free.clear()

    def free(self, gen_id: GenerationalId) -> None:
        """Free the slot of ``gen_id``; stale or unknown ids are ignored."""
        if self._cell(gen_id) is None:
            return
        self._free.append((gen_id.index, gen_id.generation))
        self._cells[gen_id.index] = None