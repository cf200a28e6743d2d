"""Global storage holding one value per type."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class Storage:
    """Maps each type to the single value of that type stored last."""

    def __init__(self) -> None:
        self._values: dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store ``data`` under its type, silently replacing any older value."""
        self._values[type(data)] = data

    def get(self, cls: type[T]) -> T:
        """Stored value of type ``cls``; raises KeyError if there is none."""
        try:
            return self._values[cls]
        except KeyError:
            raise KeyError(f"no value of type {cls.__name__} in storage") from None

    def try_get(self, cls: type[T]) -> T | None:
        """Stored value of type ``cls``, or None if there is none."""
        return self._values.get(cls)

    def __contains__(self, cls: object) -> bool:
        return cls in self._values


_default = Storage()


def store(data: Any) -> None:
    """Store ``data`` in the global storage."""
    _default.store(data)


def get(cls: type[T]) -> T:
    """Value of type ``cls`` from the global storage; raises KeyError if absent."""
    return _default.get(cls)


def try_get(cls: type[T]) -> T | None:
    """Value of type ``cls`` from the global storage, or None if absent."""
    return _default.try_get(cls)