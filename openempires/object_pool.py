"""A simple free-list of reusable objects."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out pooled objects, creating new ones when the pool is empty."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._free: list[T] = []
        self._pool_size = 0

    def reserve(self, count: int) -> None:
        """Preallocate ``count`` objects."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._free.extend(self._factory() for _ in range(count))
        self._pool_size += count

    def acquire(self) -> T:
        """Take the most recently freed object, or create a new one."""
        if self._free:
            return self._free.pop()
        return self._factory()

    def release(self, obj: T) -> None:
        """Return an object to the pool."""
        self._free.append(obj)

    @property
    def pool_size(self) -> int:
        """Number of objects preallocated through ``reserve``."""
        return self._pool_size

    @property
    def free_size(self) -> int:
        """Number of objects currently available."""
        return len(self._free)