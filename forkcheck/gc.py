"""A registry of allocated objects that can be released one by one or all at once."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, NoReturn, Optional


class GarbageCollector:
    """Keeps tracked objects in allocation order until they are released.

    An optional ``finalizer`` is called on every object as it is released,
    whether singly or by :meth:`clear`.
    """

    def __init__(self, finalizer: Optional[Callable[[Any], None]] = None) -> None:
        self._finalizer = finalizer
        self._objects: list[Any] = []

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._objects))

    def __contains__(self, obj: object) -> bool:
        return any(item is obj for item in self._objects)

    def __enter__(self) -> "GarbageCollector":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    def _finalize(self, obj: Any) -> None:
        if self._finalizer is not None:
            self._finalizer(obj)

    def track(self, obj: Any) -> Any:
        """Register ``obj`` and return it; a failed allocation (None) is fatal."""
        if obj is None:
            sys.stderr.write("Fatal: malloc fail\n")
            self.exit(1)
        self._objects.append(obj)
        return obj

    def release(self, obj: Any) -> None:
        """Release the first tracked entry that is ``obj``; unknown objects are ignored."""
        if obj is None:
            return
        for position, item in enumerate(self._objects):
            if item is obj:
                del self._objects[position]
                self._finalize(item)
                return

    def clear(self) -> None:
        """Release every tracked object, oldest first."""
        objects, self._objects = self._objects, []
        for obj in objects:
            self._finalize(obj)

    def exit(self, status: int) -> NoReturn:
        """Release everything, then leave with ``status``."""
        self.clear()
        raise SystemExit(status)