"""Ordered in-memory container for course records."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterator

from .models import Course


class OrderedCatalog:
    """Course records keyed by identifier, enumerated in ascending key order.

    Exact lookups go through a dict; a parallel sorted key list keeps the
    ascending traversal an O(n) scan. Inserting an identifier that is already
    present replaces the stored record.
    """

    def __init__(self) -> None:
        self._courses: dict[str, Course] = {}
        self._keys: list[str] = []

    def insert(self, course: Course) -> None:
        """Insert or replace a course by identifier."""
        if course.id not in self._courses:
            insort(self._keys, course.id)
        self._courses[course.id] = course

    def lookup(self, identifier: str) -> Course | None:
        """Return the course stored under identifier, if any."""
        return self._courses.get(identifier)

    def traverse(self) -> list[Course]:
        """Return all courses in ascending identifier order."""
        return [self._courses[key] for key in self._keys]

    def keys(self) -> list[str]:
        """Return identifiers in ascending order."""
        return list(self._keys)

    def clear(self) -> None:
        """Remove every course."""
        self._courses.clear()
        self._keys.clear()

    def is_empty(self) -> bool:
        return not self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._courses

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))
