"""Application service for loading and querying one course catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .catalog import OrderedCatalog
from .loader import CatalogLoader, normalize_identifier
from .models import Course, LoadResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrerequisiteReference:
    """Prerequisite identifier with its title when it resolves."""

    id: str
    title: str | None


@dataclass(frozen=True)
class CourseDescription:
    """One course with its prerequisites resolved against the catalog."""

    course: Course
    prerequisites: tuple[PrerequisiteReference, ...]


class CatalogService:
    """Owns the session catalog and answers list/describe queries."""

    def __init__(self, catalog: OrderedCatalog | None = None) -> None:
        """Initialize service with an empty (or supplied) catalog."""
        self.catalog = catalog if catalog is not None else OrderedCatalog()
        self.loader = CatalogLoader(self.catalog)
        self.last_result: LoadResult | None = None

    @property
    def loaded_source(self) -> str | None:
        """Source of the last successful load."""
        if self.last_result is None or not self.last_result.success:
            return None
        return self.last_result.source

    @property
    def is_loaded(self) -> bool:
        """Whether a load succeeded and left at least one course."""
        return self.loaded_source is not None and not self.catalog.is_empty()

    def load(self, source_path: Path | str) -> LoadResult:
        """Clear and rebuild the catalog from source_path."""
        result = self.loader.load(source_path)
        self.last_result = result
        if result.success:
            logger.info("Catalog ready: %d courses from %s", len(self.catalog), result.source)
        else:
            logger.info("Catalog cleared after failed load of %s", result.source)
        return result

    def list_sorted(self) -> list[str]:
        """Return ``"<id>, <title>"`` rows in ascending identifier order."""
        return [f"{course.id}, {course.title}" for course in self.catalog.traverse()]

    def get_course(self, identifier: str) -> Course | None:
        """Get course by identifier in any case."""
        return self.catalog.lookup(normalize_identifier(identifier))

    def describe_course(self, identifier: str) -> CourseDescription | None:
        """Return a course with resolved prerequisites, or None when not found."""
        course = self.get_course(identifier)
        if course is None:
            return None
        references: list[PrerequisiteReference] = []
        for prerequisite_id in course.prerequisites:
            prerequisite = self.catalog.lookup(prerequisite_id)
            title = prerequisite.title if prerequisite is not None else None
            references.append(PrerequisiteReference(id=prerequisite_id, title=title))
        return CourseDescription(course=course, prerequisites=tuple(references))


def format_course(description: CourseDescription) -> list[str]:
    """Render a course description as display lines."""
    course = description.course
    lines = [f"{course.id} - {course.title}"]
    if not description.prerequisites:
        lines.append("Prerequisites: None")
        return lines

    lines.append("Prerequisites:")
    for reference in description.prerequisites:
        if reference.title is None:
            lines.append(f"  {reference.id} (missing from catalog)")
        else:
            lines.append(f"  {reference.id} - {reference.title}")
    return lines
