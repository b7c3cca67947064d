"""Load course records from a comma-delimited text source."""

from __future__ import annotations

import logging
from pathlib import Path

from .catalog import OrderedCatalog
from .models import Course, Diagnostic, DiagnosticKind, LoadResult

DELIMITER = ","
SOURCE_ENCODING = "utf-8-sig"

logger = logging.getLogger(__name__)

Row = tuple[int, list[str]]


class SourceUnavailable(OSError):
    """Raised when a catalog source cannot be opened or decoded.

    Paths the OS rejects outright, such as ones with an embedded NUL, count too.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Error: cannot open file '{path}'.")
        self.path = str(path)


def normalize_identifier(text: str) -> str:
    """Normalize a course identifier for storage and lookup."""
    return text.strip().upper()


def split_line(line: str) -> list[str]:
    """Split one source line into trimmed tokens.

    A trailing delimiter closes the last field rather than opening an empty
    one, so ``"CSCI200,"`` yields a single token.
    """
    stripped = line.strip()
    if not stripped:
        return []
    tokens = [token.strip() for token in stripped.split(DELIMITER)]
    if stripped.endswith(DELIMITER):
        tokens.pop()
    return tokens


def parse_course(tokens: list[str], line_number: int) -> Course | Diagnostic:
    """Build a course from one line's tokens, or describe why it was skipped."""
    if len(tokens) < 2:
        return Diagnostic(
            DiagnosticKind.MALFORMED_LINE,
            f"Line {line_number}: needs at least Course Number and Title.",
            line_number,
        )

    course_id = normalize_identifier(tokens[0])
    title = tokens[1]
    if not course_id:
        return Diagnostic(
            DiagnosticKind.MISSING_REQUIRED_FIELD,
            f"Line {line_number}: missing course number.",
            line_number,
        )
    if not title:
        return Diagnostic(
            DiagnosticKind.MISSING_REQUIRED_FIELD,
            f"Line {line_number}: missing course title.",
            line_number,
        )

    prerequisites = tuple(normalize_identifier(token) for token in tokens[2:] if token)
    return Course(id=course_id, title=title, prerequisites=prerequisites)


def _read_rows(path: Path) -> list[Row]:
    """Read non-blank lines as ``(line_number, tokens)`` pairs."""
    try:
        with path.open(encoding=SOURCE_ENCODING) as handle:
            lines = handle.readlines()
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise SourceUnavailable(path) from exc

    rows: list[Row] = []
    for line_number, raw in enumerate(lines, start=1):
        tokens = split_line(raw)
        if tokens:
            rows.append((line_number, tokens))
    return rows


def _unresolved_prerequisites(catalog: OrderedCatalog, rows: list[Row]) -> list[Diagnostic]:
    """Report prerequisite identifiers that do not name a loaded course."""
    issues: list[Diagnostic] = []
    for line_number, tokens in rows:
        if len(tokens) < 2:
            continue
        course_id = normalize_identifier(tokens[0])
        for token in tokens[2:]:
            prerequisite = normalize_identifier(token)
            if not prerequisite:
                continue
            if catalog.lookup(prerequisite) is None:
                issues.append(
                    Diagnostic(
                        DiagnosticKind.UNRESOLVED_PREREQUISITE,
                        f"Course '{course_id}' lists missing prerequisite '{prerequisite}'.",
                        line_number,
                    )
                )
    return issues


class CatalogLoader:
    """Populate an ordered catalog from a text source and validate references."""

    def __init__(self, catalog: OrderedCatalog) -> None:
        self.catalog = catalog

    def load(self, source_path: Path | str) -> LoadResult:
        """Replace the catalog contents with the courses in source_path.

        The source is read twice: once to parse and insert records, and once
        more to check every prerequisite against the fully populated catalog.
        Only an unreadable source fails the load; everything else is reported
        as a diagnostic.
        """
        path = Path(source_path)
        self.catalog.clear()
        logger.info("Loading course catalog from %s", path)

        try:
            issues, loaded_count = self._parse_and_insert(_read_rows(path))
            issues.extend(_unresolved_prerequisites(self.catalog, _read_rows(path)))
        except SourceUnavailable as exc:
            self.catalog.clear()
            logger.warning("Catalog source unavailable: %s", exc.path)
            issue = Diagnostic(DiagnosticKind.SOURCE_UNAVAILABLE, str(exc))
            return LoadResult(success=False, loaded_count=0, issues=(issue,), source=str(source_path))

        for issue in issues:
            logger.debug("%s: %s", issue.kind.value, issue.message)
        logger.info(
            "Loaded %d courses (%d unique) from %s with %d diagnostics",
            loaded_count,
            len(self.catalog),
            path,
            len(issues),
        )
        return LoadResult(success=True, loaded_count=loaded_count, issues=tuple(issues), source=str(source_path))

    def _parse_and_insert(self, rows: list[Row]) -> tuple[list[Diagnostic], int]:
        issues: list[Diagnostic] = []
        loaded_count = 0
        for line_number, tokens in rows:
            parsed = parse_course(tokens, line_number)
            if isinstance(parsed, Diagnostic):
                issues.append(parsed)
                continue
            # Later lines with the same identifier replace earlier ones.
            self.catalog.insert(parsed)
            loaded_count += 1
        return issues, loaded_count


def load_catalog(source_path: Path | str) -> tuple[OrderedCatalog, LoadResult]:
    """Load a source into a fresh catalog."""
    catalog = OrderedCatalog()
    result = CatalogLoader(catalog).load(source_path)
    return catalog, result
