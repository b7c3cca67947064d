"""CLI entrypoint for the course catalog advisor."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from .models import LoadResult
from .service import CatalogService, format_course

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
EXIT_CHOICE = "9"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _service() -> CatalogService:
    """Create app service with an empty catalog."""
    return CatalogService()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, keeping stdout for catalog output."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="coursecatalog", description="Course catalog advisor")
    parser.add_argument("command", nargs="?", default="shell", choices=["shell", "list", "show"])
    parser.add_argument("course", nargs="?", help="course number for the show command")
    parser.add_argument("-f", "--file", help="course data file to load")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "shell":
        return play_shell(source=args.file)
    if not args.file:
        parser.error(f"--file is required for '{args.command}'.")
    if args.command == "list":
        return list_command(args.file)
    if not args.course:
        parser.error("show requires a course number.")
    return show_command(args.file, args.course)


def list_command(source: str, print_fn: PrintFn = print) -> int:
    """Load source and print the sorted course list."""
    service = _service()
    result = service.load(source)
    _report_load(result, print_fn)
    if not result.success:
        return 1
    _print_course_list(service, print_fn)
    return 0


def show_command(source: str, course_id: str, print_fn: PrintFn = print) -> int:
    """Load source and print one course."""
    service = _service()
    result = service.load(source)
    _report_load(result, print_fn)
    if not result.success:
        return 1
    return 0 if _print_course(service, course_id, print_fn) else 1


def play_shell(input_fn: InputFn = input, print_fn: PrintFn = print, source: str | None = None) -> int:
    """Run persistent menu-driven shell."""
    service = _service()
    if source:
        _report_load(service.load(source), print_fn)

    while True:
        print_fn("\nABCU Advisor Menu")
        print_fn("  1. Load Data")
        print_fn("  2. Print Course List (Sorted)")
        print_fn("  3. Print Course")
        print_fn("  9. Exit")
        try:
            choice = input_fn("Enter choice: ").strip()
        except EOFError:
            return 0

        if choice == "1":
            _load_flow(service, input_fn, print_fn)
        elif choice == "2":
            _list_flow(service, print_fn)
        elif choice == "3":
            _course_flow(service, input_fn, print_fn)
        elif choice == EXIT_CHOICE:
            print_fn("Goodbye.")
            return 0
        else:
            print_fn("Invalid choice. Please select 1, 2, 3, or 9.")


def _load_flow(service: CatalogService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Prompt for a data file and load it."""
    try:
        path_text = input_fn("Enter the course data filename (e.g., courses.txt): ").strip()
    except EOFError:
        print_fn("Input aborted.")
        return
    if not path_text:
        print_fn("File path is required.")
        return
    _report_load(service.load(path_text), print_fn)


def _report_load(result: LoadResult, print_fn: PrintFn) -> None:
    """Print load outcome and any validation issues."""
    if not result.success:
        print_fn("Load failed.")
    diagnostics = result.diagnostics
    if diagnostics:
        print_fn(f"\nValidation issues ({len(diagnostics)}):")
        for message in diagnostics:
            print_fn(f" - {message}")
    elif result.success:
        print_fn(f"File validated. Loaded {result.loaded_count} courses.")


def _list_flow(service: CatalogService, print_fn: PrintFn) -> None:
    """Print the sorted course list once data is loaded."""
    if not service.is_loaded:
        print_fn("Please load data first (Option 1).")
        return
    _print_course_list(service, print_fn)


def _course_flow(service: CatalogService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Prompt for a course number and print its details."""
    if not service.is_loaded:
        print_fn("Please load data first (Option 1).")
        return
    try:
        target = input_fn("Enter course number (e.g., CSCI300): ").strip()
    except EOFError:
        print_fn("Input aborted.")
        return
    if not target:
        print_fn("Please enter a non-empty course number.")
        return
    _print_course(service, target, print_fn)


def _print_course_list(service: CatalogService, print_fn: PrintFn) -> None:
    print_fn("\nCourse List (alphanumeric):")
    for row in service.list_sorted():
        print_fn(row)


def _print_course(service: CatalogService, course_id: str, print_fn: PrintFn) -> bool:
    """Print one course; return False when it is not in the catalog."""
    description = service.describe_course(course_id)
    if description is None:
        print_fn("Course not found.")
        return False
    for line in format_course(description):
        print_fn(line)
    return True


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
