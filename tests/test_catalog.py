from coursecatalog.catalog import OrderedCatalog
from coursecatalog.models import Course


def _course(course_id: str, title: str = "T", *prerequisites: str) -> Course:
    return Course(id=course_id, title=title, prerequisites=tuple(prerequisites))


def test_new_catalog_is_empty() -> None:
    catalog = OrderedCatalog()
    assert catalog.is_empty() is True
    assert len(catalog) == 0
    assert catalog.traverse() == []
    assert catalog.lookup("CSCI100") is None


def test_traverse_is_ascending_regardless_of_insert_order() -> None:
    catalog = OrderedCatalog()
    for course_id in ["CSCI300", "MATH201", "CSCI100", "CSCI200", "CSCI101"]:
        catalog.insert(_course(course_id))

    ids = [course.id for course in catalog.traverse()]
    assert ids == ["CSCI100", "CSCI101", "CSCI200", "CSCI300", "MATH201"]
    assert catalog.keys() == ids
    assert list(catalog) == ids


def test_traverse_is_stable_across_calls() -> None:
    catalog = OrderedCatalog()
    catalog.insert(_course("B"))
    catalog.insert(_course("A"))
    assert catalog.traverse() == catalog.traverse()


def test_insert_existing_identifier_replaces_record() -> None:
    catalog = OrderedCatalog()
    catalog.insert(_course("CSCI200", "Old", "CSCI100"))
    catalog.insert(_course("CSCI200", "New"))

    assert len(catalog) == 1
    stored = catalog.lookup("CSCI200")
    assert stored is not None
    assert stored.title == "New"
    assert stored.prerequisites == ()
    assert [course.id for course in catalog.traverse()] == ["CSCI200"]


def test_last_insert_wins_and_ids_unique_for_any_sequence() -> None:
    catalog = OrderedCatalog()
    sequence = ["C", "A", "C", "B", "A", "C"]
    for index, course_id in enumerate(sequence):
        catalog.insert(_course(course_id, f"title-{index}"))

    traversed = catalog.traverse()
    ids = [course.id for course in traversed]
    assert ids == sorted(set(sequence))
    assert all(left < right for left, right in zip(ids, ids[1:]))
    assert {course.id: course.title for course in traversed} == {"A": "title-4", "B": "title-3", "C": "title-5"}


def test_lookup_is_exact_match() -> None:
    catalog = OrderedCatalog()
    catalog.insert(_course("CSCI200"))
    assert catalog.lookup("CSCI200") is not None
    assert catalog.lookup("csci200") is None
    assert catalog.lookup("CSCI20") is None
    assert catalog.lookup("CSCI2000") is None


def test_lookup_never_inserted_returns_none() -> None:
    catalog = OrderedCatalog()
    for course_id in ["A", "B", "C"]:
        catalog.insert(_course(course_id))
    assert catalog.lookup("D") is None
    assert catalog.lookup("") is None


def test_contains_and_clear() -> None:
    catalog = OrderedCatalog()
    catalog.insert(_course("MATH201"))
    assert "MATH201" in catalog
    assert "MATH202" not in catalog
    assert 201 not in catalog

    catalog.clear()
    assert catalog.is_empty() is True
    assert "MATH201" not in catalog
    assert catalog.traverse() == []

    catalog.insert(_course("CSCI100"))
    assert catalog.keys() == ["CSCI100"]


def test_ordering_is_plain_string_comparison() -> None:
    catalog = OrderedCatalog()
    for course_id in ["CSCI1000", "CSCI200", "CSCI20", "ART1"]:
        catalog.insert(_course(course_id))
    assert catalog.keys() == ["ART1", "CSCI1000", "CSCI20", "CSCI200"]


def test_contains_agrees_with_lookup() -> None:
    catalog = OrderedCatalog()
    catalog.insert(_course("CSCI200"))
    catalog.insert(_course("CSCI200", "Replaced"))
    for identifier in ["CSCI200", "CSCI20", "csci200", ""]:
        assert (identifier in catalog) == (catalog.lookup(identifier) is not None)
