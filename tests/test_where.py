import pytest

from flow.errors import OperationConfigError
from flow.operation import FILTERED, Where, is_filtered


def test_where_keeps_matching_documents() -> None:
    where = Where.from_pairs(["name=Alice", "age=30"])
    doc = {"name": "Alice", "age": 30}

    assert where.apply(doc) is doc


def test_where_filters_non_matching_documents() -> None:
    where = Where.from_pairs(["name=Alice", "age=30"])

    assert where.apply({"name": "Alice", "age": 25}) is FILTERED


def test_where_is_a_conjunction() -> None:
    docs = [
        {"a": 1, "b": 2},
        {"a": 1, "b": 3},
        {"a": 2, "b": 2},
        {"b": 2},
    ]
    both = Where.from_pairs(["a=1", "b=2"])
    only_a = Where.from_pairs(["a=1"])
    only_b = Where.from_pairs(["b=2"])

    for doc in docs:
        kept_both = not is_filtered(both.apply(doc))
        kept_a = not is_filtered(only_a.apply(doc))
        kept_b = not is_filtered(only_b.apply(doc))
        assert kept_both == (kept_a and kept_b)


def test_where_compares_as_text() -> None:
    assert not is_filtered(Where.from_pairs(["ok=true"]).apply({"ok": True}))
    assert not is_filtered(Where.from_pairs(["n=30"]).apply({"n": "30"}))
    assert not is_filtered(Where.from_pairs(["n=30"]).apply({"n": 30.0}))
    assert not is_filtered(Where.from_pairs(["x=<nil>"]).apply({"x": None}))
    assert not is_filtered(Where.from_pairs(["f=2.5"]).apply({"f": 2.5}))


def test_where_navigates_nested_paths_and_indices() -> None:
    where = Where.from_pairs(["users[1].name = Bob"])

    assert not is_filtered(where.apply({"users": [{"name": "A"}, {"name": "Bob"}]}))
    assert is_filtered(where.apply({"users": [{"name": "A"}]}))
    assert is_filtered(where.apply({"users": {"name": "Bob"}}))


def test_where_treats_unreachable_documents_as_non_matching() -> None:
    where = Where.from_pairs(["a.b=1"])

    assert where.apply("scalar") is FILTERED
    assert where.apply({"a": 1}) is FILTERED
    assert where.apply(None) is FILTERED


def test_where_without_conditions_passes_everything() -> None:
    where = Where.from_pairs([])

    assert where.apply({"x": 1}) == {"x": 1}
    assert where.describe() == "where: (no conditions)"


def test_where_filtered_marker_differs_from_null() -> None:
    assert FILTERED is not None
    assert Where.from_pairs([]).apply(None) is None


def test_where_from_pairs_rejects_malformed_conditions() -> None:
    with pytest.raises(OperationConfigError, match="must be in format key=value"):
        Where.from_pairs(["name"])
    with pytest.raises(OperationConfigError, match="key cannot be empty"):
        Where.from_pairs(["  =x"])
    with pytest.raises(OperationConfigError, match="invalid segment"):
        Where.from_pairs(["items[0=x"])


def test_where_description_joins_conditions() -> None:
    where = Where.from_pairs(["name=Alice", "items[0].id=3"])

    assert where.describe() == "where: name=Alice AND items[0].id=3"
