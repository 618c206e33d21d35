import pytest

from flow.errors import OperationConfigError, PathSyntaxError
from flow.operation import Set, parse_value


def test_set_creates_nested_mappings() -> None:
    result = Set.from_pairs(["a.b.c=42"]).apply({})

    assert result == {"a": {"b": {"c": 42}}}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("42", 42),
        ("1.5", 1.5),
        ("true", True),
        ("null", None),
        ('"quoted"', "quoted"),
        ('{"name":"app","tag":"v1"}', {"name": "app", "tag": "v1"}),
        ("[1, 2]", [1, 2]),
        ("alice", "alice"),
        ("NaN", "NaN"),
        ("", ""),
    ],
)
def test_parse_value_prefers_json_then_literal_string(raw, expected) -> None:
    assert parse_value(raw) == expected


def test_set_applies_assignments_in_order() -> None:
    op = Set.from_pairs(["a=1", "a.b=2", "c=first", "c=second"])

    assert op.apply({"keep": True}) == {"keep": True, "a": {"b": 2}, "c": "second"}


def test_set_replaces_non_mapping_root() -> None:
    assert Set.from_pairs(["x=1"]).apply([1, 2]) == {"x": 1}
    assert Set.from_pairs(["x=1"]).apply(None) == {"x": 1}


def test_set_grows_lists_at_index() -> None:
    result = Set.from_pairs(['items[2]={"id":3}']).apply({"items": [{"id": 1}]})

    assert result == {"items": [{"id": 1}, None, {"id": 3}]}


def test_set_wildcard_targets_existing_elements() -> None:
    doc = {"items": [{"id": 1}, {"id": 2}]}

    result = Set.from_pairs(["items[*].seen=true"]).apply(doc)

    assert result == {"items": [{"id": 1, "seen": True}, {"id": 2, "seen": True}]}


def test_set_values_do_not_alias_between_documents() -> None:
    op = Set.from_pairs(['meta={"tags":[]}'])
    first = op.apply({})
    first["meta"]["tags"].append("changed")

    assert op.apply({}) == {"meta": {"tags": []}}


def test_set_splits_on_first_unescaped_equals() -> None:
    op = Set.from_pairs(["query=a=b", "weird\\=key=1"])

    assert op.apply({}) == {"query": "a=b", "weird=key": 1}


def test_set_from_pairs_rejects_malformed_assignments() -> None:
    with pytest.raises(OperationConfigError, match="expected path=value"):
        Set.from_pairs(["novalue"])
    with pytest.raises(OperationConfigError, match="empty path"):
        Set.from_pairs([" =1"])
    with pytest.raises(PathSyntaxError):
        Set.from_pairs(["items[-1]=1"])


def test_set_description_lists_paths() -> None:
    assert Set.from_pairs(["a=1", "b.c=2"]).describe() == "set(a, b.c)"
