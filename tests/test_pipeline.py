import pytest

from flow.config import FlowConfig
from flow.errors import PipelineStepError
from flow.operation import (
    FILTERED,
    Delete,
    Pick,
    Pipeline,
    Set,
    Where,
    build_pipeline,
    compose,
)


def test_empty_pipeline_is_identity() -> None:
    pipeline = Pipeline()
    doc = {"a": 1}

    assert pipeline.empty
    assert pipeline.apply(doc) is doc


def test_pipeline_applies_operations_left_to_right() -> None:
    doc = {"user": {"name": "alice", "password": "x"}}

    result = compose(
        doc,
        Pick(paths=["user"]),
        Set.from_pairs(["role=admin"]),
        Delete(paths=["password"]),
    )

    assert result == {"name": "alice", "role": "admin"}


def test_pipeline_propagates_filtered_marker() -> None:
    pipeline = Pipeline([Where.from_pairs(["name=Bob"]), Pick(paths=["name"])])

    assert pipeline.apply({"name": "Alice"}) is FILTERED
    assert pipeline.apply({"name": "Bob"}) == "Bob"


def test_pipeline_wraps_step_failures() -> None:
    pipeline = Pipeline([Set.from_pairs(["a=1"]), Pick(paths=["a[x]"])])

    with pytest.raises(PipelineStepError) as excinfo:
        pipeline.apply({})

    assert excinfo.value.index == 1
    assert excinfo.value.description == "pick(a[x])"
    assert "pipeline step 1 (pick(a[x])) failed" in str(excinfo.value)


def test_pipeline_describe_joins_operations() -> None:
    pipeline = Pipeline()
    pipeline.append(Where.from_pairs(["a=1"]), Delete(paths=["b"]))

    assert pipeline.describe() == "where: a=1 | delete(b)"


def test_build_pipeline_orders_where_pick_set_delete() -> None:
    config = FlowConfig(
        delete_paths=("secret",),
        set_pairs=("seen=true",),
        pick_paths=("user",),
        where_pairs=("active=true",),
    )

    pipeline = build_pipeline(config)

    assert [type(op) for op in pipeline.ops] == [Where, Pick, Set, Delete]
    doc = {"active": True, "user": {"name": "a", "secret": "s"}}
    assert pipeline.apply(doc) == {"name": "a", "seen": True}
    assert pipeline.apply({"active": False, "user": {}}) is FILTERED


def test_build_pipeline_without_options_is_empty() -> None:
    assert build_pipeline(FlowConfig()).empty


def test_build_pipeline_passes_hierarchy_flag() -> None:
    config = FlowConfig(pick_paths=("a.b",), preserve_hierarchy=True)

    assert build_pipeline(config).apply({"a": {"b": 1, "c": 2}}) == {"a": {"b": 1}}


class _Broken:
    def apply(self, document):
        raise TypeError("boom")

    def describe(self) -> str:
        return "broken"


def test_pipeline_wraps_any_operation_error() -> None:
    with pytest.raises(PipelineStepError) as excinfo:
        Pipeline([Set.from_pairs(["a=1"]), _Broken()]).apply({})

    assert excinfo.value.index == 1
    assert isinstance(excinfo.value.__cause__, TypeError)
    assert str(excinfo.value) == "pipeline step 1 (broken) failed: boom"


@pytest.mark.parametrize(
    "op",
    [
        Pick(paths=["name"]),
        Pick(paths=["name"], preserve_hierarchy=True),
        Set.from_pairs(["seen=true"]),
        Delete(paths=["name"]),
        Where.from_pairs([]),
    ],
)
def test_operations_pass_filtered_marker_through(op) -> None:
    assert op.apply(FILTERED) is FILTERED
