import io
import json
import sys

import pytest

from flow.cli import build_parser, config_from_args, main


def test_parser_collects_repeatable_flags() -> None:
    args = build_parser().parse_args(
        ["--pick", "a", "--pick", "b.c", "--where", "x=1", "--set", "y=2", "--compact"]
    )
    config = config_from_args(args)

    assert config.pick_paths == ("a", "b.c")
    assert config.where_pairs == ("x=1",)
    assert config.set_pairs == ("y=2",)
    assert config.delete_paths == ()
    assert config.compact is True
    assert config.preserve_hierarchy is False


def test_main_transforms_file_to_file(tmp_path) -> None:
    source = tmp_path / "in.json"
    target = tmp_path / "out.json"
    source.write_text('{"user": {"name": "alice", "age": 30}}')

    code = main(
        [
            "--in",
            str(source),
            "--out",
            str(target),
            "--pick",
            "user.name",
            "--pick",
            "user.age",
            "--compact",
        ]
    )

    assert code == 0
    assert json.loads(target.read_text()) == {"name": "alice", "age": 30}


def test_main_reads_stdin_and_writes_stdout(monkeypatch, capsys) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"name: a\n---\nname: b\n"))
    monkeypatch.setattr(sys, "stdin", stdin)

    assert main(["--where", "name=b", "--compact", "--no-color"]) == 0
    assert capsys.readouterr().out == '{"name":"b"}\n'


def test_main_processes_directories(tmp_path, capsys) -> None:
    (tmp_path / "a.json").write_text('{"id": 1}')

    assert main(["--dir", str(tmp_path), "--pick", "id", "--compact"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "_file": str(tmp_path / "a.json"),
        "_row": 1,
        "data": 1,
    }


@pytest.mark.parametrize(
    "argv",
    [
        ["--in", "does-not-exist.json"],
        ["--to", "avro"],
        ["--from", "xml"],
        ["--set", "novalue"],
        ["--where", "items[0=x"],
    ],
)
def test_main_reports_errors_with_exit_code(argv, tmp_path, capsys) -> None:
    source = tmp_path / "in.json"
    source.write_text("{}")
    if "--in" not in argv:
        argv = ["--in", str(source), *argv]

    assert main(argv) == 1
    assert capsys.readouterr().err.startswith("flow: ")


@pytest.mark.parametrize(
    ("extra", "expected"),
    [
        (["--pick", "name"], '"Bob"\n'),
        (["--set", "seen=true"], '{"name":"Bob","seen":true}\n'),
        (["--delete", "name"], "{}\n"),
    ],
)
def test_main_drops_filtered_documents_before_later_operations(
    extra, expected, tmp_path, capsys
) -> None:
    source = tmp_path / "in.json"
    source.write_text('{"name":"Alice"}\n{"name":"Bob"}\n')

    code = main(["--in", str(source), "--where", "name=Bob", "--compact", *extra])

    assert code == 0
    assert capsys.readouterr().out == expected


def test_main_reports_invalid_utf8_input(tmp_path, capsys) -> None:
    source = tmp_path / "bad.json"
    source.write_bytes(b'{"a": "\xff"}')

    assert main(["--in", str(source)]) == 1
    assert capsys.readouterr().err.startswith("flow: ")


def test_main_keeps_processing_directory_after_bad_encoding(
    tmp_path, capsys
) -> None:
    (tmp_path / "a.json").write_bytes(b'{"a": "\xff"}')
    (tmp_path / "b.json").write_text('{"id": 2}')

    assert main(["--dir", str(tmp_path), "--pick", "id", "--compact"]) == 1
    captured = capsys.readouterr()
    assert json.loads(captured.out)["data"] == 2
    assert "1 error(s)" in captured.err
