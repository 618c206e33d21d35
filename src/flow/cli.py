from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import FlowConfig
from .errors import FlowError
from .format import register_builtin_formats
from .runner import open_input, open_output, process_directory, run
from .runtime import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flow",
        description="Pick, set, delete and filter fields in JSON, YAML, Avro "
        "and Parquet documents.",
    )
    parser.add_argument(
        "--pick",
        action="append",
        default=[],
        metavar="PATH",
        help="pick a key or path from the input (repeatable)",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="PATH=VALUE",
        help="set a path to a value, parsed as JSON when possible (repeatable)",
    )
    parser.add_argument(
        "--delete",
        action="append",
        default=[],
        metavar="PATH",
        help="delete a key or path from the input (repeatable)",
    )
    parser.add_argument(
        "--where",
        action="append",
        default=[],
        metavar="PATH=VALUE",
        help="keep only documents where PATH equals VALUE (repeatable, AND-ed)",
    )
    parser.add_argument("--in", dest="in_file", help="input file (default: stdin)")
    parser.add_argument("--out", dest="out_file", help="output file (default: stdout)")
    parser.add_argument(
        "--dir", dest="input_dir", help="process every matching file in a directory"
    )
    parser.add_argument(
        "--from",
        dest="from_format",
        help="input format: json, yaml, avro or parquet "
        "(default: from the file extension, else detected)",
    )
    parser.add_argument(
        "--to", dest="to_format", help="output format: json or yaml (default: json)"
    )
    parser.add_argument(
        "--compact", action="store_true", help="minify instead of pretty-printing"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable colorized output"
    )
    parser.add_argument(
        "--preserve-hierarchy",
        action="store_true",
        help="keep the full path structure in pick output",
    )
    parser.add_argument("--log-level", default=None, help="logging level")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> FlowConfig:
    return FlowConfig(
        in_file=args.in_file,
        out_file=args.out_file,
        input_dir=args.input_dir,
        pick_paths=tuple(args.pick),
        set_pairs=tuple(args.set),
        delete_paths=tuple(args.delete),
        where_pairs=tuple(args.where),
        from_format=args.from_format,
        to_format=args.to_format,
        compact=args.compact,
        no_color=args.no_color,
        preserve_hierarchy=args.preserve_hierarchy,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    register_builtin_formats()
    config = config_from_args(args)

    try:
        with open_output(config.out_file) as out_stream:
            if config.input_dir:
                process_directory(config, out_stream)
            else:
                with open_input(config.in_file) as in_stream:
                    run(in_stream, out_stream, config)
    except (FlowError, OSError) as exc:
        print(f"flow: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
