"""CLI entry point and argument parsing."""
from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from pathlib import Path

import msgpack

from fmod_headers.exceptions import HeaderError
from fmod_headers.internals import errors as er
from fmod_headers.internals.report import Reporter


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_output(document: dict, fmt: str, out: str | None) -> None:
    if fmt == "msgpack":
        Path(out).write_bytes(msgpack.packb(document, use_bin_type=True))
        return
    text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    if out:
        Path(out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def dump_values(source: str) -> None:
    """Print the converted value of every error string mapping."""
    from fmod_headers.grammars import Rule
    from fmod_headers.parsers.fmod_errors import ARRAYS, parse_tree
    from fmod_headers.repr import JsonConverter

    converter = JsonConverter(ARRAYS)
    for declaration in parse_tree(source).find_data(Rule.ERROR_STRING_MAPPING.value):
        print(json.dumps(converter.convert(declaration), indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    """Extract the error string table of a header.

    Returns:
        0 on success, 1 on success with warnings, 2 on errors.
    """
    from fmod_headers.parsers.fmod_errors import parse, parse_tree

    ap = argparse.ArgumentParser(prog="fmod-headers",
                                 description="Extract the error string table from fmod_errors.h")
    ap.add_argument("header", nargs='?', help="Path to the header file ('-' for stdin)")
    ap.add_argument("--version", action="store_true", help="Show version and exit")
    ap.add_argument("--format", choices=["json", "msgpack"], default="json",
                    help="Output format (default: json)")
    ap.add_argument("-o", "--out", metavar="OUT", help="Write output to OUT instead of stdout")
    ap.add_argument("--dump-parse", action="store_true", help="Print raw Lark tree")
    ap.add_argument("--dump-value", action="store_true",
                    help="Print the converted value of each error string mapping")
    ap.add_argument("--no-warnings", action="store_true", help="Do not report warnings")
    args = ap.parse_args(argv)

    if args.version:
        from fmod_headers.internals.version import version_line
        print(version_line())
        return 0

    if args.header is None:
        ap.error("the following arguments are required: header")

    filename = "<stdin>" if args.header == "-" else args.header
    reporter = Reporter(filename=filename)

    if args.format == "msgpack" and not args.out:
        er.emit(reporter, er.ERR.HE3002, None)
        reporter.print()
        return 2

    try:
        source = read_source(args.header)
    except (OSError, UnicodeDecodeError) as e:
        er.emit(reporter, er.ERR.HE3001, None, path=args.header, reason=e)
        reporter.print()
        return 2
    reporter.source = source

    try:
        if args.dump_parse:
            parse_tree(source, dump_parse=True)
        if args.dump_value:
            dump_values(source)
        header = parse(source, reporter=None if args.no_warnings else reporter)
    except HeaderError as e:
        reporter.error(e.code, e.message, e.span)
        reporter.print()
        return 2

    write_output(dataclasses.asdict(header.mapping), args.format, args.out)

    reporter.print()
    return 1 if reporter.has_warnings else 0
