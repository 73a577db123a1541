"""Command-line interface for bomdetect."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

import bomdetect
from bomdetect.classifier import classify_naive, classify_strict
from bomdetect.reader import BOMReader
from bomdetect.signatures import NAIVE_MIN_LENGTH, SKIP_LENGTHS


def _strip(filepath: str | None) -> bool:
    """Copy *filepath* (or stdin) to stdout without its BOM."""
    out = sys.stdout.buffer
    name = "stdin" if filepath is None else filepath
    try:
        if filepath is None:
            reader = BOMReader(sys.stdin.buffer, closefd=False)
        else:
            reader = BOMReader(Path(filepath).open("rb"))
        with reader:
            shutil.copyfileobj(reader, out)
        out.flush()
    except OSError as e:
        print(f"bomdetect: {name}: {e}", file=sys.stderr)
        return False
    return True


def main(argv: list[str] | None = None) -> None:
    """Run the ``bomdetect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Report the Unicode byte order mark of files."
    )
    parser.add_argument("files", nargs="*", help="Files to inspect")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the BOM kind"
    )
    parser.add_argument(
        "--naive",
        action="store_true",
        help="Use plain prefix matching (needs at least 5 bytes)",
    )
    parser.add_argument(
        "--strip",
        action="store_true",
        help="Write the input to stdout with its BOM removed",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"bomdetect {bomdetect.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.strip:
        if len(args.files) > 1:
            parser.error("--strip accepts at most one file")
        if not _strip(args.files[0] if args.files else None):
            sys.exit(1)
        return

    classify = classify_naive if args.naive else classify_strict
    failed = False
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(NAIVE_MIN_LENGTH)
            except OSError as e:
                print(f"bomdetect: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            _report(filepath, classify(data), minimal=args.minimal)
    else:
        data = sys.stdin.buffer.read(NAIVE_MIN_LENGTH)
        _report("stdin", classify(data), minimal=args.minimal)

    if failed:
        sys.exit(1)


def _report(name: str, kind: bomdetect.BOMKind, minimal: bool) -> None:
    if minimal:
        print(kind.name)
    else:
        print(f"{name}: {kind.name} (skip {SKIP_LENGTHS[kind]})")


if __name__ == "__main__":
    main()
