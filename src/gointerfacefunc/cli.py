from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from pathlib import Path

from .errors import GoInterfaceFuncError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gointerfacefunc",
        description=(
            "Generate a function type implementing a single-method Go interface, "
            "printed to stdout."
        ),
    )
    parser.add_argument("source", help="Directory of the Go package to scan (or a snapshot with --snapshot).")
    parser.add_argument("interface", help="Name of the interface, e.g. Handler.")
    parser.add_argument(
        "--snapshot",
        action="store_true",
        help="Treat SOURCE as a program snapshot written by --save-snapshot instead of a directory.",
    )
    parser.add_argument(
        "--save-snapshot",
        default=None,
        metavar="PATH",
        help="Also write the scanned program to PATH as a MessagePack snapshot.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from .generate import generate
    from .printer import render_decls

    try:
        if args.snapshot:
            from .snapshot import read_snapshot

            program = read_snapshot(Path(args.source))
        else:
            from .goscan import scan_program

            program = scan_program(source_dir=Path(args.source))

        if args.save_snapshot:
            from .snapshot import write_snapshot

            write_snapshot(program, Path(args.save_snapshot))

        decls = generate(args.source, args.interface, program)
    except GoInterfaceFuncError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(render_decls(decls))
    return 0


def _version() -> str:
    try:
        return importlib.metadata.version("gointerfacefunc")
    except importlib.metadata.PackageNotFoundError:
        # Running from a source checkout without installing.
        return "0.0.0"
