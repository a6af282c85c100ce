"""Command-line interface for bomb."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import bomb
from bomb.signatures import MAX_SIGNATURE_LENGTH
from bomb.stripper import decode_raw, find_signature, trim_bytes

logger = logging.getLogger(__name__)

_PROG = "bombtrim"


def _write_stdout(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def _report(name: str, data: bytes, minimal: bool) -> bool:
    sig = find_signature(decode_raw(data[:MAX_SIGNATURE_LENGTH]))
    if sig is None:
        logger.debug("%s: no byte-order mark", name)
        return False
    if minimal:
        print(name)
    else:
        print(f"{name}: {sig.family.value}")
    return True


def _rewrite(path: Path) -> None:
    data = path.read_bytes()
    trimmed = trim_bytes(data)
    if len(trimmed) == len(data):
        logger.debug("%s: no byte-order mark", path)
        return
    path.write_bytes(trimmed)
    print(f"{path}: removed {len(data) - len(trimmed)} byte-order mark bytes")


def main(argv: list[str] | None = None) -> int:
    """Run the ``bombtrim`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: Exit status: ``0`` on success, ``1`` if ``--check`` found a
        byte-order mark, ``2`` if any file could not be read or written.
    """
    parser = argparse.ArgumentParser(
        prog=_PROG, description="Remove leading byte-order marks from files."
    )
    parser.add_argument("files", nargs="*", help="Files to process (default: stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Report files that start with a byte-order mark; exit 1 if any do",
    )
    mode.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="Rewrite files without their byte-order mark",
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="With --check, output only the file names",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"{_PROG} {bomb.__version__}"
    )

    args = parser.parse_args(argv)

    if args.in_place and not args.files:
        parser.error("--in-place requires at least one file")
    if args.minimal and not args.check:
        parser.error("--minimal requires --check")

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("bomb").setLevel(level)

    if not args.files:
        if args.check:
            head = sys.stdin.buffer.read(MAX_SIGNATURE_LENGTH)
            return 1 if _report("stdin", head, args.minimal) else 0
        _write_stdout(trim_bytes(sys.stdin.buffer.read()))
        return 0

    found = False
    failed = False
    for filepath in args.files:
        path = Path(filepath)
        try:
            if args.in_place:
                _rewrite(path)
            elif args.check:
                with path.open("rb") as f:
                    head = f.read(MAX_SIGNATURE_LENGTH)
                found = _report(filepath, head, args.minimal) or found
            else:
                _write_stdout(trim_bytes(path.read_bytes()))
        except OSError as e:
            print(f"{_PROG}: {filepath}: {e}", file=sys.stderr)
            failed = True

    if failed:
        return 2
    return 1 if found else 0


if __name__ == "__main__":
    sys.exit(main())
