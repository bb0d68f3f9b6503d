#!/usr/bin/env python3
"""sha3fics CLI: wide SHA-3 family digests written to sorted manifests.

This is the installable CLI entrypoint (console_scripts).

Usage:
- sha3fics README.md      → README.md.sha3 next to the file
- sha3fics 'logs/*.txt'   → logs/[any].txt.sha3
- sha3fics -r ./data      → data.sha3 next to the directory (full subtree)

Exit codes:
- 0: success (including runs where some files were skipped with a warning)
- 1: usage error (missing/blank target, bad configuration)
- 2: target does not exist / is not a wildcard, or enumeration failed
- 3: unexpected fatal error
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sha3fics import package_version
from sha3fics.core.classify import TargetKind, classify_target
from sha3fics.core.engine import hash_many
from sha3fics.core.enumerator import enumerate_scope, resolve_scope
from sha3fics.core.errors import EXIT_OK, ErrorKind, Failure, UsageError, exit_code_for
from sha3fics.core.hash import DIGEST_BITS
from sha3fics.core.manifest import write_manifest
from sha3fics.core.output_path import output_path_for
from sha3fics.core.settings import ENV_CHUNK_SIZE, HashSettings


USAGE_EXAMPLES = """\
Examples:
  sha3fics README.md
  sha3fics 'src/*.py'
  sha3fics -r ./data
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sha3fics",
        description=f"SHA3-family {DIGEST_BITS}-bit hasher for a file, a wildcard pattern, or a directory",
        epilog=USAGE_EXAMPLES + f"\nEnvironment:\n  {ENV_CHUNK_SIZE}  read chunk size in bytes (default: 1048576)\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Include files in all subdirectories (directory targets only)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    parser.add_argument("target", nargs="?", help="<file|wildcard|directory>")
    return parser


FLAG_TOKENS = frozenset({"-r", "--recursive", "-h", "--help", "--version"})


def split_at_target(argv: list[str]) -> list[str]:
    """Keep leading flags and the first other token; drop everything after it.

    Only known flags are flags, so a file named like ``-notes.txt`` is still a
    target. The target is passed after ``--`` so argparse never reads it as an option.
    """

    kept: list[str] = []
    for a in argv:
        if a in FLAG_TOKENS:
            kept.append(a)
            continue
        kept.extend(["--", a])
        break
    return kept


def _report(failure: Failure) -> int:
    print(f"error: {failure.message}", file=sys.stderr)
    return exit_code_for(failure.kind)


def run(target: str, *, recursive: bool, settings: HashSettings) -> int:
    classified = classify_target(target)
    if isinstance(classified, Failure):
        return _report(classified)

    if recursive and classified.kind is TargetKind.FILE:
        print("warning: -r is ignored when hashing a single file.", file=sys.stderr)
    elif recursive and classified.kind is TargetKind.WILDCARD:
        print("warning: -r is ignored when using a wildcard pattern.", file=sys.stderr)

    scope = resolve_scope(classified)
    out_path: Path = output_path_for(scope, suffix=settings.suffix)

    enumerated = enumerate_scope(scope, recursive=recursive, exclude=out_path)
    if isinstance(enumerated, Failure):
        return _report(enumerated)

    result = hash_many(enumerated.paths, enumerated.base_dir, settings=settings)
    count = write_manifest(out_path, result.entries)
    if result.skipped:
        print(f"warning: {len(result.skipped)} file(s) skipped, see warnings above", file=sys.stderr)

    if scope.kind is TargetKind.FILE and count == 1:
        print(f"1 file hashed -> {out_path}")
    else:
        print(f"{count} file(s) hashed -> {out_path}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    try:
        args = parser.parse_args(split_at_target(raw))
        settings = HashSettings.from_env()
    except UsageError as e:
        print(f"error: {e}\n", file=sys.stderr)
        parser.print_help()
        return exit_code_for(ErrorKind.USAGE)

    target = args.target
    if target is None or not str(target).strip():
        print("error: missing <file|wildcard|directory> argument\n", file=sys.stderr)
        parser.print_help()
        return exit_code_for(ErrorKind.USAGE)

    try:
        return run(str(target), recursive=bool(args.recursive), settings=settings)
    except Exception as e:
        print(f"fatal: {e}", file=sys.stderr)
        return exit_code_for(ErrorKind.FATAL)


if __name__ == "__main__":
    sys.exit(main())
