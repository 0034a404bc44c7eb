"""Command-line interface for docsnap."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from artifacts.write import gen_project_docs, gen_python_docs
from contract.validation import validate_snapshot
from project.config import ConfigError


def _add_out_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--out-dir",
        default=None,
        help="Directory for the snapshot file (default: current directory)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docsnap")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Also log debug messages"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Snapshot a project described by pyproject.toml"
    )
    generate_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root (default: .)",
    )
    _add_out_dir(generate_parser)

    python_parser = subparsers.add_parser(
        "python", help="Snapshot the Python standard library"
    )
    python_parser.add_argument("cpython_dir", help="Path to a CPython checkout")
    _add_out_dir(python_parser)

    validate_parser = subparsers.add_parser("validate", help="Validate a snapshot")
    validate_parser.add_argument("snapshot", help="Path to a .json.gz snapshot")

    return parser


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def _resolve_output_dir(out_dir: str | None) -> Path | None:
    if out_dir is None:
        return None
    return Path(out_dir).expanduser().resolve()


def _handle_generate(root: Path, out_dir: str | None) -> int:
    try:
        gen_project_docs(root, out_dir=_resolve_output_dir(out_dir))
    except ConfigError as exc:
        sys.stderr.write(f"config: {exc}\n")
        return 2
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


def _handle_python(cpython_dir: Path, out_dir: str | None) -> int:
    if not (cpython_dir / "Lib").is_dir():
        sys.stderr.write(f"error: {cpython_dir} has no Lib directory\n")
        return 2
    try:
        gen_python_docs(cpython_dir, out_dir=_resolve_output_dir(out_dir))
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


def _handle_validate(snapshot: Path) -> int:
    result = validate_snapshot(snapshot)
    for warning in result.warnings:
        sys.stderr.write(f"{warning.location()}: warning: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose, quiet=args.quiet)

    if args.command == "generate":
        return _handle_generate(Path(args.root).expanduser().resolve(), args.out_dir)

    if args.command == "python":
        return _handle_python(
            Path(args.cpython_dir).expanduser().resolve(), args.out_dir
        )

    if args.command == "validate":
        return _handle_validate(Path(args.snapshot).expanduser())

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
