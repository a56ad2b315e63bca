# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the abi2ts command-line interface."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from abi2ts.compiler.emitter import transform
from abi2ts.compiler.errors import MalformedDocumentError, TransformError
from abi2ts.compiler.loader import load_document
from abi2ts.compiler.semantic_analysis import analyze
from abi2ts.config.settings import (
    SETTINGS_FILE_NAME,
    GeneratorSettings,
    SettingsError,
    load_settings,
    select_naming_convention,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the abi2ts CLI."""
    parser = _build_parser()
    args = parser.parse_args()
    sys.exit(_run(args))


# ################
# Implementation
# ################


def _package_version() -> str:
    try:
        return version("abi2ts")
    except PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abi2ts",
        description="Generate TypeScript type declarations from a contract ABI.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "-i",
        "--input",
        help="Read ABI JSON from file instead of stdin.",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        help="Prefix to add to every type.",
    )
    parser.add_argument(
        "-n",
        "--indent",
        type=int,
        default=None,
        help="How many spaces or tabs to indent with (default: 4).",
    )
    parser.add_argument(
        "-t",
        "--use-tabs",
        action="store_true",
        help="Use tabs instead of spaces for indentation.",
    )
    parser.add_argument(
        "-e",
        "--export",
        action="store_true",
        help="Whether to export interfaces and types.",
    )
    parser.add_argument(
        "--config",
        help=f"Settings file to read defaults from (default: {SETTINGS_FILE_NAME} in the current directory).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not report warnings about the ABI.",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-a",
        "--pascal-case",
        action="store_true",
        help="Format types using PascalCase (default).",
    )
    group.add_argument(
        "-c",
        "--camel-case",
        action="store_true",
        help="Format types using camelCase.",
    )
    group.add_argument(
        "-s",
        "--snake-case",
        action="store_true",
        help="Format types using snake_case.",
    )

    parser.add_argument(
        "output",
        nargs="?",
        help="Output file to write to instead of stdout.",
    )
    return parser


def _run(args: argparse.Namespace) -> int:
    """Generate declarations for the parsed arguments and return the exit status."""
    try:
        settings = _load_settings(args)
        config = settings.to_config()
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        data = Path(args.input).read_bytes() if args.input else sys.stdin.buffer.read()
    except OSError as exc:
        print(f"Error: cannot read input: {exc}", file=sys.stderr)
        return 1

    try:
        document = load_document(data)
    except MalformedDocumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        for warning in analyze(document):
            print(f"Warning: {warning.message}", file=sys.stderr)

    try:
        lines = transform(document, config)
    except TransformError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    text = "".join(line + "\n" for line in lines)
    if args.output:
        try:
            Path(args.output).write_text(text, encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot write output: {exc}", file=sys.stderr)
            return 1
    else:
        # Output is always UTF-8, like the input, whatever the locale says.
        sys.stdout.flush()
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()
    return 0


def _load_settings(args: argparse.Namespace) -> GeneratorSettings:
    """Load the settings file, if any, and apply command-line overrides."""
    if args.config:
        settings = load_settings(Path(args.config))
    else:
        default_file = Path.cwd() / SETTINGS_FILE_NAME
        settings = load_settings(default_file) if default_file.exists() else GeneratorSettings()

    if args.pascal_case or args.camel_case or args.snake_case:
        settings.naming_convention = select_naming_convention(
            pascal_case=args.pascal_case,
            camel_case=args.camel_case,
            snake_case=args.snake_case,
        )
    if args.prefix is not None:
        settings.prefix = args.prefix
    if args.indent is not None:
        settings.indent_width = args.indent
    if args.use_tabs:
        settings.use_tabs = True
    if args.export:
        settings.export = True
    return settings
