#!/usr/bin/env python3
# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, a CLI smoke run, and build."""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=abi2ts", "--cov-report=term-missing"]),
    ("Smoke run", ["uv", "run", "abi2ts", "-q", "-i", "tests/data/eosio.token.abi", "-e"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run abi2ts CI checks locally.")
    parser.add_argument(
        "steps",
        nargs="*",
        metavar="STEP",
        help="Only run steps whose name contains one of these words (case-insensitive).",
    )
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step.")
    args = parser.parse_args()

    selected = _select_steps(args.steps)
    if not selected:
        print(chalk.red(f"No CI step matches: {', '.join(args.steps)}"))
        return 1

    results: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        sep = chalk.blue("=" * 60)
        print(f"\n{sep}")
        print(chalk.blue(name))
        print(sep)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        elapsed = time.monotonic() - start
        results.append((name, proc.returncode == 0, elapsed))
        if args.fail_fast and proc.returncode != 0:
            break

    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _select_steps(filters: list[str]) -> list[tuple[str, list[str]]]:
    if not filters:
        return list(STEPS)
    words = [f.lower() for f in filters]
    return [(name, cmd) for name, cmd in STEPS if any(w in name.lower() for w in words)]


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for name, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> Path:
    return Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main())
