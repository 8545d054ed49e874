from __future__ import annotations

import argparse
import logging
import os
import sys

from .core.registry import InMemoryRegistry
from .demo import run_demo

LOG_LEVEL_ENV = "STOCKROOM_LOG_LEVEL"


def _resolve_log_level(cli_value: str | None) -> int:
    raw = (cli_value or os.environ.get(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {raw}")
    return level


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="stockroom", description="stockroom: in-memory inventory registry demo")
    p.add_argument("--log-level", default=None, help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    p.add_argument("--check", action="store_true", help="audit index consistency after the session")
    args = p.parse_args(argv)

    try:
        level = _resolve_log_level(args.log_level)
    except ValueError as exc:
        p.error(str(exc))
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    registry = run_demo(InMemoryRegistry())

    if args.check:
        problems = registry.consistency_problems()
        for problem in problems:
            print(f"inconsistent: {problem}", file=sys.stderr)
        return 1 if problems else 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
