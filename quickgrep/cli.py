"""Command-line entry point."""

from __future__ import annotations

import sys
import time

from quickgrep.engine import GrepEngine
from quickgrep.options import UsageError, parse_args, usage_text

__all__ = ["main"]

PROGRAM_NAME = "quickgrep"


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv``, run the search and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args, PROGRAM_NAME)
        started = time.perf_counter()
        engine = GrepEngine(options)
        status = engine.search(sys.stdout)
        elapsed = time.perf_counter() - started
        print(f"Search completed in {elapsed} seconds.")
        return status
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    except UsageError as exc:
        if exc.message:
            print(f"Error: {exc.message}", file=sys.stderr)
        if exc.show_usage:
            print(usage_text(PROGRAM_NAME), end="")
        return 1
    except Exception as exc:  # noqa: BLE001 - report any failure as an exit status
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())