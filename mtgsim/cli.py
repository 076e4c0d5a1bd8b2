"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

TITLE = "Magic: The Gathering Simulator"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog="mtgsim", description=TITLE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and print the simulator's banner."""
    parser = _build_parser()
    parser.parse_args(None if argv is None else list(argv))
    print(TITLE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())