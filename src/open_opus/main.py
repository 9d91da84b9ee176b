"""CLI entry point for open-opus."""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

from pydantic import ValidationError

from open_opus.cli.commands import configure_logging, dispatch, parse_args
from open_opus.cli.display import show_error
from open_opus.config import load_config


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args, load config, run one command."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except ValidationError as exc:
        show_error("Invalid configuration", str(exc))
        sys.exit(2)
    configure_logging(config.logging.level, verbose=args.verbose)

    try:
        code = asyncio.run(dispatch(args, config))
    except KeyboardInterrupt:
        print("\nBye!")
        sys.exit(0)
    sys.exit(code)
