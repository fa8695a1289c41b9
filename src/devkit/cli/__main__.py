#!/usr/bin/env python3

import logging
import sys
from typing import Any, Callable, Dict, Optional, Sequence

from devkit.core.app import get_context
from devkit.core.constants import PROG_NAME
from devkit.core.dispatcher import Dispatcher

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(config: Dict[str, Any]) -> None:
    """
    Configure the root logger from config['logging']['level'] (name or number).
    A bare value under 'logging' is taken as the level itself.
    """
    section = config.get("logging", {})
    level = section.get("level", "WARNING") if isinstance(section, dict) else section
    if level is None or isinstance(level, bool):
        level = "WARNING"
    if not isinstance(level, int):
        level = logging.getLevelName(str(level).strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None, exit_fn: Callable[[int], Any] = sys.exit):
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        ctx = get_context()  # built once
    except ValueError as e:
        sys.stderr.write(f"{PROG_NAME}: {e}\n")
        return exit_fn(1)

    configure_logging(ctx.config)
    dispatcher = Dispatcher(ctx.commands, sanity_checker=ctx.sanity_checker())
    return exit_fn(dispatcher.run(args))

if __name__ == "__main__":
    main()
