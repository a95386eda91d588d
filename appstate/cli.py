"""Inspect and reset persisted state from the command line.

Usage:
    # Where does the artifact live?
    python -m appstate path mypackage.config:MyConfiguration

    # Print the persisted content
    python -m appstate show mypackage.config:MyConfiguration

    # Load it, creating the default file when missing
    python -m appstate init mypackage.config:MyConfiguration

    # Overwrite it with the default value
    python -m appstate reset mypackage.config:MyConfiguration
"""

from __future__ import annotations

import argparse
import importlib
import sys
from typing import List, Optional

from appstate.exceptions import AppStateError
from appstate.logger import configure_logging, get_logger
from appstate.store import codec_of, load, load_or_default, path, save, to_document

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def resolve_target(spec: str) -> type:
    """Import ``module:ClassName`` and return the class."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Target must look like 'module:ClassName', got {spec!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import {module_name}: {e}") from e

    target = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"{module_name} has no attribute {attr!r}") from e

    if not isinstance(target, type):
        raise ValueError(f"{spec} is not a class")
    try:
        codec_of(target)
    except TypeError as e:
        raise ValueError(str(e)) from e
    return target


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="appstate",
        description="Inspect and reset persisted application state",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: APPSTATE_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "command",
        choices=["path", "show", "init", "reset"],
        help="Operation to run",
    )
    parser.add_argument(
        "target",
        help="Persistable class as module:ClassName",
    )
    return parser.parse_args(argv)


def run(command: str, cls: type) -> int:
    if command == "path":
        print(path(cls))
    elif command == "show":
        value = load(cls)
        sys.stdout.write(codec_of(cls).encode(to_document(value)))
    elif command == "init":
        result = load_or_default(cls)
        if result.is_default:
            print(f"Created default {cls.__qualname__} at {result.path}")
        else:
            print(f"Loaded {cls.__qualname__} from {result.path}")
    elif command == "reset":
        written = save(cls())
        print(f"Reset {cls.__qualname__} at {written}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        # APPSTATE_LOG_LEVEL is not checked by argparse
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"error: invalid log level: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        cls = resolve_target(args.target)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        return run(args.command, cls)
    except AppStateError as e:
        logger.debug(f"{args.command} failed for {args.target}: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
