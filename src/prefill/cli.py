"""Command-line interface for building prefilled form URLs.

Usage:

    prefill                     # reads ./form.yaml
    prefill my_form.yaml        # reads another config (YAML or .json)
    prefill --today 2024-01-15  # pin the {today} substitution
    prefill --init              # write a sample config to ./form.yaml

Prints the decoded URL (for reading) and the encoded URL (for sending).
"""

import argparse
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from prefill import __version__
from prefill.config_loader import DEFAULT_CONFIG_PATH, load_config_file, save_config_file
from prefill.examples import build_example_form_spec
from prefill.exceptions import PrefillError
from prefill.url_builder import PrefilledURL, build_from_spec

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def _create_parser(default_config: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefill",
        description="Build a prefilled Google Form URL from a YAML/JSON config.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=default_config,
        help=f"Config file path (default: {default_config})",
    )
    parser.add_argument(
        "--today",
        type=_parse_date,
        default=None,
        help="Date substituted for {today} answers, YYYY-MM-DD (default: current date)",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Write a sample config to the config path and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_output(result: PrefilledURL) -> str:
    return (
        "=== Prefilled form URL ===\n"
        f"Decoded URL:\n{result.decoded}\n\n"
        f"Encoded URL:\n{result.encoded}\n"
    )


def main(argv: Optional[List[str]] = None, default_config: str = DEFAULT_CONFIG_PATH) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = _create_parser(default_config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        if args.init:
            save_config_file(build_example_form_spec(), args.config)
            print(f"Wrote sample config to {args.config}")
            return 0

        spec = load_config_file(args.config)
        today = args.today or date.today()
        result = build_from_spec(spec, today)
    except (PrefillError, OSError) as e:
        logger.debug("Failed to build URL", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
