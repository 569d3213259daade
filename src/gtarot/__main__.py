"""CLI entry point for gtarot."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gtarot.asset_store import open_asset_store
from gtarot.card_request import CardRequest, parse_csv
from gtarot.compositor import DEFAULT_SPACING
from gtarot.config import DEFAULT_OUTPUT, load_config
from gtarot.errors import EmptyInputError, GTarotError
from gtarot.spread import build_spread, list_cards

console = Console()
error_console = Console(stderr=True)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

USAGE_EXAMPLES = """\
Usage:
  gtarot -c strength,!hermit,5_of_swords -o spread.png
  gtarot -y spread.yaml
  gtarot --list"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtarot",
        description="gtarot – Lay out tarot cards side by side in one PNG image",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-y", "--yaml",
        type=str,
        default=None,
        help="Path to YAML file describing cards and output.",
    )
    source.add_argument(
        "-c", "--cards",
        type=str,
        default=None,
        help="Comma-separated list of cards, '!' marks a reversed card (e.g. strength,!hermit,5_of_swords).",
    )
    source.add_argument(
        "--list",
        action="store_true",
        help="List all available card names.",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help=f"Output PNG filename (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--cards-dir",
        type=str,
        default=None,
        help="Directory or ZIP archive with card images (default: bundled cards).",
    )
    parser.add_argument(
        "--spacing",
        type=int,
        default=None,
        help=f"Gap between cards in pixels (default: {DEFAULT_SPACING}).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging.",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("gtarot")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=error_console, show_path=False))
        package_logger.propagate = False


def print_usage(parser: argparse.ArgumentParser) -> None:
    """Print usage examples followed by the full option help."""
    console.print(USAGE_EXAMPLES, markup=False, highlight=False)
    console.print()
    console.print(parser.format_help(), markup=False, highlight=False)


def run_list(args: argparse.Namespace) -> int:
    """Run the --list command."""
    store = open_asset_store(args.cards_dir)
    list_cards(store)
    return EXIT_OK


def run_spread(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Build a spread from --yaml or --cards."""
    output = args.output
    spacing = args.spacing
    requests: List[CardRequest] = []

    if args.yaml is not None:
        config = load_config(args.yaml)
        requests = config.card_requests()
        if config.output:
            output = config.output
        if spacing is None:
            spacing = config.spacing
    elif args.cards is not None:
        requests = parse_csv(args.cards)

    # If nothing was parsed, show usage
    if not requests:
        print_usage(parser)
        return EXIT_USAGE

    if spacing is None:
        spacing = DEFAULT_SPACING
    if spacing < 0:
        parser.error(f"--spacing must be >= 0, got {spacing}")

    store = open_asset_store(args.cards_dir)
    build_spread(
        requests=requests,
        output_path=Path(output),
        store=store,
        spacing=spacing,
    )
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.list:
            return run_list(args)
        return run_spread(args, parser)
    except EmptyInputError:
        print_usage(parser)
        return EXIT_USAGE
    except GTarotError as e:
        error_console.print(f"[red]✘[/red] {type(e).__name__}: {escape(str(e))}", highlight=False, soft_wrap=True)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
