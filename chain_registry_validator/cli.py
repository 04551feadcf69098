"""Command line interface of the chain registry validator."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .application.services import ErrorAggregator
from .application.use_cases import ValidateRegistryUseCase
from .config import load_settings
from .const import BINARY_NAME, SETTINGS_FILENAME
from .domain.exceptions import ConfigError, StopValidation, StructuralError
from .domain.value_objects import ValidateTarget

_LOGGER = logging.getLogger(__name__)

_TIER_FLAGS = {
    ValidateTarget.MAINNET: "validate mainnet records only",
    ValidateTarget.TESTNET: "validate testnet records only",
    ValidateTarget.DEVNET: "validate devnet records only",
    ValidateTarget.INTERNAL_DEVNET: "validate internal-devnet records only",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``validate`` subcommand."""
    parser = argparse.ArgumentParser(
        prog=BINARY_NAME,
        description="Validate a chain registry checkout",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    validate = subparsers.add_parser(
        "validate",
        aliases=["v"],
        help="Validate chain-registry",
        description="Validate every chain record of the selected tiers",
    )
    validate.add_argument("repo_dir", metavar="repo-dir", help="chain-registry checkout")
    for target, help_text in _TIER_FLAGS.items():
        validate.add_argument(
            f"--{target.value}",
            dest="targets",
            action="append_const",
            const=target,
            help=help_text,
        )
    validate.add_argument(
        "-e",
        "--stop-on-error",
        action="store_true",
        help="stop on first error",
    )
    validate.add_argument(
        "--addition-chain-types-allowed",
        dest="additional_chain_types",
        action="append",
        default=[],
        metavar="TYPE",
        help="allow additional chain types (repeatable)",
    )
    validate.add_argument(
        "--config",
        metavar="FILE",
        help=f"settings file (default: <repo-dir>/{SETTINGS_FILENAME} if present)",
    )
    validate.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    validate.set_defaults(handler=_cmd_validate)
    return parser


def _cmd_validate(args: argparse.Namespace) -> int:
    """Run the ``validate`` subcommand and return the exit code."""
    try:
        settings = load_settings(
            args.repo_dir,
            config_path=args.config,
            targets=args.targets,
            stop_on_error=args.stop_on_error,
            additional_chain_types=args.additional_chain_types,
        )
    except ConfigError as err:
        print("ERR:", err, file=sys.stderr)
        return 1

    aggregator = ErrorAggregator(stop_on_first=settings.stop_on_error)
    use_case = ValidateRegistryUseCase(settings, aggregator)

    try:
        result = use_case.execute(args.repo_dir)
    except StructuralError as err:
        print("ERR:", err, file=sys.stderr)
        return 1
    except StopValidation as stop:
        _LOGGER.debug("Stopped on first violation: %s", stop.violation)
        return 1

    if result.aborted:
        return 1
    if aggregator.has_violations:
        aggregator.print_summary()
        return 1

    print("Passed!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``chain-registry-validator`` command.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code (0 passed, 1 failed; argparse exits 2 on usage errors)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    return args.handler(args)
