"""
Demonstrate an exact split from the command line.

"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from exact_split.library.allocations import Allocation, allocate
from exact_split.library.config import (
    AllocatorConfig,
    LoggingConfig,
    SplitConfig,
    configure_logging,
    load_config,
)
from exact_split.library.exceptions import ExactSplitError
from exact_split.library.utils import ScaledAmount

logger = logging.getLogger(__name__)

DEFAULT_AMOUNT = "100.01"
DEFAULT_RECIPIENTS = 4


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the demonstration CLI."""
    parser = argparse.ArgumentParser(
        prog="exact-split",
        description="Split an amount among recipients without losing a minimal unit",
    )
    amount_group = parser.add_mutually_exclusive_group()
    amount_group.add_argument(
        "--amount",
        help=f"Amount as a decimal string (default: {DEFAULT_AMOUNT})",
    )
    amount_group.add_argument(
        "--mantissa",
        type=int,
        help="Amount as raw minimal units (use with --scale)",
    )
    parser.add_argument(
        "--scale",
        type=int,
        help="Scale of --mantissa (default: 0)",
    )
    parser.add_argument(
        "--recipients",
        type=int,
        default=DEFAULT_RECIPIENTS,
        help=f"Number of recipients (default: {DEFAULT_RECIPIENTS})",
    )
    parser.add_argument(
        "--output-scale",
        type=int,
        help="Scale of the shares (default: the amount's scale)",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--log-level",
        help="Log level, overrides the configuration file",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Thread pool size, overrides the configuration file",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> SplitConfig:
    """Merge the configuration file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else SplitConfig()

    if args.workers is not None:
        allocator = config.allocator.model_dump()
        allocator["max_workers"] = args.workers
        config = config.model_copy(
            update={"allocator": AllocatorConfig.model_validate(allocator)}
        )
    if args.log_level is not None:
        logging_config = config.logging.model_dump()
        logging_config["level"] = args.log_level
        config = config.model_copy(
            update={"logging": LoggingConfig.model_validate(logging_config)}
        )
    return config


def format_allocation(allocation: Allocation) -> str:
    """Render an allocation as the summary line plus one line per recipient."""
    shares = ", ".join(str(share) for share in allocation)
    lines = [
        f"Splitting {allocation.amount} among {allocation.recipients} recipients "
        f"at scale {allocation.output_scale} yields: [{shares}]"
    ]
    lines.extend(f"Recipient {i}: {share}" for i, share in enumerate(allocation, 1))
    return "\n".join(lines)


def main(
    argv: Sequence[str] | None = None,
    logging_config: LoggingConfig | None = None,
) -> int:
    """
    Command-line interface for splitting an amount.

    Usage
    -----
    Split 100.01 among 4 recipients at scale 2::

        exact-split --amount 100.01 --recipients 4

    Split raw minimal units and reinterpret them at another scale::

        exact-split --mantissa 1234567 --scale 0 --recipients 1 --output-scale 2

    Parameters
    ----------
    argv
        Arguments to parse (default: ``sys.argv[1:]``)
    logging_config
        Logging settings supplied by the caller. Takes precedence over the
        configuration file and ``--log-level``.

    Returns
    -------
    int
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.scale is not None and args.mantissa is None:
        parser.error("--scale can only be used with --mantissa")

    try:
        config = resolve_config(args)
        configure_logging(logging_config or config.logging)

        if args.mantissa is not None:
            scale = 0 if args.scale is None else args.scale
            amount = ScaledAmount(args.mantissa, scale)
        else:
            amount = ScaledAmount.from_decimal(args.amount or DEFAULT_AMOUNT)
        output_scale = amount.scale if args.output_scale is None else args.output_scale

        logger.info(
            "Splitting %s among %d recipients at scale %d",
            amount,
            args.recipients,
            output_scale,
        )
        allocation = allocate(
            amount, args.recipients, output_scale, config=config.allocator
        )
    except (ExactSplitError, ValueError) as e:
        sep_line = "=" * 80
        print(f"\n{sep_line}", file=sys.stderr)
        print("SPLIT FAILED", file=sys.stderr)
        print(sep_line, file=sys.stderr)
        print(str(e), file=sys.stderr)
        print(f"\n{sep_line}", file=sys.stderr)
        return 1

    print(format_allocation(allocation))
    return 0


if __name__ == "__main__":
    sys.exit(main())
