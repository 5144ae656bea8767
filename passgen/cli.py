"""
Command-line interface for the password generator.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_CONFIG, MAX_LENGTH, MIN_LENGTH, PasswordConfig, clamp_length
from .errors import InvalidArgument
from .generator import generate_password_with_meta
from .random_source import SOURCE_NAMES, resolve_source
from .strength import estimate_entropy_bits, evaluate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and classify password strength.",
    )
    parser.add_argument(
        "-l",
        "--length",
        default=str(DEFAULT_CONFIG.length),
        help=f"Password length, clamped to {MIN_LENGTH}-{MAX_LENGTH} (default: {DEFAULT_CONFIG.length}).",
    )
    parser.add_argument("--no-digits", action="store_true", help="Leave 0-9 out of the pool.")
    parser.add_argument("--no-symbols", action="store_true", help="Leave symbols out of the pool.")
    parser.add_argument("-n", "--count", type=int, default=1, help="How many passwords to print.")
    parser.add_argument(
        "--source",
        choices=SOURCE_NAMES,
        default="system",
        help="Randomness source (default: system).",
    )
    parser.add_argument("--seed", help="Seed for --source seeded.")
    parser.add_argument(
        "-s",
        "--show-strength",
        action="store_true",
        help="Print strength label, score and entropy next to each password.",
    )
    parser.add_argument("--check", metavar="PASSWORD", help="Score an existing password and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _cmd_check(password: str) -> int:
    result = evaluate(password)
    print(f"Strength: {result.label.value} (score {result.score}/4)")
    print(f"Estimated entropy: {estimate_entropy_bits(password):.1f} bits")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    length = clamp_length(args.length)
    try:
        changed = float(args.length) != length
    except ValueError:
        changed = True
    if changed:
        logger.warning("Length %r clamped to %d", args.length, length)

    if args.count < 1:
        raise InvalidArgument(f"--count must be at least 1, got {args.count}.")
    if args.seed is not None and args.source != "seeded":
        logger.warning("--seed is ignored unless --source seeded is used")

    config = PasswordConfig(
        length=length,
        include_digits=not args.no_digits,
        include_symbols=not args.no_symbols,
    )
    rng = resolve_source(args.source, seed=args.seed)

    for _ in range(args.count):
        meta = generate_password_with_meta(config, rng)
        if args.show_strength:
            print(
                f"{meta.password}  [{meta.strength.label.value}, "
                f"score {meta.strength.score}/4, {meta.entropy_bits:.1f} bits]"
            )
        else:
            print(meta.password)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `passgen` console script, `python -m passgen`
    and `run_passgen.py`.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s - %(message)s",
    )

    try:
        if args.check is not None:
            return _cmd_check(args.check)
        return _cmd_generate(args)
    except InvalidArgument as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
