"""PassForge command-line interface.

Usage examples:
    python -m passforge generate -n 20 -c 5
    python -m passforge generate --no-symbols --exclude-ambiguous
    python -m passforge score 'Abcdefgh12345!'
    python -m passforge history export -o ~/Downloads
"""

import argparse
import logging
import sys

from passforge import (
    DEFAULT_LENGTH,
    MAX_SCORE,
    CharsetOptions,
    EmptyCharsetError,
    HistoryStoreError,
    InvalidLengthError,
    generate_password,
    score_strength,
)
from passforge.config import PassforgeConfig, load_config
from passforge.history import JsonFileHistoryStore, PasswordHistory, write_export

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate random passwords and rate their strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, 4-50 (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-numbers", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument(
        "-x", "--exclude-ambiguous",
        action="store_true",
        help="Leave out look-alike characters (0 O 1 l I)",
    )
    gen_p.add_argument(
        "--no-history",
        action="store_true",
        help="Do not record generated passwords in history",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Rate password strength")
    score_p.add_argument("passwords", nargs="*", help="Passwords to rate")
    score_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    # ── history ────────────────────────────────────────────────────────
    hist_p = sub.add_parser("history", help="Show, clear or export history")
    hist_p.add_argument(
        "action", nargs="?", default="show",
        choices=["show", "clear", "export"],
    )
    hist_p.add_argument(
        "-o", "--output", default=".",
        help="Directory for the export file (default: current directory)",
    )

    args = parser.parse_args(argv)
    try:
        config = load_config()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    _setup_logging("DEBUG" if args.verbose else config.log_level)

    try:
        if args.command == "generate":
            return _cmd_generate(args, config)
        if args.command == "score":
            return _cmd_score(args)
        if args.command == "history":
            return _cmd_history(args, config)
    except HistoryStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _open_history(config: PassforgeConfig) -> PasswordHistory:
    return PasswordHistory(
        JsonFileHistoryStore(config.history_path),
        capacity=config.history_capacity,
    )


def _bar(score: int) -> str:
    return "#" * score + "-" * (MAX_SCORE - score)


def _cmd_generate(args: argparse.Namespace, config: PassforgeConfig) -> int:
    options = CharsetOptions(
        include_uppercase=not args.no_uppercase,
        include_lowercase=not args.no_lowercase,
        include_numbers=not args.no_numbers,
        include_symbols=not args.no_symbols,
        exclude_ambiguous=args.exclude_ambiguous,
    )

    if args.count < 1:
        print(f"Error: count must be at least 1, got {args.count}", file=sys.stderr)
        return 2

    passwords = []
    try:
        for _ in range(args.count):
            passwords.append(generate_password(args.length, options))
    except EmptyCharsetError:
        print("Error: select at least one character type", file=sys.stderr)
        return 1
    except InvalidLengthError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    history = None if args.no_history else _open_history(config)
    for pwd in passwords:
        report = score_strength(pwd)
        print(f"  {pwd}  ({report['label']}, {report['score']}/{MAX_SCORE})")
        if history is not None:
            history.add(pwd)

    logger.debug("Generated %d password(s)", len(passwords))
    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        try:
            with open(args.file) as f:
                passwords.extend(line.rstrip("\r\n") for line in f if line.strip())
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
            return 1

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    for pwd in passwords:
        report = score_strength(pwd)
        print(f"  [{_bar(report['score'])}] {report['label']:<6} "
              f"({report['score']}/{MAX_SCORE})  '{pwd}'")

    return 0


def _cmd_history(args: argparse.Namespace, config: PassforgeConfig) -> int:
    history = _open_history(config)

    if args.action == "clear":
        history.clear()
        print("  History cleared")
        return 0

    if args.action == "export":
        path = write_export(history, args.output)
        print(f"  Exported {len(history)} password(s) to {path}")
        return 0

    if not len(history):
        print("  History is empty")
        return 0
    for i, pwd in enumerate(history, 1):
        print(f"  {i:>2}. {pwd}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
