from __future__ import annotations

import argparse
import logging
import random
import string
from typing import List, Optional

from apicall.client import ApiService
from apicall.config import load_settings
from apicall.models import FuelPrice
from apicall.utils.logging_utils import get_logger

log = logging.getLogger("apicall.cli")


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _print_prices(items: List[FuelPrice]) -> int:
    if not items:
        log.warning("No data returned")
        return 1
    for p in items:
        when = p.date.isoformat() if p.date else "-"
        value = p.price_value
        print(f"{when}\t{value if value is not None else (p.price or '-')}")
    return 0


def cmd_diesel(args: argparse.Namespace) -> int:
    with ApiService(load_settings()) as api:
        return _print_prices(api.get_diesel_data())


def cmd_gas(args: argparse.Namespace) -> int:
    with ApiService(load_settings()) as api:
        return _print_prices(api.get_gas_data())


def cmd_trivia(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    with ApiService(load_settings()) as api:
        try:
            questions = api.get_trivia(args.amount, rng=rng)
        except ValueError as e:
            log.error("Invalid trivia request: %s", e)
            return 1
    if not questions:
        log.warning("No trivia questions returned")
        return 1
    for n, q in enumerate(questions, start=1):
        print(f"{n}. [{q.category} / {q.difficulty}] {q.question}")
        for letter, opt in zip(string.ascii_uppercase, q.options):
            mark = " *" if args.reveal and opt.is_correct else ""
            print(f"   {letter}) {opt.text}{mark}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="apicall", description="Fuel price and trivia feed client.")
    p.add_argument("--log-level", default=None, help="Logging level (INFO, DEBUG, WARNING).")

    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("diesel", help="Print diesel prices.")
    d.set_defaults(func=cmd_diesel)

    g = sub.add_parser("gas", help="Print Miles95 prices.")
    g.set_defaults(func=cmd_gas)

    t = sub.add_parser("trivia", help="Print Open Trivia DB questions.")
    t.add_argument("--amount", type=_positive_int, default=None, help="Number of questions (default from APICALL_TRIVIA_AMOUNT).")
    t.add_argument("--seed", type=int, default=None, help="Seed for reproducible answer order.")
    t.add_argument("--reveal", action="store_true", help="Mark the correct answer.")
    t.set_defaults(func=cmd_trivia)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger("apicall", args.log_level or load_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
