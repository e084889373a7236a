"""CLI for pwtoolkit: score a password, suggest or generate policy-compliant passwords."""

import argparse
import logging
import random
import sys

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import load_policy_file
from .evaluator import breakdown, strength_label
from .toolkit import PasswordToolkit, create

EXIT_USAGE = 2


def build_toolkit(args) -> PasswordToolkit:
    options = load_policy_file(args.policy) if args.policy else {}
    # flags only override the file when given
    if args.min_length is not None:
        options["minimum_length"] = args.min_length
    if args.no_upper:
        options["require_uppercase"] = False
    if args.no_lower:
        options["require_lowercase"] = False
    if args.no_digits:
        options["require_digits"] = False
    if args.no_special:
        options["require_special"] = False
    if args.specials:
        options["allowed_special_characters"] = list(args.specials)
    rng = random.Random(args.seed) if args.seed is not None else None
    return create(options, rng=rng)


def cmd_score(args):
    tk = build_toolkit(args)
    terms = breakdown(args.password, tk.policy)
    header = f"Score: {terms['score']} / 100 - {strength_label(terms['score'])}"
    body = (
        f"Length: {terms['length']}\n"
        f"Uppercase term: {terms['uppercase']}\n"
        f"Lowercase term: {terms['lowercase']}\n"
        f"Digits: {terms['digits']}\n"
        f"Special: {terms['special']}\n"
        f"Requirements: {terms['requirements']}\n"
        f"Interior digits/symbols: {terms['interior']}\n"
        f"Deductions: -{terms['deductions']}"
    )
    print(Panel(body, title=header))


def cmd_suggest(args):
    tk = build_toolkit(args)
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", width=4)
    table.add_column("Password")
    table.add_column("Score", justify="right")
    table.add_column("Strength")
    for i, s in enumerate(tk.suggest(args.count)):
        table.add_row(str(i + 1), escape(s["password"]), str(s["score"]), strength_label(s["score"]))
    print(table)


def cmd_generate(args):
    tk = build_toolkit(args)
    for i in range(args.copies):
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(tk.generate())}")


def _add_policy_args(p):
    p.add_argument("--policy", type=str, help="JSON file with policy options")
    p.add_argument("--min-length", type=int, default=None, help="Minimum password length (default 8)")
    p.add_argument("--no-upper", action="store_true", help="Do not require uppercase")
    p.add_argument("--no-lower", action="store_true", help="Do not require lowercase")
    p.add_argument("--no-digits", action="store_true", help="Do not require digits")
    p.add_argument("--no-special", action="store_true", help="Do not require special characters")
    p.add_argument("--specials", type=str, help="Allowed special characters, e.g. '~-='")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")


def build_parser():
    parser = argparse.ArgumentParser(prog="pwtoolkit")
    parser.add_argument("-D", "--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password against the policy")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    _add_policy_args(sc)
    sc.set_defaults(func=cmd_score)

    sg = sub.add_parser("suggest", help="Suggest scored passwords")
    sg.add_argument("-n", "--count", type=int, default=5, help="How many suggestions")
    _add_policy_args(sg)
    sg.set_defaults(func=cmd_suggest)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    _add_policy_args(gen)
    gen.set_defaults(func=cmd_generate)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(EXIT_USAGE)


if __name__ == "__main__":
    main()
