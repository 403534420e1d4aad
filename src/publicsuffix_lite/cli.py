"""publicsuffix-lite CLI entry point.

Usage: uv run publicsuffix-lite [command]
"""
import argparse
import logging
import sys

from publicsuffix_lite.resolver.domain_parser import DomainParser
from publicsuffix_lite.resolver.resolver import BareSuffixPolicy


def _add_rules_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--rules", required=True,
        help="Path to a Public Suffix List file (public_suffix_list.dat)",
    )
    p.add_argument(
        "--icann-only", action="store_true",
        help="Ignore rules from the PRIVATE section of the list.",
    )
    p.add_argument("hosts", nargs="+", metavar="HOST")


def _add_parse_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "parse",
        help="Print public suffix and registrable domain for each host.",
    )
    _add_rules_arguments(p)
    p.add_argument(
        "--strict", action="store_true",
        help="Treat a host that is itself a public suffix as an error.",
    )


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Report whether each host is a valid registrable domain.",
    )
    _add_rules_arguments(p)


def _load_parser(args: argparse.Namespace) -> DomainParser:
    policy = BareSuffixPolicy.REJECT if getattr(args, "strict", False) else BareSuffixPolicy.SUFFIX_ONLY
    return DomainParser.from_file(
        args.rules,
        include_private=not args.icann_only,
        bare_suffix_policy=policy,
    )


def _run_parse(args: argparse.Namespace) -> int:
    parser = _load_parser(args)
    status = 0
    for host in args.hosts:
        outcome = parser.resolve(host)
        if not outcome.ok:
            print(f"{host}\terror: {outcome.error.kind.name}")
            status = 1
            continue
        info = outcome.info
        print("\t".join([
            info.hostname,
            info.public_suffix,
            info.registrable_domain or "-",
            info.matched_rule.name,
        ]))
    return status


def _run_check(args: argparse.Namespace) -> int:
    parser = _load_parser(args)
    status = 0
    for host in args.hosts:
        valid = parser.is_valid_domain(host)
        print(f"{host}\t{'valid' if valid else 'invalid'}")
        if not valid:
            status = 1
    return status


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="publicsuffix-lite",
        description="Public Suffix List lookups -- pure Python, one rule file.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_parse_parser(subparsers)
    _add_check_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "parse":
            status = _run_parse(args)
        else:
            status = _run_check(args)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    sys.exit(status)
