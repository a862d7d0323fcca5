"""Coffeehouse database management CLI.

Creates and drops the tables of every aggregate, entity and projection in
each domain, against whatever database the active PROTEAN_ENV configures.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db
    PROTEAN_ENV=production python src/manage.py drop-db --domain ordering
"""

import argparse
import sys

DOMAIN_NAMES = ("menu", "ordering")


def _load_domains(names):
    from menu.domain import menu
    from ordering.domain import ordering

    all_domains = {"menu": menu, "ordering": ordering}
    return {name: all_domains[name] for name in (names or DOMAIN_NAMES)}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    for name, domain in _load_domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        with domain.domain_context():
            domain.setup_database()
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    for name, domain in _load_domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        with domain.domain_context():
            domain.drop_database()
        print(f"  {name} schema dropped.")

    print("Done.")


def build_parser():
    parser = argparse.ArgumentParser(description="Coffeehouse database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
