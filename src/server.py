"""Protean Engine runner for the Coffeehouse domains.

Starts an Engine that processes messages asynchronously for one domain:
- OutboxProcessor: publishes committed events to the broker
- StreamSubscriptions: invoke projectors and event handlers, including
  Ordering's handler for Menu price and availability events

Each Engine owns its event loop, so run one process per domain.

Usage:
    PROTEAN_ENV=production python src/server.py --domain menu
    PROTEAN_ENV=production python src/server.py --domain ordering
"""

import argparse

from protean.server.engine import Engine

DOMAIN_NAMES = ("menu", "ordering")


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "menu":
        from menu.domain import menu

        menu.init()
        return menu
    elif name == "ordering":
        from ordering.domain import ordering

        ordering.init()
        return ordering
    else:
        raise ValueError(f"Unknown domain: {name}")


def run(domain_name):
    Engine(_get_domain(domain_name)).run()


def build_parser():
    parser = argparse.ArgumentParser(description="Coffeehouse Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        required=True,
        help="Domain whose engine to run",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    run(args.domain)


if __name__ == "__main__":
    main()
