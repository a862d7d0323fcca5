"""Ordering bounded context — customer orders and their lifecycle.

Orders move Pending → InProgress → Ready → Completed as a barista works
them, and may be cancelled at any point before completion. Menu prices are
copied in from Menu domain events so an order never reads the menu directly.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

ordering = Domain(name="ordering")
