from datetime import UTC, datetime
from decimal import Decimal

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def menu_item():
    """Put a coffee item on Ordering's local price list, as the Menu domain would."""
    from ordering.order.menu_events import MenuPriceEventHandler
    from shared.events.menu import CoffeeItemCreated

    def _add(coffee_item_id, price, name=None, is_available=True):
        MenuPriceEventHandler().on_coffee_item_created(
            CoffeeItemCreated(
                coffee_item_id=coffee_item_id,
                name=name or coffee_item_id.title(),
                description="From the menu",
                price=Decimal(str(price)),
                category_id="cat-espresso",
                is_available=is_available,
                created_at=datetime.now(UTC),
            )
        )
        return coffee_item_id

    return _add
