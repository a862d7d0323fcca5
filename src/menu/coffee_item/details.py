"""Coffee item details and pricing — commands and handler."""

from protean import handle
from protean.fields import Decimal, Identifier, String
from protean.utils.globals import current_domain
from shared.logging import get_logger

from menu.coffee_item.coffee_item import CoffeeItem
from menu.domain import menu

logger = get_logger(__name__)


@menu.command(part_of="CoffeeItem")
class UpdateCoffeeItemDetails:
    coffee_item_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: String(required=True, max_length=500)
    price: Decimal(required=True)


@menu.command(part_of="CoffeeItem")
class ChangeCoffeeItemPrice:
    coffee_item_id: Identifier(required=True)
    price: Decimal(required=True)


@menu.command_handler(part_of=CoffeeItem)
class ManageCoffeeItemDetailsHandler:
    @handle(UpdateCoffeeItemDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(CoffeeItem)
        item = repo.get(command.coffee_item_id)
        item.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
        )
        repo.add(item)

    @handle(ChangeCoffeeItemPrice)
    def change_price(self, command):
        repo = current_domain.repository_for(CoffeeItem)
        item = repo.get(command.coffee_item_id)
        previous_price = item.price
        item.change_price(command.price)
        repo.add(item)

        logger.info(
            "Coffee item repriced",
            coffee_item_id=str(item.id),
            previous_price=str(previous_price),
            new_price=str(item.price),
        )
