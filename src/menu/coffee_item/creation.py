"""Coffee item creation — command and handler."""

from protean import handle
from protean.fields import Decimal, Identifier, String
from protean.utils.globals import current_domain
from shared.logging import get_logger

from menu.category.category import Category
from menu.coffee_item.coffee_item import CoffeeItem
from menu.domain import menu

logger = get_logger(__name__)


@menu.command(part_of="CoffeeItem")
class CreateCoffeeItem:
    name: String(required=True, max_length=100)
    description: String(required=True, max_length=500)
    price: Decimal(required=True)
    category_id: Identifier(required=True)
    image_url: String(max_length=500)


@menu.command_handler(part_of=CoffeeItem)
class CreateCoffeeItemHandler:
    @handle(CreateCoffeeItem)
    def create_coffee_item(self, command):
        # Raises ObjectNotFoundError for an unknown category
        current_domain.repository_for(Category).get(command.category_id)

        item = CoffeeItem.create(
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            image_url=command.image_url,
        )
        current_domain.repository_for(CoffeeItem).add(item)

        logger.info(
            "Coffee item added to menu",
            coffee_item_id=str(item.id),
            name=item.name,
            price=str(item.price),
        )
        return str(item.id)
