"""Coffee item availability — command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from menu.coffee_item.coffee_item import CoffeeItem
from menu.domain import menu


@menu.command(part_of="CoffeeItem")
class SetCoffeeItemAvailability:
    coffee_item_id: Identifier(required=True)
    is_available: Boolean(required=True)


@menu.command_handler(part_of=CoffeeItem)
class ManageAvailabilityHandler:
    @handle(SetCoffeeItemAvailability)
    def set_availability(self, command):
        repo = current_domain.repository_for(CoffeeItem)
        item = repo.get(command.coffee_item_id)
        item.set_availability(command.is_available)
        repo.add(item)
