"""Menu board — one card per coffee item, as shown to customers."""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, Decimal, Identifier, String
from protean.utils.globals import current_domain

from menu.category.category import Category
from menu.category.events import CategoryDetailsUpdated
from menu.coffee_item.coffee_item import CoffeeItem
from menu.coffee_item.events import (
    CoffeeItemAvailabilityChanged,
    CoffeeItemCreated,
    CoffeeItemDetailsUpdated,
    CoffeeItemPriceChanged,
)
from menu.domain import menu


@menu.projection
class CoffeeItemCard:
    coffee_item_id: Identifier(identifier=True, required=True)
    name: String(required=True)
    description: String(max_length=500)
    price: Decimal(required=True)
    is_available: Boolean(default=True)
    category_id: Identifier(required=True)
    category_name: String()
    image_url: String(max_length=500)
    created_at: DateTime()
    updated_at: DateTime()


@menu.projector(projector_for=CoffeeItemCard, aggregates=[CoffeeItem, Category])
class CoffeeItemCardProjector:
    @on(CoffeeItemCreated)
    def on_coffee_item_created(self, event):
        try:
            category_name = current_domain.repository_for(Category).get(event.category_id).name
        except ObjectNotFoundError:
            category_name = None

        current_domain.repository_for(CoffeeItemCard).add(
            CoffeeItemCard(
                coffee_item_id=event.coffee_item_id,
                name=event.name,
                description=event.description,
                price=event.price,
                is_available=event.is_available,
                category_id=event.category_id,
                category_name=category_name,
                image_url=event.image_url,
                created_at=event.created_at,
                updated_at=event.created_at,
            )
        )

    @on(CoffeeItemDetailsUpdated)
    def on_details_updated(self, event):
        repo = current_domain.repository_for(CoffeeItemCard)
        card = repo.get(event.coffee_item_id)
        card.name = event.name
        card.description = event.description
        repo.add(card)

    @on(CoffeeItemPriceChanged)
    def on_price_changed(self, event):
        repo = current_domain.repository_for(CoffeeItemCard)
        card = repo.get(event.coffee_item_id)
        card.price = event.new_price
        card.updated_at = event.changed_at
        repo.add(card)

    @on(CoffeeItemAvailabilityChanged)
    def on_availability_changed(self, event):
        repo = current_domain.repository_for(CoffeeItemCard)
        card = repo.get(event.coffee_item_id)
        card.is_available = event.is_available
        card.updated_at = event.changed_at
        repo.add(card)

    @on(CategoryDetailsUpdated)
    def on_category_renamed(self, event):
        repo = current_domain.repository_for(CoffeeItemCard)
        cards = repo._dao.query.filter(category_id=event.category_id).limit(None).all().items
        for card in cards:
            card.category_name = event.name
            repo.add(card)
