"""CoffeeItem aggregate root — a priced, orderable entry on the menu."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Decimal, Identifier, String

from menu.coffee_item.events import (
    CoffeeItemAvailabilityChanged,
    CoffeeItemCreated,
    CoffeeItemDetailsUpdated,
    CoffeeItemPriceChanged,
)
from menu.domain import menu
from menu.shared.price import to_price

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
IMAGE_URL_MAX_LENGTH = 500


def _check_text(errors, field, value, max_length):
    label = field.capitalize()
    if value is not None and not isinstance(value, str):
        errors[field] = [f"{label} must be text"]
    elif not value or not value.strip():
        errors[field] = [f"{label} is required"]
    elif len(value) > max_length:
        errors[field] = [f"{label} cannot exceed {max_length} characters"]


def _validated_details(name, description, price):
    """Validate all editable fields at once and return the coerced price.

    Every problem is reported in a single ``ValidationError``.
    """
    errors = {}
    _check_text(errors, "name", name, NAME_MAX_LENGTH)
    _check_text(errors, "description", description, DESCRIPTION_MAX_LENGTH)

    try:
        price = to_price(price)
    except ValidationError as exc:
        errors.update(exc.messages)

    if errors:
        raise ValidationError(errors)

    return price


@menu.aggregate
class CoffeeItem:
    """A drink or snack that customers can order.

    Construct through ``create``; afterwards the item changes only through
    ``update_details``, ``change_price`` and ``set_availability``, each of
    which validates before touching state and raises an event only when
    something actually changed.
    """

    name: String(required=True, max_length=NAME_MAX_LENGTH)
    description: String(required=True, max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal(required=True)
    is_available: Boolean(default=True)
    category_id: Identifier(required=True)
    image_url: String(max_length=IMAGE_URL_MAX_LENGTH)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description, price, category_id, image_url=None):
        errors = {}
        try:
            price = _validated_details(name, description, price)
        except ValidationError as exc:
            errors.update(exc.messages)

        if not category_id:
            errors["category_id"] = ["Category is required"]
        if image_url and len(image_url) > IMAGE_URL_MAX_LENGTH:
            errors["image_url"] = [f"Image URL cannot exceed {IMAGE_URL_MAX_LENGTH} characters"]

        if errors:
            raise ValidationError(errors)

        now = datetime.now()
        item = cls(
            name=name,
            description=description,
            price=price,
            is_available=True,
            category_id=category_id,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            CoffeeItemCreated(
                coffee_item_id=item.id,
                name=name,
                description=description,
                price=price,
                category_id=category_id,
                image_url=image_url,
                is_available=True,
                created_at=now,
            )
        )
        return item

    def update_details(self, name, description, price):
        new_price = _validated_details(name, description, price)

        if name != self.name or description != self.description:
            self.name = name
            self.description = description
            self.updated_at = datetime.now()
            self.raise_(
                CoffeeItemDetailsUpdated(
                    coffee_item_id=self.id,
                    name=name,
                    description=description,
                )
            )

        self._apply_price(new_price)

    def change_price(self, new_price):
        self._apply_price(to_price(new_price))

    def set_availability(self, is_available):
        is_available = bool(is_available)
        if is_available == self.is_available:
            return

        now = datetime.now()
        self.is_available = is_available
        self.updated_at = now
        self.raise_(
            CoffeeItemAvailabilityChanged(
                coffee_item_id=self.id,
                is_available=is_available,
                changed_at=now,
            )
        )

    def _apply_price(self, new_price):
        old_price = self.price
        if new_price == old_price:
            return

        now = datetime.now()
        self.price = new_price
        self.updated_at = now
        self.raise_(
            CoffeeItemPriceChanged(
                coffee_item_id=self.id,
                old_price=old_price,
                new_price=new_price,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Event buffer
    # -------------------------------------------------------------------
    def pending_events(self):
        """Events raised since the last successful save, as a copy."""
        return list(self._events)

    def clear_events(self):
        self._events.clear()
