"""Price snapshotting for new orders.

Turns the items a customer asked for into order lines carrying the unit
price the menu shows right now. The Order aggregate stores these prices and
never looks at the menu again.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from ordering.projections.menu_prices import MenuItemPrice


def snapshot_lines(items):
    """Resolve each requested item to a priced order line.

    Args:
        items: dicts with coffee_item_id, quantity and optional
            special_instructions.

    Returns:
        A list of dicts ready for ``Order.create``, each with the item's
        current ``unit_price``.

    Raises:
        ValidationError: when an item is unknown or currently unavailable.
            All offending items are reported together.
    """
    repo = current_domain.repository_for(MenuItemPrice)

    lines = []
    unknown = []
    unavailable = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError({"items": [f"Each item must be an object, got {item!r}"]})
        if not item.get("coffee_item_id"):
            raise ValidationError({"items": ["Every item needs a coffee_item_id"]})

        coffee_item_id = str(item["coffee_item_id"])
        try:
            menu_item = repo.get(coffee_item_id)
        except ObjectNotFoundError:
            unknown.append(coffee_item_id)
            continue

        if not menu_item.is_available:
            unavailable.append(coffee_item_id)
            continue

        lines.append(
            {
                "coffee_item_id": coffee_item_id,
                "quantity": item.get("quantity", 1),
                "unit_price": menu_item.price,
                "special_instructions": item.get("special_instructions"),
            }
        )

    errors = []
    if unknown:
        errors.append(f"Unknown coffee items: {', '.join(unknown)}")
    if unavailable:
        errors.append(f"Coffee items not available: {', '.join(unavailable)}")
    if errors:
        raise ValidationError({"items": errors})

    return lines
