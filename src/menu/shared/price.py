"""Menu price primitive.

Prices are exact decimals in the range (0, 10000]. Every mutation of a
CoffeeItem price goes through ``to_price`` so the range check is applied on
change as well as on creation.
"""

from decimal import Decimal, InvalidOperation

from protean.exceptions import ValidationError

MAX_PRICE = Decimal("10000")


def to_price(value, field="price"):
    """Return ``value`` as a validated ``Decimal`` price.

    Floats are converted through their shortest repr, so ``2.5`` becomes
    ``Decimal("2.5")`` rather than its binary expansion.

    Raises:
        ValidationError: keyed by ``field`` when the value is missing, not a
            number, or outside (0, 10000].
    """
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError({field: ["Price is required"]})

    try:
        price = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: [f"'{value}' is not a valid price"]}) from None

    if not price.is_finite():
        raise ValidationError({field: [f"'{value}' is not a valid price"]})

    if price <= 0 or price > MAX_PRICE:
        raise ValidationError({field: [f"Price must be greater than 0 and at most {MAX_PRICE}"]})

    return price
