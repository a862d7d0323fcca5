"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from menu.domain import menu


@menu.event(part_of="Category")
class CategoryCreated:
    """A new section was added to the menu."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    description: String()


@menu.event(part_of="Category")
class CategoryDetailsUpdated:
    """A menu section was renamed or its description changed."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    description: String()
