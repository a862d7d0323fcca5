"""Category aggregate root for grouping coffee items on the menu."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from menu.domain import menu

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def _validate(name, description):
    errors = {}
    if name is not None and not isinstance(name, str):
        errors["name"] = ["Category name must be text"]
    elif not name or not name.strip():
        errors["name"] = ["Category name is required"]
    elif len(name) > NAME_MAX_LENGTH:
        errors["name"] = [f"Category name cannot exceed {NAME_MAX_LENGTH} characters"]

    if description is not None and not isinstance(description, str):
        errors["description"] = ["Category description must be text"]
    elif description and len(description) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = [f"Category description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"]

    if errors:
        raise ValidationError(errors)


@menu.aggregate
class Category:
    """A section of the menu board, such as "Espresso Drinks" or "Pastries"."""

    name: String(required=True, max_length=NAME_MAX_LENGTH)
    description: String(max_length=DESCRIPTION_MAX_LENGTH)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description=None):
        from menu.category.events import CategoryCreated

        _validate(name, description)

        now = datetime.now()
        category = cls(
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                description=description,
            )
        )
        return category

    def update_details(self, name, description=None):
        from menu.category.events import CategoryDetailsUpdated

        _validate(name, description)

        self.name = name
        self.description = description
        self.updated_at = datetime.now()

        self.raise_(
            CategoryDetailsUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
            )
        )
