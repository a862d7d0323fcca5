"""Category management — commands and handlers."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from shared.logging import get_logger

from menu.category.category import Category
from menu.domain import menu

logger = get_logger(__name__)


@menu.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: String(max_length=500)


@menu.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: String(max_length=500)


@menu.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(
            name=command.name,
            description=command.description,
        )
        current_domain.repository_for(Category).add(category)
        logger.info("Category created", category_id=str(category.id), name=category.name)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.update_details(
            name=command.name,
            description=command.description,
        )
        repo.add(category)
