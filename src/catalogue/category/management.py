"""Category management — commands and handlers."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.domain import catalogue
from catalogue.parameter.parameter import Parameter
from shared.listing import find_by


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200)
    image: String(max_length=500)
    parent_id: Identifier()
    parameter_ids: Text()  # JSON array of parameter ids


@catalogue.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    url: String(max_length=200)
    image: String(max_length=500)
    parent_id: Identifier()
    parameter_ids: Text()


@catalogue.command(part_of="Category")
class RemoveCategory:
    category_id: Identifier(required=True)


def _resolve_parameters(parameter_ids_json):
    """Ensure every referenced parameter exists; raises ObjectNotFoundError otherwise."""
    if parameter_ids_json is None:
        return None
    ids = json.loads(parameter_ids_json)
    repo = current_domain.repository_for(Parameter)
    return [str(repo.get(parameter_id).id) for parameter_id in ids]


def _ensure_not_own_ancestor(category, parent_id):
    """Reject a parent that is the category itself or one of its descendants."""
    repo = current_domain.repository_for(Category)
    ancestor_id = str(parent_id)
    seen = set()
    while ancestor_id and ancestor_id not in seen:
        if ancestor_id == str(category.id):
            raise ValidationError({"parent_id": ["A category cannot be its own ancestor"]})
        seen.add(ancestor_id)
        next_id = repo.get(ancestor_id).parent_id
        ancestor_id = str(next_id) if next_id else None


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        parent_id = None
        if command.parent_id:
            parent_id = str(repo.get(command.parent_id).id)

        category = Category.create(
            name=command.name,
            url=command.url,
            image=command.image,
            parent_id=parent_id,
            parameter_ids=_resolve_parameters(command.parameter_ids),
        )
        repo.add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        if command.parent_id:
            _ensure_not_own_ancestor(category, command.parent_id)

        category.update_details(
            name=command.name,
            url=command.url,
            image=command.image,
            parent_id=command.parent_id,
            parameter_ids=_resolve_parameters(command.parameter_ids),
        )
        repo.add(category)

    @handle(RemoveCategory)
    def remove_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        # Children are re-rooted rather than deleted
        for child in find_by(Category, parent_id=str(category.id)):
            child.detach_from_parent()
            repo.add(child)

        repo._dao.delete(category)
