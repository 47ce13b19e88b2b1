"""Tag management — commands and handlers."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.tag.tag import Tag


@catalogue.command(part_of="Tag")
class CreateTag:
    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200)


@catalogue.command(part_of="Tag")
class UpdateTag:
    tag_id: Identifier(required=True)
    name: String(max_length=100)
    url: String(max_length=200)


@catalogue.command(part_of="Tag")
class RemoveTag:
    tag_id: Identifier(required=True)


@catalogue.command_handler(part_of=Tag)
class ManageTagHandler:
    @handle(CreateTag)
    def create_tag(self, command):
        tag = Tag(name=command.name, url=command.url)
        current_domain.repository_for(Tag).add(tag)
        return str(tag.id)

    @handle(UpdateTag)
    def update_tag(self, command):
        repo = current_domain.repository_for(Tag)
        tag = repo.get(command.tag_id)
        tag.update_details(name=command.name, url=command.url)
        repo.add(tag)

    @handle(RemoveTag)
    def remove_tag(self, command):
        repo = current_domain.repository_for(Tag)
        tag = repo.get(command.tag_id)
        repo._dao.delete(tag)
