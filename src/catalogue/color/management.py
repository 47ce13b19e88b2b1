"""Color management — commands and handlers."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from catalogue.color.color import Color
from catalogue.domain import catalogue


@catalogue.command(part_of="Color")
class CreateColor:
    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200)
    code: String(max_length=20)


@catalogue.command(part_of="Color")
class UpdateColor:
    color_id: Identifier(required=True)
    name: String(max_length=100)
    url: String(max_length=200)
    code: String(max_length=20)


@catalogue.command(part_of="Color")
class RemoveColor:
    color_id: Identifier(required=True)


@catalogue.command_handler(part_of=Color)
class ManageColorHandler:
    @handle(CreateColor)
    def create_color(self, command):
        color = Color(name=command.name, url=command.url, code=command.code)
        current_domain.repository_for(Color).add(color)
        return str(color.id)

    @handle(UpdateColor)
    def update_color(self, command):
        repo = current_domain.repository_for(Color)
        color = repo.get(command.color_id)
        color.update_details(name=command.name, url=command.url, code=command.code)
        repo.add(color)

    @handle(RemoveColor)
    def remove_color(self, command):
        repo = current_domain.repository_for(Color)
        color = repo.get(command.color_id)
        repo._dao.delete(color)
