"""Parameter management — commands and handlers."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.parameter.parameter import Parameter


@catalogue.command(part_of="Parameter")
class CreateParameter:
    name: String(required=True, max_length=100)
    url: String(max_length=200)


@catalogue.command(part_of="Parameter")
class UpdateParameter:
    parameter_id: Identifier(required=True)
    name: String(max_length=100)
    url: String(max_length=200)


@catalogue.command(part_of="Parameter")
class RemoveParameter:
    parameter_id: Identifier(required=True)


@catalogue.command_handler(part_of=Parameter)
class ManageParameterHandler:
    @handle(CreateParameter)
    def create_parameter(self, command):
        parameter = Parameter(name=command.name, url=command.url)
        current_domain.repository_for(Parameter).add(parameter)
        return str(parameter.id)

    @handle(UpdateParameter)
    def update_parameter(self, command):
        repo = current_domain.repository_for(Parameter)
        parameter = repo.get(command.parameter_id)
        parameter.update_details(name=command.name, url=command.url)
        repo.add(parameter)

    @handle(RemoveParameter)
    def remove_parameter(self, command):
        repo = current_domain.repository_for(Parameter)
        parameter = repo.get(command.parameter_id)
        repo._dao.delete(parameter)
