"""Brand management — commands and handlers."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from catalogue.brand.brand import Brand
from catalogue.domain import catalogue


@catalogue.command(part_of="Brand")
class CreateBrand:
    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200)
    image: String(max_length=500)
    show_on_main: Boolean(default=False)


@catalogue.command(part_of="Brand")
class UpdateBrand:
    brand_id: Identifier(required=True)
    name: String(max_length=100)
    url: String(max_length=200)
    image: String(max_length=500)
    show_on_main: Boolean()


@catalogue.command(part_of="Brand")
class RemoveBrand:
    brand_id: Identifier(required=True)


@catalogue.command_handler(part_of=Brand)
class ManageBrandHandler:
    @handle(CreateBrand)
    def create_brand(self, command):
        brand = Brand(
            name=command.name,
            url=command.url,
            image=command.image,
            show_on_main=bool(command.show_on_main),
        )
        current_domain.repository_for(Brand).add(brand)
        return str(brand.id)

    @handle(UpdateBrand)
    def update_brand(self, command):
        repo = current_domain.repository_for(Brand)
        brand = repo.get(command.brand_id)
        brand.update_details(
            name=command.name,
            url=command.url,
            image=command.image,
            show_on_main=command.show_on_main,
        )
        repo.add(brand)

    @handle(RemoveBrand)
    def remove_brand(self, command):
        repo = current_domain.repository_for(Brand)
        brand = repo.get(command.brand_id)
        repo._dao.delete(brand)
