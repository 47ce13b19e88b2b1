"""Category aggregate root — the self-referencing tree products hang from."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from catalogue.domain import catalogue
from shared.listing import dump_ids, load_ids


@catalogue.aggregate
class Category:
    """A node in the catalogue tree.

    A category points at its parent (``parent_id``) and lists the parameters
    its products are described with. Children are found by querying on
    ``parent_id``; cycles are only prevented for direct self-parenting.
    """

    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200, unique=True)
    image: String(max_length=500)
    parent_id: Identifier()
    parameter_ids: Text()  # JSON array of parameter ids
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def cannot_be_its_own_parent(self):
        if self.parent_id is not None and str(self.parent_id) == str(self.id):
            raise ValidationError({"parent_id": ["A category cannot be its own parent"]})

    @property
    def parameters(self) -> list[str]:
        return load_ids(self.parameter_ids)

    @classmethod
    def create(cls, name, url, image=None, parent_id=None, parameter_ids=None):
        now = datetime.now()
        return cls(
            name=name,
            url=url,
            image=image,
            parent_id=parent_id,
            parameter_ids=dump_ids(parameter_ids),
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name=None, url=None, image=None, parent_id=None, parameter_ids=None):
        """Shallow merge: only the arguments that are not None change."""
        if name is not None:
            self.name = name
        if url is not None:
            self.url = url
        if image is not None:
            self.image = image
        if parent_id is not None:
            self.parent_id = parent_id
        if parameter_ids is not None:
            self.parameter_ids = dump_ids(parameter_ids)

        self.updated_at = datetime.now()

    def detach_from_parent(self):
        self.parent_id = None
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "url": self.url,
            "image": self.image,
            "parent_id": str(self.parent_id) if self.parent_id else None,
            "parameter_ids": self.parameters,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
