"""Brand aggregate."""

from datetime import datetime

from protean.fields import Boolean, DateTime, String

from catalogue.domain import catalogue


@catalogue.aggregate
class Brand:
    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200, unique=True)
    image: String(max_length=500)
    show_on_main: Boolean(default=False)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    def update_details(self, name=None, url=None, image=None, show_on_main=None):
        if name is not None:
            self.name = name
        if url is not None:
            self.url = url
        if image is not None:
            self.image = image
        if show_on_main is not None:
            self.show_on_main = show_on_main
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "url": self.url,
            "image": self.image,
            "show_on_main": self.show_on_main,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
