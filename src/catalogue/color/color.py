"""Color aggregate — a color products and their variants come in."""

from datetime import datetime

from protean.fields import DateTime, String

from catalogue.domain import catalogue


@catalogue.aggregate
class Color:
    name: String(required=True, max_length=100)
    url: String(required=True, max_length=200, unique=True)
    code: String(max_length=20)  # e.g. "#FF0000"
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    def update_details(self, name=None, url=None, code=None):
        if name is not None:
            self.name = name
        if url is not None:
            self.url = url
        if code is not None:
            self.code = code
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "url": self.url,
            "code": self.code,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
