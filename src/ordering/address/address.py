"""Address aggregate — a delivery address saved by a user."""

from datetime import datetime

from protean.fields import Boolean, DateTime, Identifier, String

from ordering.domain import ordering

_DETAIL_FIELDS = (
    "receiver_name",
    "receiver_phone",
    "address",
    "room_or_office",
    "door",
    "floor",
    "ring_bell",
    "zip_code",
)


@ordering.aggregate
class Address:
    user_id = Identifier(required=True)
    receiver_name = String(required=True, max_length=150)
    receiver_phone = String(required=True, max_length=30)
    address = String(required=True, max_length=500)
    room_or_office = String(max_length=50)
    door = String(max_length=50)
    floor = String(max_length=20)
    ring_bell = Boolean(default=False)
    zip_code = String(max_length=20)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    def update_details(self, **details):
        """Shallow merge; unknown keys are ignored and ``None`` keeps the stored value."""
        for field_name in _DETAIL_FIELDS:
            value = details.get(field_name)
            if value is not None:
                setattr(self, field_name, value)
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        view = {"id": str(self.id), "user_id": str(self.user_id)}
        view.update({field_name: getattr(self, field_name) for field_name in _DETAIL_FIELDS})
        view["created_at"] = self.created_at.isoformat() if self.created_at else None
        view["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return view
