"""User aggregate — a registered account with a hashed password and a role."""

from datetime import datetime

from passlib.context import CryptContext
from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from identity.domain import identity
from shared.auth import Role

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


@identity.aggregate
class User:
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password: String(required=True, max_length=255)  # passlib hash, never the plain text
    is_verified: Boolean(default=False)
    role: String(choices=Role, default=Role.USER.value)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if any(ch.isspace() for ch in email) or not local_part or "." not in domain_part.strip("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, first_name, last_name, email, password, role=Role.USER.value):
        now = datetime.now()
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email.strip().lower(),
            password=hash_password(password),
            is_verified=False,
            role=role,
            created_at=now,
            updated_at=now,
        )

    def check_password(self, password: str) -> bool:
        return pwd_context.verify(password, self.password)

    def verify(self):
        self.is_verified = True
        self.updated_at = datetime.now()

    def change_role(self, role):
        self.role = Role(role).value
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "is_verified": self.is_verified,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
