from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID, uuid7

from src.platform.exception.exceptions import ValidationError


@attrs.define(frozen=True)
class Client:
    id: UUID
    name: str
    email: str
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, name: str, email: str) -> 'Client':
        name = name.strip()
        email = email.strip()
        if not name:
            raise ValidationError('name is required')
        if not email:
            raise ValidationError('email is required')
        return cls(id=uuid7(), name=name, email=email)
