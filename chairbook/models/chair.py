"""Chair model definitions."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, field_validator

from chairbook.models.choices import normalize_choice


class ChairStatus(str, Enum):
    ACTIVE = 'active'
    INACTIVE = 'inactive'


STATUS_ALIASES = {
    'ativa': ChairStatus.ACTIVE,
    'inativa': ChairStatus.INACTIVE,
}


class Chair(BaseModel):
    """Represents a bookable chair."""

    id: int
    name: str
    location: str
    status: ChairStatus = ChairStatus.ACTIVE
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, value):
        return normalize_choice(value, ChairStatus, STATUS_ALIASES)

    @property
    def is_active(self) -> bool:
        return self.status == ChairStatus.ACTIVE
