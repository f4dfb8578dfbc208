"""User model definitions."""

from enum import Enum

from pydantic import BaseModel, field_validator

from chairbook.models.choices import normalize_choice


class UserRole(str, Enum):
    USER = 'user'
    ATTENDANT = 'attendant'
    ADMIN = 'admin'


class UserStatus(str, Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


ROLE_ALIASES = {
    'usuario': UserRole.USER,
    'atendente': UserRole.ATTENDANT,
}

STATUS_ALIASES = {
    'pendente': UserStatus.PENDING,
    'aprovado': UserStatus.APPROVED,
    'reprovado': UserStatus.REJECTED,
}

STAFF_ROLES = frozenset({UserRole.ATTENDANT, UserRole.ADMIN})


def parse_role(value) -> UserRole | None:
    """Return the role for ``value``, or None when it names no known role.

    ``value`` may also be a User; only approved users carry their role.
    """
    if isinstance(value, User):
        return value.role if value.is_approved else None

    role = normalize_choice(value, UserRole, ROLE_ALIASES)
    if isinstance(role, UserRole):
        return role
    return None


def is_staff(role) -> bool:
    return parse_role(role) in STAFF_ROLES


class User(BaseModel):
    """Represents an application user."""

    id: int
    name: str = ''
    email: str = ''
    role: UserRole = UserRole.USER
    requested_role: UserRole | None = None
    status: UserStatus = UserStatus.PENDING

    @field_validator('role', 'requested_role', mode='before')
    @classmethod
    def normalize_role(cls, value):
        return normalize_choice(value, UserRole, ROLE_ALIASES)

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, value):
        return normalize_choice(value, UserStatus, STATUS_ALIASES)

    @property
    def is_approved(self) -> bool:
        return self.status == UserStatus.APPROVED
