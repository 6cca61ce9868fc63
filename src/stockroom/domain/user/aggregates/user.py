from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from stockroom.domain.shared.exceptions import ValidationError
from stockroom.domain.shared.time import utc_now
from stockroom.domain.user.value_objects import Email, UserRole


def _require(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        msg = f"{field} is required"
        raise ValidationError(msg, details={"field": field})
    return value.strip()


class User:
    """
    User aggregate root.

    Holds the identity of an account holder. Each user is uniquely
    identified by a random UUID generated at creation time; the email is
    the natural key used at login. The password digest is not part of the
    aggregate.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone: str,
        role: Union[str, UserRole] = UserRole.USER,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id if id is not None else uuid4()
        self._first_name = first_name
        self._last_name = last_name
        self._phone = phone
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        """Create a new user, rejecting blank identity fields."""
        return cls(
            email=email,
            first_name=_require(first_name, "firstName"),
            last_name=_require(last_name, "lastName"),
            phone=_require(phone, "phone"),
            role=role,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
