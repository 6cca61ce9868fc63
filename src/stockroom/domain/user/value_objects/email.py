"""Login email address of a user."""

import re
from dataclasses import dataclass

from stockroom.domain.user.exceptions import InvalidEmailError

# local@host.tld with a two-letter or longer top-level domain
_ADDRESS_RE = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """
    A syntactically valid email address, stored trimmed and lowercased.

    Two addresses that differ only in case or surrounding whitespace
    compare equal, which is what makes the address usable as the natural
    key for users.
    """

    value: str

    def __post_init__(self) -> None:
        candidate = (self.value or "").strip().lower()
        if not candidate:
            raise InvalidEmailError("Email cannot be empty")
        if _ADDRESS_RE.match(candidate) is None:
            raise InvalidEmailError(f"Invalid email format: {self.value}")

        object.__setattr__(self, "value", candidate)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value!r})"
