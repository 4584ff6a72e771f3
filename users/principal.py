from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """The identity a request acts as. Policies only ever see this."""

    id: int
    role: str

    @classmethod
    def from_user(cls, user) -> Optional["Principal"]:
        if user is None or not getattr(user, "is_authenticated", False):
            return None
        return cls(id=user.pk, role=user.role)
