"""
UserId Value Object
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserId:
    value: str  # user_id, presented as lower-case UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("UserId cannot be empty")

        # Validate UUID format and store the canonical spelling so that
        # equality and pair ordering do not depend on letter case.
        object.__setattr__(self, "value", str(UUID(self.value)))

    def __str__(self) -> str:
        return self.value
