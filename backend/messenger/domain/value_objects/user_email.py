"""
UserEmail Value Object - Wraps user email with validation.

Emails are stored trimmed and lower-cased so uniqueness is case-insensitive.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if not normalized or "@" not in normalized:
            raise ValueError(f"Invalid user email: {self.value}")
        # frozen dataclass: bypass __setattr__ to store the normalized form
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
