"""
ParticipantPair Value Object - The unordered pair of users in a direct chat.

The pair is stored in canonical order (lower id first) so that {A, B} and
{B, A} compare and hash equal. This is the key the one-chat-per-pair
constraint is enforced on.
"""

from __future__ import annotations

from dataclasses import dataclass

from messenger.domain.exceptions.invalid_argument import InvalidArgumentError
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ParticipantPair:
    user_lower: UserId
    user_higher: UserId

    def __post_init__(self):
        if self.user_lower == self.user_higher:
            raise InvalidArgumentError("You cannot chat with yourself")
        if self.user_lower.value > self.user_higher.value:
            raise ValueError("ParticipantPair must be in canonical order")

    @classmethod
    def of(cls, first: UserId, second: UserId) -> ParticipantPair:
        """Build the canonical pair regardless of argument order."""
        if first.value <= second.value:
            return cls(user_lower=first, user_higher=second)
        return cls(user_lower=second, user_higher=first)

    @property
    def members(self) -> tuple[UserId, UserId]:
        return (self.user_lower, self.user_higher)

    def includes(self, user_id: UserId) -> bool:
        return user_id in self.members

    def other(self, viewer: UserId) -> UserId | None:
        """Return the member that is not ``viewer`` (None if viewer is not a member)."""
        if viewer == self.user_lower:
            return self.user_higher
        if viewer == self.user_higher:
            return self.user_lower
        return None

    def __str__(self) -> str:
        return f"{self.user_lower.value}:{self.user_higher.value}"
