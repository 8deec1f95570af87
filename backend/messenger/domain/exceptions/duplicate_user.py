"""
DuplicateUserError - Raised by UserRepository.save when another user already
holds the same email or external identity.
"""


class DuplicateUserError(Exception):
    """A unique user field is taken by a different record."""

    def __init__(self, field: str = "email"):
        super().__init__(f"User with this {field} already exists")
        self.field = field
